"""Descriptions of operation parameters and how they are combined."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from oapigen.gotypes import Schema
from oapigen.spec import Parameter


class OperationError(ValueError):
    """Raised when an operation's description is inconsistent."""


_DEFAULT_STYLES = {"path": "simple", "header": "simple", "query": "form", "cookie": "form"}
_DEFAULT_EXPLODE = {"path": False, "header": False, "query": True, "cookie": True}


@dataclass
class ParameterDefinition:
    """A parameter of an operation together with its generated type."""

    param_name: str = ""
    location: str = ""
    required: bool = False
    spec: Parameter = field(default_factory=Parameter)
    schema: Schema = field(default_factory=Schema)

    def type_def(self) -> str:
        """Return the parameter's type without a pointer marker."""
        return self.schema.type_decl()

    def json_tag(self) -> str:
        """Return the JSON struct tag, with omitempty for optional parameters."""
        if self.required:
            return f'`json:"{self.param_name}"`'
        return f'`json:"{self.param_name},omitempty"`'

    def is_styled(self) -> bool:
        """Return whether the parameter is described by a schema, not content."""
        return self.spec.schema is not None

    def style(self) -> str:
        """Return the serialisation style, defaulting by location."""
        if self.spec.style:
            return self.spec.style
        try:
            return _DEFAULT_STYLES[self.spec.location]
        except KeyError:
            raise OperationError("unknown parameter format") from None

    def explode(self) -> bool:
        """Return whether values are exploded, defaulting by location."""
        if self.spec.explode is not None:
            return self.spec.explode
        try:
            return _DEFAULT_EXPLODE[self.spec.location]
        except KeyError:
            raise OperationError("unknown parameter format") from None

    def indirect_optional(self) -> bool:
        """Return whether an optional value is held through a pointer."""
        return not self.required and not self.schema.skip_optional_pointer


def find_parameter(
    params: Iterable[ParameterDefinition], name: str
) -> ParameterDefinition | None:
    """Return the first parameter with the given name, or None."""
    return next((param for param in params if param.param_name == name), None)


def filter_parameter_definition_by_type(
    params: Iterable[ParameterDefinition], location: str
) -> list[ParameterDefinition]:
    """Return the parameters found in the given location, in order."""
    return [param for param in params if param.location == location]


def combine_operation_parameters(
    global_params: Iterable[ParameterDefinition],
    local_params: Iterable[ParameterDefinition],
) -> list[ParameterDefinition]:
    """Merge path-level and operation-level parameters, preferring local ones.

    Local parameters come first; a global parameter shadowed by a local one
    is dropped. Duplicates within either list raise OperationError.
    """
    combined: list[ParameterDefinition] = []
    origin: dict[tuple[str, str], str] = {}
    for param in local_params:
        key = (param.location, param.param_name)
        if key in origin:
            raise OperationError(f"duplicate local parameter {param.location}/{param.param_name}")
        origin[key] = "local"
        combined.append(param)
    for param in global_params:
        key = (param.location, param.param_name)
        seen = origin.get(key)
        if seen is None:
            origin[key] = "global"
            combined.append(param)
        elif seen == "global":
            raise OperationError(f"duplicate global parameter {param.location}/{param.param_name}")
    return combined