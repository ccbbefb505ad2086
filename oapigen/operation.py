"""Description of one operation, gathered for the code templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from oapigen.bodies import RequestBodyDefinition
from oapigen.gotypes import TypeDefinition
from oapigen.params import OperationError, ParameterDefinition
from oapigen.responses import ResponseDefinition
from oapigen.security import SecurityDefinition


@dataclass
class OperationDefinition:
    """An operation with its parameters, bodies, responses and helper types."""

    operation_id: str = ""
    path_params: list[ParameterDefinition] = field(default_factory=list)
    header_params: list[ParameterDefinition] = field(default_factory=list)
    query_params: list[ParameterDefinition] = field(default_factory=list)
    cookie_params: list[ParameterDefinition] = field(default_factory=list)
    type_definitions: list[TypeDefinition] = field(default_factory=list)
    security_definitions: list[SecurityDefinition] = field(default_factory=list)
    body_required: bool = False
    bodies: list[RequestBodyDefinition] = field(default_factory=list)
    responses: list[ResponseDefinition] = field(default_factory=list)
    summary: str = ""
    method: str = ""
    path: str = ""
    spec: Any = None

    def params(self) -> list[ParameterDefinition]:
        """Return query, header and cookie parameters, in that order."""
        return [*self.query_params, *self.header_params, *self.cookie_params]

    def all_params(self) -> list[ParameterDefinition]:
        """Return every parameter, path parameters last."""
        return [*self.params(), *self.path_params]

    def requires_param_object(self) -> bool:
        """Return whether non-path parameters must be bundled into an object."""
        return bool(self.params())

    def has_body(self) -> bool:
        """Return whether the operation declares a request body."""
        return self.spec is not None and getattr(self.spec, "request_body", None) is not None

    def summary_as_comment(self) -> str:
        """Return the summary as line comments, or an empty string."""
        if not self.summary:
            return ""
        text = self.summary[:-1] if self.summary.endswith("\n") else self.summary
        return "\n".join("// " + line for line in text.split("\n"))

    def has_masked_request_content_types(self) -> bool:
        """Return whether any request body has a wildcard content type."""
        return any(not body.is_fixed_content_type() for body in self.bodies)


def generate_default_operation_id(
    op_name: str, request_path: str, to_camel_case: Callable[[str], str]
) -> str:
    """Build an operation id from the method and the path's segments."""
    if op_name == "":
        raise OperationError("operation name cannot be an empty string")
    if request_path == "":
        raise OperationError("request path cannot be an empty string")
    parts = [op_name.lower(), *(part for part in request_path.split("/") if part)]
    return to_camel_case("-".join(parts))