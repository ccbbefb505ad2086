"""Settings that control what the code generator produces."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable


class ConfigurationError(ValueError):
    """Raised when a configuration is malformed or inconsistent."""


def _key(name: str, convert: Callable[[Any, str], Any], **kwargs: Any) -> Any:
    return field(metadata={"yaml": name, "convert": convert}, **kwargs)


def _as_bool(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{where}: expected a boolean, got {type(value).__name__}")
    return value


def _as_int(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{where}: expected an integer, got {type(value).__name__}")
    return value


def _as_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{where}: expected a string, got {type(value).__name__}")
    return value


def _as_str_list(value: Any, where: str) -> list[str]:
    if not isinstance(value, list):
        raise ConfigurationError(f"{where}: expected a list, got {type(value).__name__}")
    return [_as_str(item, where) for item in value]


def _as_str_map(value: Any, where: str) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{where}: expected a mapping, got {type(value).__name__}")
    return {_as_str(k, where): _as_str(v, f"{where}.{k}") for k, v in value.items()}


def _load(cls: type, data: Any, where: str) -> Any:
    """Build a settings dataclass from a mapping keyed by its YAML names."""
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{where or 'configuration'}: expected a mapping")
    kwargs = {}
    for f in dataclasses.fields(cls):
        key = f.metadata.get("yaml")
        if key is None or data.get(key) is None:
            continue
        kwargs[f.name] = f.metadata["convert"](data[key], f"{where}{key}")
    return cls(**kwargs)


@dataclass
class AdditionalImport:
    """An extra import to add to the generated code."""

    alias: str = _key("alias", _as_str, default="")
    package: str = _key("package", _as_str, default="")


@dataclass
class GenerateOptions:
    """Which kinds of output to generate."""

    iris_server: bool = _key("iris-server", _as_bool, default=False)
    chi_server: bool = _key("chi-server", _as_bool, default=False)
    fiber_server: bool = _key("fiber-server", _as_bool, default=False)
    echo_server: bool = _key("echo-server", _as_bool, default=False)
    gin_server: bool = _key("gin-server", _as_bool, default=False)
    gorilla_server: bool = _key("gorilla-server", _as_bool, default=False)
    strict: bool = _key("strict-server", _as_bool, default=False)
    client: bool = _key("client", _as_bool, default=False)
    models: bool = _key("models", _as_bool, default=False)
    embedded_spec: bool = _key("embedded-spec", _as_bool, default=False)


@dataclass
class CompatibilityOptions:
    """Switches that restore older generator behaviour."""

    old_merge_schemas: bool = _key("old-merge-schemas", _as_bool, default=False)
    old_enum_conflicts: bool = _key("old-enum-conflicts", _as_bool, default=False)
    old_aliasing: bool = _key("old-aliasing", _as_bool, default=False)
    disable_flatten_additional_properties: bool = _key(
        "disable-flatten-additional-properties", _as_bool, default=False
    )
    disable_required_readonly_as_pointer: bool = _key(
        "disable-required-readonly-as-pointer", _as_bool, default=False
    )
    always_prefix_enum_values: bool = _key("always-prefix-enum-values", _as_bool, default=False)
    apply_chi_middleware_first_to_last: bool = _key(
        "apply-chi-middleware-first-to-last", _as_bool, default=False
    )
    apply_gorilla_middleware_first_to_last: bool = _key(
        "apply-gorilla-middleware-first-to-last", _as_bool, default=False
    )
    circular_reference_limit: int = _key("circular-reference-limit", _as_int, default=0)


@dataclass
class OutputOptions:
    """Options that modify the generated output."""

    skip_fmt: bool = _key("skip-fmt", _as_bool, default=False)
    skip_prune: bool = _key("skip-prune", _as_bool, default=False)
    include_tags: list[str] = _key("include-tags", _as_str_list, default_factory=list)
    exclude_tags: list[str] = _key("exclude-tags", _as_str_list, default_factory=list)
    user_templates: dict[str, str] = _key("user-templates", _as_str_map, default_factory=dict)
    exclude_schemas: list[str] = _key("exclude-schemas", _as_str_list, default_factory=list)
    response_type_suffix: str = _key("response-type-suffix", _as_str, default="")
    client_type_name: str = _key("client-type-name", _as_str, default="")
    initialism_overrides: bool = _key("initialism-overrides", _as_bool, default=False)


def _as_imports(value: Any, where: str) -> list[AdditionalImport]:
    if not isinstance(value, list):
        raise ConfigurationError(f"{where}: expected a list, got {type(value).__name__}")
    return [_load(AdditionalImport, item, f"{where}.") for item in value]


@dataclass
class Configuration:
    """Complete code generation configuration."""

    package_name: str = _key("package", _as_str, default="")
    generate: GenerateOptions = _key(
        "generate", lambda v, k: _load(GenerateOptions, v, f"{k}."), default_factory=GenerateOptions
    )
    compatibility: CompatibilityOptions = _key(
        "compatibility",
        lambda v, k: _load(CompatibilityOptions, v, f"{k}."),
        default_factory=CompatibilityOptions,
    )
    output_options: OutputOptions = _key(
        "output-options", lambda v, k: _load(OutputOptions, v, f"{k}."), default_factory=OutputOptions
    )
    import_mapping: dict[str, str] = _key("import-mapping", _as_str_map, default_factory=dict)
    additional_imports: list[AdditionalImport] = _key(
        "additional-imports", _as_imports, default_factory=list
    )
    no_vcs_version_override: str | None = None

    @classmethod
    def from_mapping(cls, data: Any) -> Configuration:
        """Build a configuration from a mapping using the YAML key names."""
        return _load(cls, data, "")

    def update_defaults(self) -> Configuration:
        """Return a copy with sensible defaults for unset generation options."""
        if self.generate == GenerateOptions():
            return dataclasses.replace(
                self,
                generate=GenerateOptions(echo_server=True, models=True, embedded_spec=True),
            )
        return dataclasses.replace(self)

    def validate(self) -> None:
        """Raise ConfigurationError if the configuration is not usable."""
        if not self.package_name:
            raise ConfigurationError("package name must be specified")
        gen = self.generate
        servers = [gen.iris_server, gen.chi_server, gen.fiber_server, gen.echo_server, gen.gin_server]
        if sum(servers) > 1:
            raise ConfigurationError("only one server type is supported at a time")