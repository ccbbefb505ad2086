"""Parsing of the vendor extensions the generator understands."""

from __future__ import annotations

from typing import Any

EXT_PROP_GO_TYPE = "x-go-type"
EXT_PROP_GO_TYPE_SKIP_OPTIONAL_POINTER = "x-go-type-skip-optional-pointer"
EXT_PROP_GO_IMPORT = "x-go-type-import"
EXT_GO_NAME = "x-go-name"
EXT_GO_TYPE_NAME = "x-go-type-name"
EXT_PROP_GO_JSON_IGNORE = "x-go-json-ignore"
EXT_PROP_OMIT_EMPTY = "x-omitempty"
EXT_PROP_EXTRA_TAGS = "x-oapi-codegen-extra-tags"
EXT_ENUM_VAR_NAMES = "x-enum-varnames"
EXT_ENUM_NAMES = "x-enumNames"
EXT_DEPRECATION_REASON = "x-deprecated-reason"


class ExtensionError(TypeError):
    """Raised when an extension value has the wrong type."""


def _conversion_error(value: Any) -> ExtensionError:
    return ExtensionError(f"failed to convert type: {type(value).__name__}")


def ext_string(value: Any) -> str:
    """Return the extension value as a string."""
    if not isinstance(value, str):
        raise _conversion_error(value)
    return value


def _ext_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise _conversion_error(value)
    return value


def ext_type_name(value: Any) -> str:
    """Parse the value of x-go-type or x-go-type-name."""
    return ext_string(value)


def ext_parse_prop_go_type_skip_optional_pointer(value: Any) -> bool:
    """Parse the value of x-go-type-skip-optional-pointer."""
    return _ext_bool(value)


def ext_parse_go_field_name(value: Any) -> str:
    """Parse the value of x-go-name."""
    return ext_string(value)


def ext_parse_omit_empty(value: Any) -> bool:
    """Parse the value of x-omitempty."""
    return _ext_bool(value)


def ext_extra_tags(value: Any) -> dict[str, str]:
    """Parse the mapping of x-oapi-codegen-extra-tags."""
    if not isinstance(value, dict):
        raise _conversion_error(value)
    tags = {}
    for key, tag in value.items():
        if not isinstance(tag, str):
            raise _conversion_error(tag)
        tags[str(key)] = tag
    return tags


def ext_parse_go_json_ignore(value: Any) -> bool:
    """Parse the value of x-go-json-ignore."""
    return _ext_bool(value)


def ext_parse_enum_var_names(value: Any) -> list[str]:
    """Parse the list of x-enum-varnames or x-enumNames."""
    if not isinstance(value, (list, tuple)):
        raise _conversion_error(value)
    names = []
    for name in value:
        if not isinstance(name, str):
            raise _conversion_error(name)
        names.append(name)
    return names


def ext_parse_deprecation_reason(value: Any) -> str:
    """Parse the value of x-deprecated-reason."""
    return ext_string(value)