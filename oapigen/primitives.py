"""Mapping of non-object OpenAPI types and formats to generated types."""

from __future__ import annotations

from dataclasses import dataclass


class SchemaError(ValueError):
    """Raised when a schema's type or format cannot be represented."""


@dataclass(frozen=True)
class PrimitiveType:
    """The generated type for a primitive schema."""

    go_type: str
    skip_optional_pointer: bool = False


_INTEGER_FORMATS = frozenset(
    {"int64", "int32", "int16", "int8", "int", "uint64", "uint32", "uint16", "uint8", "uint"}
)

_STRING_FORMATS = {
    "byte": "[]byte",
    "email": "openapi_types.Email",
    "date": "openapi_types.Date",
    "date-time": "time.Time",
    "json": "json.RawMessage",
    "uuid": "openapi_types.UUID",
    "binary": "openapi_types.File",
}


def integer_go_type(fmt: str) -> str:
    """Return the integer type for a format, int when the format is unknown."""
    return fmt if fmt in _INTEGER_FORMATS else "int"


def number_go_type(fmt: str) -> str:
    """Return the floating point type for a number format."""
    if fmt == "double":
        return "float64"
    if fmt in ("float", ""):
        return "float32"
    raise SchemaError(f"invalid number format: {fmt}")


def primitive_go_type(schema_type: str, fmt: str = "") -> PrimitiveType:
    """Return the generated type for an integer, number, boolean or string schema."""
    if schema_type == "integer":
        return PrimitiveType(integer_go_type(fmt))
    if schema_type == "number":
        return PrimitiveType(number_go_type(fmt))
    if schema_type == "boolean":
        if fmt:
            raise SchemaError(f"invalid format ({fmt}) for boolean")
        return PrimitiveType("bool")
    if schema_type == "string":
        return PrimitiveType(_STRING_FORMATS.get(fmt, "string"), skip_optional_pointer=fmt == "json")
    raise SchemaError(f"unhandled Schema type: {schema_type}")