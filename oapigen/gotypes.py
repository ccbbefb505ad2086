"""Descriptions of generated types, shared by the code templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from oapigen.spec import SchemaObject


def _upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


@dataclass
class Discriminator:
    """Which property of a union names the stored type, and its mapping."""

    mapping: dict[str, str] = field(default_factory=dict)
    property: str = ""

    def json_tag(self) -> str:
        """Return the JSON struct tag for the discriminator property."""
        return f'`json:"{self.property}"`'


class UnionElement(str):
    """A possible member type of a oneOf/anyOf union, e.g. externalRef0.SomeType."""

    def method(self) -> str:
        """Return the suffix used for the union's As/From/Merge helpers."""
        return "".join(_upper_first(part) for part in self.split("."))


@dataclass
class Schema:
    """A schema as a generated type, with helper data for the templates."""

    go_type: str = ""
    ref_type: str = ""
    array_type: Schema | None = None
    enum_values: dict[str, str] = field(default_factory=dict)
    properties: list[Property] = field(default_factory=list)
    has_additional_properties: bool = False
    additional_properties_type: Schema | None = None
    additional_types: list[TypeDefinition] = field(default_factory=list)
    skip_optional_pointer: bool = False
    description: str = ""
    union_elements: list[UnionElement] = field(default_factory=list)
    discriminator: Discriminator | None = None
    define_via_alias: bool = False
    oapi_schema: SchemaObject | None = None

    def is_ref(self) -> bool:
        """Return whether the schema names a predefined type."""
        return self.ref_type != ""

    def type_decl(self) -> str:
        """Return the type to use in declarations."""
        return self.ref_type if self.is_ref() else self.go_type

    def add_property(self, prop: Property) -> None:
        """Append a property; identical duplicates are allowed, conflicts raise ValueError."""
        for existing in self.properties:
            if existing.json_field_name == prop.json_field_name and not properties_equal(existing, prop):
                raise ValueError(
                    f"property '{existing.json_field_name}' already exists with a different type"
                )
        self.properties.append(prop)

    def get_additional_type_defs(self) -> list[TypeDefinition]:
        """Return helper type definitions from properties, then from this schema."""
        result = [td for prop in self.properties for td in prop.schema.get_additional_type_defs()]
        result.extend(self.additional_types)
        return result


@dataclass
class Property:
    """A named field of an object schema."""

    description: str = ""
    json_field_name: str = ""
    schema: Schema = field(default_factory=Schema)
    required: bool = False
    nullable: bool = False
    read_only: bool = False
    write_only: bool = False
    needs_form_tag: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)
    deprecated: bool = False

    def go_type_def(self, disable_required_readonly_as_pointer: bool = False) -> str:
        """Return the field type, as a pointer where the field may be absent."""
        type_def = self.schema.type_decl()
        pointer = (
            not self.required
            or self.nullable
            or (self.read_only and (not self.required or not disable_required_readonly_as_pointer))
            or self.write_only
        )
        if not self.schema.skip_optional_pointer and pointer:
            type_def = "*" + type_def
        return type_def


@dataclass
class TypeDefinition:
    """A named type to emit in generated code."""

    type_name: str = ""
    json_name: str = ""
    schema: Schema = field(default_factory=Schema)

    def is_alias(self, old_aliasing: bool = False) -> bool:
        """Return whether the type is declared as an alias."""
        return not old_aliasing and self.schema.define_via_alias


@dataclass
class ResponseTypeDefinition(TypeDefinition):
    """A type definition used to decode one response content type."""

    content_type_name: str = ""
    response_name: str = ""


@dataclass
class EnumDefinition:
    """Type and value information for one enum."""

    schema: Schema = field(default_factory=Schema)
    type_name: str = ""
    value_wrapper: str = ""
    prefix_type_name: bool = False

    def get_values(self) -> dict[str, str]:
        """Return value names, prefixed with the type name when requested."""
        if not self.prefix_type_name:
            return self.schema.enum_values
        return {self.type_name + _upper_first(name): value for name, value in self.schema.enum_values.items()}


@dataclass
class Constants:
    """Constants shared by the generated code."""

    security_scheme_provider_names: list[str] = field(default_factory=list)
    enum_definitions: list[EnumDefinition] = field(default_factory=list)


def properties_equal(a: Property, b: Property) -> bool:
    """Return whether two properties have the same name, type and requiredness."""
    return (
        a.json_field_name == b.json_field_name
        and a.schema.type_decl() == b.schema.type_decl()
        and a.required == b.required
    )


def additional_properties_type(schema: Schema) -> str:
    """Return the value type of a schema's additional properties map."""
    extra = schema.additional_properties_type
    if extra is None:
        raise ValueError("schema has no additional properties type")
    type_name = extra.ref_type or extra.go_type
    if extra.oapi_schema is not None and extra.oapi_schema.nullable:
        type_name = "*" + type_name
    return type_name