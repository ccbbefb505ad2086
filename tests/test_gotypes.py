import pytest

from oapigen.gotypes import (
    Constants,
    Discriminator,
    EnumDefinition,
    Property,
    ResponseTypeDefinition,
    Schema,
    TypeDefinition,
    UnionElement,
    additional_properties_type,
    properties_equal,
)
from oapigen.spec import SchemaObject


def test_type_decl_prefers_ref():
    assert Schema(go_type="string").type_decl() == "string"
    ref = Schema(go_type="string", ref_type="Name")
    assert ref.is_ref()
    assert ref.type_decl() == "Name"


def test_add_property_allows_identical():
    s = Schema()
    p = Property(json_field_name="id", schema=Schema(go_type="int"), required=True)
    s.add_property(p)
    s.add_property(Property(json_field_name="id", schema=Schema(go_type="int"), required=True))
    assert len(s.properties) == 2


def test_add_property_conflict():
    s = Schema(properties=[Property(json_field_name="id", schema=Schema(go_type="int"))])
    with pytest.raises(ValueError, match="'id' already exists"):
        s.add_property(Property(json_field_name="id", schema=Schema(go_type="string")))


def test_properties_equal():
    a = Property(json_field_name="x", schema=Schema(go_type="int"), required=True)
    assert properties_equal(a, Property(json_field_name="x", schema=Schema(ref_type="int"), required=True))
    assert not properties_equal(a, Property(json_field_name="x", schema=Schema(go_type="int")))


def test_get_additional_type_defs_order():
    inner = TypeDefinition(type_name="Inner")
    outer = TypeDefinition(type_name="Outer")
    s = Schema(
        properties=[Property(schema=Schema(additional_types=[inner]))],
        additional_types=[outer],
    )
    assert s.get_additional_type_defs() == [inner, outer]


@pytest.mark.parametrize(
    "kwargs, pointer",
    [
        ({"required": True}, False),
        ({"required": False}, True),
        ({"required": True, "nullable": True}, True),
        ({"required": True, "write_only": True}, True),
        ({"required": True, "read_only": True}, True),
    ],
)
def test_go_type_def_pointer(kwargs, pointer):
    prop = Property(json_field_name="f", schema=Schema(go_type="int"), **kwargs)
    assert prop.go_type_def() == ("*int" if pointer else "int")


def test_go_type_def_readonly_option_and_skip():
    prop = Property(schema=Schema(go_type="int"), required=True, read_only=True)
    assert prop.go_type_def(True) == "int"
    skip = Property(schema=Schema(go_type="int", skip_optional_pointer=True))
    assert skip.go_type_def() == "int"


def test_enum_values():
    values = {"car": "car", "oldage": "oldage"}
    plain = EnumDefinition(schema=Schema(enum_values=values), type_name="Cause")
    assert plain.get_values() == values
    prefixed = EnumDefinition(schema=Schema(enum_values=values), type_name="Cause", prefix_type_name=True)
    assert prefixed.get_values() == {"Cause" + "Car": "car", "Cause" + "Oldage": "oldage"}


def test_is_alias():
    td = TypeDefinition(type_name="A", schema=Schema(define_via_alias=True))
    assert td.is_alias() is True
    assert td.is_alias(True) is False
    assert TypeDefinition(schema=Schema()).is_alias() is False


def test_response_type_definition_fields():
    rtd = ResponseTypeDefinition(type_name="JSON200", content_type_name="application/json", response_name="200")
    assert rtd.type_name == "JSON200"
    assert rtd.is_alias() is False


def test_discriminator_json_tag():
    assert Discriminator(property="kind").json_tag() == '`json:"kind"`'


def test_union_element():
    element = UnionElement("externalRef0.someType")
    assert str(element) == "externalRef0.someType"
    assert element.method() == "ExternalRef0SomeType"


def test_additional_properties_type():
    assert additional_properties_type(Schema(additional_properties_type=Schema(go_type="string"))) == "string"
    ref = Schema(additional_properties_type=Schema(go_type="x", ref_type="Thing"))
    assert additional_properties_type(ref) == "Thing"
    nullable = Schema(
        additional_properties_type=Schema(go_type="int", oapi_schema=SchemaObject(nullable=True))
    )
    assert additional_properties_type(nullable) == "*" + "int"
    with pytest.raises(ValueError):
        additional_properties_type(Schema())


def test_constants_defaults_are_independent():
    a, b = Constants(), Constants()
    a.security_scheme_provider_names.append("api_key")
    assert b.security_scheme_provider_names == []