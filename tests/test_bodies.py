from types import SimpleNamespace

from oapigen.bodies import (
    RequestBodyDefinition,
    RequestBodyEncoding,
    encodings_from_media_type,
)
from oapigen.gotypes import Schema


def test_type_def_name_and_schema():
    schema = Schema(go_type="string")
    body = RequestBodyDefinition(schema=schema, name_tag="JSON")
    td = body.type_def("AddPet")
    assert td.type_name == "AddPet" + "JSON" + "RequestBody"
    assert td.schema is schema


def test_custom_type_depends_on_ref_type():
    assert RequestBodyDefinition(schema=Schema(go_type="string")).custom_type() is True
    assert RequestBodyDefinition(schema=Schema(ref_type="Pet")).custom_type() is False


def test_suffix_default_is_empty():
    assert RequestBodyDefinition(name_tag="JSON", default=True).suffix() == ""


def test_suffix_non_default():
    body = RequestBodyDefinition(name_tag="XML")
    assert "DoFoo" + body.suffix() == "DoFooWithXMLBody"


def test_is_supported():
    assert RequestBodyDefinition(name_tag="Text").is_supported() is True
    assert RequestBodyDefinition(content_type="image/png").is_supported() is False


def test_is_fixed_content_type():
    assert RequestBodyDefinition(content_type="application/json").is_fixed_content_type() is True
    assert RequestBodyDefinition(content_type="application/*").is_fixed_content_type() is False


def test_encodings_from_media_type():
    media = SimpleNamespace(
        encoding={
            "file": SimpleNamespace(content_type="image/png", style="form", explode=True),
            "meta": SimpleNamespace(content_type="application/json", style="", explode=None),
        }
    )
    result = encodings_from_media_type(media)
    assert result == {
        "file": RequestBodyEncoding(content_type="image/png", style="form", explode=True),
        "meta": RequestBodyEncoding(content_type="application/json", style="", explode=None),
    }


def test_encodings_absent_gives_empty():
    assert encodings_from_media_type(SimpleNamespace(encoding=None)) == {}
    assert encodings_from_media_type(SimpleNamespace()) == {}


def test_default_encoding_is_empty_and_independent():
    a = RequestBodyDefinition()
    b = RequestBodyDefinition()
    a.encoding["x"] = RequestBodyEncoding()
    assert b.encoding == {}