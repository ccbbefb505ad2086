import json

import pytest

from oapigen.extension import (
    ExtensionError,
    ext_extra_tags,
    ext_parse_deprecation_reason,
    ext_parse_enum_var_names,
    ext_parse_go_field_name,
    ext_parse_go_json_ignore,
    ext_parse_omit_empty,
    ext_parse_prop_go_type_skip_optional_pointer,
    ext_string,
    ext_type_name,
)


def _decode(raw):
    return None if raw is None else json.loads(raw)


@pytest.mark.parametrize(
    "raw, want, want_err",
    [
        ('"uint64"', "uint64", False),
        (None, "", True),
        ("12", "", True),
    ],
    ids=["success", "nil conversion error", "type conversion error"],
)
def test_ext_type_name(raw, want, want_err):
    value = _decode(raw)
    if want_err:
        with pytest.raises(ExtensionError):
            ext_type_name(value)
    else:
        assert ext_type_name(value) == want


@pytest.mark.parametrize(
    "raw, want, want_err",
    [
        ("true", True, False),
        ("false", False, False),
        (None, False, True),
        ('"true"', False, True),
    ],
    ids=["true", "false", "nil conversion error", "type conversion error"],
)
def test_ext_parse_prop_go_type_skip_optional_pointer(raw, want, want_err):
    value = _decode(raw)
    if want_err:
        with pytest.raises(ExtensionError):
            ext_parse_prop_go_type_skip_optional_pointer(value)
    else:
        assert ext_parse_prop_go_type_skip_optional_pointer(value) is want


def test_error_message_names_type():
    with pytest.raises(ExtensionError, match="failed to convert type: int"):
        ext_string(12)


def test_string_extensions():
    assert ext_parse_go_field_name("FieldName") == "FieldName"
    assert ext_parse_deprecation_reason("old") == "old"
    with pytest.raises(ExtensionError):
        ext_parse_go_field_name(["FieldName"])


def test_bool_extensions():
    assert ext_parse_omit_empty(False) is False
    assert ext_parse_go_json_ignore(True) is True
    with pytest.raises(ExtensionError):
        ext_parse_omit_empty(1)
    with pytest.raises(ExtensionError):
        ext_parse_go_json_ignore("true")


def test_extra_tags():
    assert ext_extra_tags({"validate": "required", "db": "name"}) == {
        "validate": "required",
        "db": "name",
    }
    with pytest.raises(ExtensionError):
        ext_extra_tags({"validate": 1})
    with pytest.raises(ExtensionError):
        ext_extra_tags(["validate"])


def test_enum_var_names():
    assert ext_parse_enum_var_names(["One", "Two"]) == ["One", "Two"]
    with pytest.raises(ExtensionError):
        ext_parse_enum_var_names(["One", 2])
    with pytest.raises(ExtensionError):
        ext_parse_enum_var_names("One")