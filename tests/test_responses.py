import pytest

from oapigen.gotypes import Schema
from oapigen.responses import (
    ResponseContentDefinition,
    ResponseDefinition,
    ResponseHeaderDefinition,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("200", True),
        ("404", True),
        ("+5", True),
        ("default", False),
        ("2XX", False),
        ("", False),
        (" 200", False),
        ("2_00", False),
        ("99999999999999999999", False),
    ],
)
def test_has_fixed_status_code(code, expected):
    assert ResponseDefinition(status_code=code).has_fixed_status_code() is expected


def test_is_ref_and_external_ref():
    local = ResponseDefinition(status_code="404", ref="NotFound")
    external = ResponseDefinition(status_code="404", ref="externalRef0.NotFound")
    plain = ResponseDefinition(status_code="404")
    assert local.is_ref() is True
    assert local.is_external_ref() is False
    assert external.is_ref() is True
    assert external.is_external_ref() is True
    assert plain.is_ref() is False
    assert plain.is_external_ref() is False


def test_content_is_supported_depends_on_tag():
    assert ResponseContentDefinition(content_type="application/json", name_tag="JSON").is_supported() is True
    assert ResponseContentDefinition(content_type="image/png").is_supported() is False


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [("application/json", True), ("application/*", False), ("*/*", False)],
)
def test_has_fixed_content_type(content_type, expected):
    assert ResponseContentDefinition(content_type=content_type).has_fixed_content_type() is expected


def test_defaults_are_independent():
    a = ResponseDefinition()
    b = ResponseDefinition()
    a.contents.append(ResponseContentDefinition(content_type="text/plain"))
    a.headers.append(ResponseHeaderDefinition(name="X-Rate", go_name="XRate", schema=Schema(go_type="int")))
    assert b.contents == []
    assert b.headers == []
    assert a.headers[0].schema.type_decl() == "int"