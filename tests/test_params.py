import pytest

from oapigen.gotypes import Schema
from oapigen.params import (
    OperationError,
    ParameterDefinition,
    combine_operation_parameters,
    filter_parameter_definition_by_type,
    find_parameter,
)
from oapigen.spec import Parameter, SchemaRef


def make(name, location, required=False, **spec_kwargs):
    spec = Parameter(name=name, location=location, required=required, **spec_kwargs)
    return ParameterDefinition(
        param_name=name, location=location, required=required, spec=spec, schema=Schema(go_type="string")
    )


def test_json_tag_required():
    assert make("id", "path", required=True).json_tag() == '`json:"id"`'


def test_json_tag_optional():
    assert make("limit", "query").json_tag() == '`json:"limit,omitempty"`'


def test_type_def_prefers_ref_type():
    pd = make("id", "path")
    assert pd.type_def() == "string"
    pd.schema.ref_type = "CustomType"
    assert pd.type_def() == "CustomType"


def test_is_styled_follows_schema():
    assert make("a", "query", schema=SchemaRef()).is_styled() is True
    assert make("a", "query").is_styled() is False


@pytest.mark.parametrize(
    "location,style,explode",
    [("path", "simple", False), ("header", "simple", False), ("query", "form", True), ("cookie", "form", True)],
)
def test_defaults_by_location(location, style, explode):
    pd = make("a", location)
    assert pd.style() == style
    assert pd.explode() is explode


def test_explicit_style_and_explode_win():
    pd = make("a", "query", style="deepObject", explode=False)
    assert pd.style() == "deepObject"
    assert pd.explode() is False


def test_unknown_location_raises():
    pd = make("a", "body")
    with pytest.raises(OperationError):
        pd.style()
    with pytest.raises(OperationError):
        pd.explode()


def test_indirect_optional():
    assert make("a", "query").indirect_optional() is True
    assert make("a", "query", required=True).indirect_optional() is False
    pd = make("a", "query")
    pd.schema.skip_optional_pointer = True
    assert pd.indirect_optional() is False


def test_find_parameter():
    params = [make("a", "query"), make("b", "header")]
    assert find_parameter(params, "b") is params[1]
    assert find_parameter(params, "c") is None


def test_filter_by_location_keeps_order():
    params = [make("a", "query"), make("b", "header"), make("c", "query")]
    result = filter_parameter_definition_by_type(params, "query")
    assert [p.param_name for p in result] == ["a", "c"]
    assert filter_parameter_definition_by_type(params, "cookie") == []


def test_combine_prefers_local():
    global_a = make("a", "query")
    global_id = make("id", "path", required=True)
    local_a = make("a", "query", required=True)
    result = combine_operation_parameters([global_a, global_id], [local_a])
    assert len(result) == 2
    assert result[0] is local_a
    assert result[1] is global_id


def test_same_name_in_other_location_is_kept():
    result = combine_operation_parameters([make("a", "header")], [make("a", "query")])
    assert [(p.location, p.param_name) for p in result] == [("query", "a"), ("header", "a")]


def test_duplicate_local_raises():
    with pytest.raises(OperationError, match="duplicate local parameter query/a"):
        combine_operation_parameters([], [make("a", "query"), make("a", "query")])


def test_duplicate_global_raises():
    with pytest.raises(OperationError, match="duplicate global parameter query/a"):
        combine_operation_parameters([make("a", "query"), make("a", "query")], [])


def test_repeated_global_shadowed_by_local_is_dropped():
    local_a = make("a", "query")
    result = combine_operation_parameters([make("a", "query"), make("a", "query")], [local_a])
    assert result == [local_a]