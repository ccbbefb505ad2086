# oapigen

`oapigen` reads OpenAPI 3 documents and provides the intermediate descriptions
that a code generator works from. These include type definitions, struct field
tags, enum names, parameters, request bodies, responses, security requirements
and operations.

## Installation

```
pip install .
```

To run the tests, install the test extra first:

```
pip install ".[test]"
pytest
```

## Modules

- `oapigen.spec` holds the document model. `load_document(text)` parses YAML or
  JSON text, and `parse_document(data)` takes a mapping you have already decoded.
  Both return a `Document`. Local `#/components/...` references are resolved to
  their target objects. References to other files keep their `ref` string, but
  their `value` is left as `None`. `SpecError` is raised in these cases:
  - malformed input;
  - a reference that cannot be resolved or is circular;
  - a path item that uses `$ref`.

  `PathItem.operations()` returns the defined operations keyed by upper-case HTTP
  method. `PathItem.set_operation(method, op)` replaces an operation, or removes
  it when `op` is `None`.
- `oapigen.configuration` holds the generator settings:
  - `Configuration.from_mapping(data)` reads the YAML key names, for example
    `package`, `generate`, `compatibility`, `output-options`, `import-mapping` and
    `additional-imports`.
  - `update_defaults()` returns a copy. If no generate option is set, the copy
    enables `echo_server`, `models` and `embedded_spec`.
  - `validate()` raises `ConfigurationError` if the package name is empty, or if
    more than one of the iris, chi, fiber, echo and gin servers is selected.
- `oapigen.filter` selects operations by tag.
  `filter_operations_by_tag(document, config)` first removes operations that carry
  an excluded tag. It then keeps only operations that carry an included tag.
- `oapigen.extension` parses the vendor extensions that the generator reads:
  - `x-go-type` and `x-go-type-name`
  - `x-go-name`
  - `x-go-type-skip-optional-pointer`
  - `x-omitempty`
  - `x-go-json-ignore`
  - `x-oapi-codegen-extra-tags`
  - `x-enum-varnames` and `x-enumNames`
  - `x-deprecated-reason`

  A value of the wrong type raises `ExtensionError`.
- `oapigen.gotypes` describes generated types: `Schema`, `Property`,
  `TypeDefinition`, `EnumDefinition`, `Discriminator` and `UnionElement`.
  `Schema.add_property` raises `ValueError` when a property with the same name but
  a different definition already exists.
- `oapigen.primitives` maps integer, number, boolean and string schemas with a
  format to target types. `primitive_go_type("string", "date-time")` gives
  `time.Time`. Unsupported type and format combinations raise `SchemaError`.
- `oapigen.enums` turns enum values into constant text. It also picks constant
  names from `x-enum-varnames` or `x-enumNames`, and falls back to the values
  themselves.
- `oapigen.fieldtags` computes the `json` and `form` struct tags of a property,
  including `omitempty`, and applies the tag extensions.
  `format_field_tags(tags)` renders the tags as a back-quoted annotation.
- `oapigen.params`, `oapigen.bodies`, `oapigen.responses`, `oapigen.security` and
  `oapigen.operation` describe the parts of each operation:
  - `combine_operation_parameters` merges path-level and operation-level
    parameters. Operation-level parameters win, and duplicates raise
    `OperationError`.
  - `generate_default_operation_id` builds an id from the method and the path.
- `oapigen.inline` produces the embedded form of a spec. `spec_parts(spec)`
  gzips the JSON, base64-encodes it and splits it into 80-character lines.
  `decode_spec_parts(parts)` reverses this and raises `ValueError` on bad input.

## Example

```python
from oapigen.configuration import Configuration, OutputOptions
from oapigen.filter import filter_operations_by_tag
from oapigen.inline import decode_spec_parts, spec_parts
from oapigen.spec import load_document

with open("api.yaml", encoding="utf-8") as handle:
    document = load_document(handle.read())

config = Configuration(
    package_name="api",
    output_options=OutputOptions(include_tags=["cat"]),
).update_defaults()
config.validate()

filter_operations_by_tag(document, config)
print(sorted(document.paths))

parts = spec_parts({"openapi": "3.0.1"})
assert decode_spec_parts(parts) == {"openapi": "3.0.1"}
```

Default operation ids are built from the method and the path segments. Pass the
camel-casing function you want to use:

```python
from oapigen.operation import generate_default_operation_id

def camel(text):
    return "".join(part[:1].upper() + part[1:] for part in text.split("-"))

generate_default_operation_id("GET", "/v1/foo/bar", camel)  # "GetV1FooBar"
```

## What it does not do

- The package does not write source code and has no command-line tool. It
  produces the descriptions that templates would be rendered from, but it does
  not render any templates.
- It cannot remove components that nothing in a document references any more.
- It does not load referenced external documents.