"""OpenAPI 3 document model with resolution of local component references."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

import yaml


class SpecError(ValueError):
    """Raised when an OpenAPI document cannot be read."""


HTTP_METHODS = ("CONNECT", "DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT", "TRACE")


@dataclass(eq=False)
class AdditionalProperties:
    """The additionalProperties keyword: a flag, a schema, or unset."""

    has: bool | None = None
    schema: SchemaRef | None = None


@dataclass
class Discriminator:
    property_name: str = ""
    mapping: dict[str, str] = field(default_factory=dict)


@dataclass(eq=False)
class SchemaObject:
    type: str = ""
    format: str = ""
    title: str = ""
    description: str = ""
    enum: list[Any] = field(default_factory=list)
    default: Any = None
    example: Any = None
    nullable: bool = False
    read_only: bool = False
    write_only: bool = False
    allow_empty_value: bool = False
    unique_items: bool = False
    exclusive_min: bool = False
    exclusive_max: bool = False
    deprecated: bool = False
    minimum: float | None = None
    maximum: float | None = None
    multiple_of: float | None = None
    min_length: int = 0
    max_length: int | None = None
    pattern: str = ""
    min_items: int = 0
    max_items: int | None = None
    required: list[str] = field(default_factory=list)
    properties: dict[str, SchemaRef] = field(default_factory=dict)
    additional_properties: AdditionalProperties = field(default_factory=AdditionalProperties)
    items: SchemaRef | None = None
    all_of: list[SchemaRef] | None = None
    any_of: list[SchemaRef] | None = None
    one_of: list[SchemaRef] | None = None
    not_: SchemaRef | None = None
    discriminator: Discriminator | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def without_additional_properties(self) -> SchemaObject:
        """Forbid additional properties."""
        self.additional_properties = AdditionalProperties(has=False)
        return self

    def with_any_additional_properties(self) -> SchemaObject:
        """Allow additional properties of any type."""
        self.additional_properties = AdditionalProperties(has=True)
        return self


@dataclass(eq=False)
class SchemaRef:
    ref: str = ""
    value: SchemaObject | None = None


@dataclass
class ExampleRef:
    ref: str = ""
    value: dict[str, Any] | None = None


@dataclass
class LinkRef:
    ref: str = ""
    value: dict[str, Any] | None = None


@dataclass
class SecuritySchemeRef:
    ref: str = ""
    value: dict[str, Any] | None = None


@dataclass
class Header:
    description: str = ""
    required: bool = False
    deprecated: bool = False
    schema: SchemaRef | None = None
    content: dict[str, MediaType] | None = None
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class HeaderRef:
    ref: str = ""
    value: Header | None = None


@dataclass
class Encoding:
    content_type: str = ""
    headers: dict[str, HeaderRef] = field(default_factory=dict)
    style: str = ""
    explode: bool | None = None
    allow_reserved: bool = False


@dataclass
class MediaType:
    schema: SchemaRef | None = None
    example: Any = None
    examples: dict[str, ExampleRef] = field(default_factory=dict)
    encoding: dict[str, Encoding] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class Parameter:
    name: str = ""
    location: str = ""
    description: str = ""
    style: str = ""
    explode: bool | None = None
    allow_empty_value: bool = False
    allow_reserved: bool = False
    deprecated: bool = False
    required: bool = False
    schema: SchemaRef | None = None
    example: Any = None
    examples: dict[str, ExampleRef] = field(default_factory=dict)
    content: dict[str, MediaType] | None = None
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class ParameterRef:
    ref: str = ""
    value: Parameter | None = None


@dataclass
class RequestBody:
    description: str = ""
    required: bool = False
    content: dict[str, MediaType] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class RequestBodyRef:
    ref: str = ""
    value: RequestBody | None = None


@dataclass
class Response:
    description: str | None = None
    headers: dict[str, HeaderRef] = field(default_factory=dict)
    content: dict[str, MediaType] = field(default_factory=dict)
    links: dict[str, LinkRef] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class ResponseRef:
    ref: str = ""
    value: Response | None = None


@dataclass
class Callback:
    """Callback expressions mapped to the path items they describe."""

    paths: dict[str, PathItem] = field(default_factory=dict)


@dataclass
class CallbackRef:
    ref: str = ""
    value: Callback | None = None


@dataclass
class Operation:
    tags: list[str] = field(default_factory=list)
    summary: str = ""
    description: str = ""
    operation_id: str = ""
    parameters: list[ParameterRef] = field(default_factory=list)
    request_body: RequestBodyRef | None = None
    responses: dict[str, ResponseRef] = field(default_factory=dict)
    callbacks: dict[str, CallbackRef] = field(default_factory=dict)
    deprecated: bool = False
    security: list[dict[str, list[str]]] | None = None
    servers: list[dict[str, Any]] | None = None
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class PathItem:
    summary: str = ""
    description: str = ""
    servers: list[dict[str, Any]] | None = None
    parameters: list[ParameterRef] = field(default_factory=list)
    connect: Operation | None = None
    delete: Operation | None = None
    get: Operation | None = None
    head: Operation | None = None
    options: Operation | None = None
    patch: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    trace: Operation | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def operations(self) -> dict[str, Operation]:
        """Return the defined operations keyed by upper-case HTTP method."""
        found = {}
        for method in HTTP_METHODS:
            op = getattr(self, method.lower())
            if op is not None:
                found[method] = op
        return found

    def set_operation(self, method: str, operation: Operation | None) -> None:
        """Set or clear (with None) the operation for an HTTP method."""
        if method.upper() not in HTTP_METHODS:
            raise SpecError(f"unsupported HTTP method {method!r}")
        setattr(self, method.lower(), operation)


@dataclass
class Components:
    schemas: dict[str, SchemaRef] = field(default_factory=dict)
    parameters: dict[str, ParameterRef] = field(default_factory=dict)
    headers: dict[str, HeaderRef] = field(default_factory=dict)
    request_bodies: dict[str, RequestBodyRef] = field(default_factory=dict)
    responses: dict[str, ResponseRef] = field(default_factory=dict)
    security_schemes: dict[str, SecuritySchemeRef] = field(default_factory=dict)
    examples: dict[str, ExampleRef] = field(default_factory=dict)
    links: dict[str, LinkRef] = field(default_factory=dict)
    callbacks: dict[str, CallbackRef] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class Document:
    openapi: str = ""
    info: dict[str, Any] = field(default_factory=dict)
    servers: list[dict[str, Any]] = field(default_factory=list)
    paths: dict[str, PathItem] = field(default_factory=dict)
    components: Components | None = None
    security: list[dict[str, list[str]]] = field(default_factory=list)
    tags: list[dict[str, Any]] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)


_SECTION_ATTRS = {
    "schemas": "schemas",
    "parameters": "parameters",
    "headers": "headers",
    "requestBodies": "request_bodies",
    "responses": "responses",
    "securitySchemes": "security_schemes",
    "examples": "examples",
    "links": "links",
    "callbacks": "callbacks",
}


def _mapping(node: Any, where: str) -> Mapping:
    if not isinstance(node, Mapping):
        raise SpecError(f"{where}: expected a mapping, got {type(node).__name__}")
    return node


def _sequence(node: Any, where: str) -> list:
    if node is None:
        return []
    if not isinstance(node, list):
        raise SpecError(f"{where}: expected a list, got {type(node).__name__}")
    return node


def _extensions(node: Mapping) -> dict[str, Any]:
    return {k: v for k, v in node.items() if isinstance(k, str) and k.startswith("x-")}


def _str(node: Mapping, key: str, where: str, default: str = "") -> str:
    value = node.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise SpecError(f"{where}/{key}: expected a string, got {type(value).__name__}")
    return value


def _opt_bool(node: Mapping, key: str, where: str) -> bool | None:
    value = node.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise SpecError(f"{where}/{key}: expected a boolean, got {type(value).__name__}")
    return value


def _bool(node: Mapping, key: str, where: str) -> bool:
    return bool(_opt_bool(node, key, where))


def _number(node: Mapping, key: str, where: str) -> float | None:
    value = node.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SpecError(f"{where}/{key}: expected a number, got {type(value).__name__}")
    return value


def _int(node: Mapping, key: str, where: str) -> int | None:
    value = node.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SpecError(f"{where}/{key}: expected an integer, got {type(value).__name__}")
    return value


def _str_list(node: Mapping, key: str, where: str) -> list[str]:
    items = _sequence(node.get(key), f"{where}/{key}")
    if not all(isinstance(item, str) for item in items):
        raise SpecError(f"{where}/{key}: expected a list of strings")
    return list(items)


def _raw_list(node: Mapping, key: str, where: str) -> list[dict[str, Any]]:
    return [dict(_mapping(item, f"{where}/{key}")) for item in _sequence(node.get(key), f"{where}/{key}")]


class _Parser:
    """Builds the model and resolves local references once all is read."""

    def __init__(self) -> None:
        self._pending: list[tuple[str, Any]] = []

    def _ref(self, node: Any, where: str, ref_cls: type, section: str, build: Callable) -> Any:
        node = _mapping(node, where)
        if "$ref" in node:
            ref = node["$ref"]
            if not isinstance(ref, str):
                raise SpecError(f"{where}/$ref: expected a string")
            obj = ref_cls(ref=ref)
            self._pending.append((section, obj))
            return obj
        return ref_cls(value=build(node, where))

    def _table(self, node: Any, where: str, build: Callable, skip_extensions: bool = False) -> dict:
        if node is None:
            return {}
        node = _mapping(node, where)
        return {
            str(k): build(v, f"{where}/{k}")
            for k, v in node.items()
            if not (skip_extensions and str(k).startswith("x-"))
        }

    def _optional(self, node: Mapping, key: str, where: str, build: Callable) -> Any:
        value = node.get(key)
        return None if value is None else build(value, f"{where}/{key}")

    def _schema_list(self, node: Mapping, key: str, where: str) -> list[SchemaRef] | None:
        if key not in node:
            return None
        return [
            self.schema_ref(item, f"{where}/{key}/{i}")
            for i, item in enumerate(_sequence(node[key], f"{where}/{key}"))
        ]

    def schema_ref(self, node: Any, where: str) -> SchemaRef:
        return self._ref(node, where, SchemaRef, "schemas", self.schema)

    def schema(self, node: Mapping, where: str) -> SchemaObject:
        schema_type = node.get("type")
        if schema_type is not None and not isinstance(schema_type, str):
            raise SpecError(f"{where}/type: expected a string, got {type(schema_type).__name__}")
        additional = AdditionalProperties()
        raw_additional = node.get("additionalProperties")
        if isinstance(raw_additional, bool):
            additional.has = raw_additional
        elif raw_additional is not None:
            additional.schema = self.schema_ref(raw_additional, f"{where}/additionalProperties")
        discriminator = None
        if node.get("discriminator") is not None:
            raw = _mapping(node["discriminator"], f"{where}/discriminator")
            mapping = _mapping(raw.get("mapping") or {}, f"{where}/discriminator/mapping")
            discriminator = Discriminator(
                property_name=_str(raw, "propertyName", f"{where}/discriminator"),
                mapping={str(k): str(v) for k, v in mapping.items()},
            )
        return SchemaObject(
            type=schema_type or "",
            format=_str(node, "format", where),
            title=_str(node, "title", where),
            description=_str(node, "description", where),
            enum=list(_sequence(node.get("enum"), f"{where}/enum")),
            default=node.get("default"),
            example=node.get("example"),
            nullable=_bool(node, "nullable", where),
            read_only=_bool(node, "readOnly", where),
            write_only=_bool(node, "writeOnly", where),
            allow_empty_value=_bool(node, "allowEmptyValue", where),
            unique_items=_bool(node, "uniqueItems", where),
            exclusive_min=_bool(node, "exclusiveMinimum", where),
            exclusive_max=_bool(node, "exclusiveMaximum", where),
            deprecated=_bool(node, "deprecated", where),
            minimum=_number(node, "minimum", where),
            maximum=_number(node, "maximum", where),
            multiple_of=_number(node, "multipleOf", where),
            min_length=_int(node, "minLength", where) or 0,
            max_length=_int(node, "maxLength", where),
            pattern=_str(node, "pattern", where),
            min_items=_int(node, "minItems", where) or 0,
            max_items=_int(node, "maxItems", where),
            required=_str_list(node, "required", where),
            properties=self._table(node.get("properties"), f"{where}/properties", self.schema_ref),
            additional_properties=additional,
            items=self._optional(node, "items", where, self.schema_ref),
            all_of=self._schema_list(node, "allOf", where),
            any_of=self._schema_list(node, "anyOf", where),
            one_of=self._schema_list(node, "oneOf", where),
            not_=self._optional(node, "not", where, self.schema_ref),
            discriminator=discriminator,
            extensions=_extensions(node),
        )

    def example_ref(self, node: Any, where: str) -> ExampleRef:
        return self._ref(node, where, ExampleRef, "examples", lambda n, w: dict(n))

    def link_ref(self, node: Any, where: str) -> LinkRef:
        return self._ref(node, where, LinkRef, "links", lambda n, w: dict(n))

    def security_scheme_ref(self, node: Any, where: str) -> SecuritySchemeRef:
        return self._ref(node, where, SecuritySchemeRef, "securitySchemes", lambda n, w: dict(n))

    def _content(self, node: Mapping, where: str) -> dict[str, MediaType] | None:
        if node.get("content") is None:
            return None
        return self._table(node["content"], f"{where}/content", self.media_type)

    def media_type(self, node: Any, where: str) -> MediaType:
        node = _mapping(node, where)
        return MediaType(
            schema=self._optional(node, "schema", where, self.schema_ref),
            example=node.get("example"),
            examples=self._table(node.get("examples"), f"{where}/examples", self.example_ref),
            encoding=self._table(node.get("encoding"), f"{where}/encoding", self.encoding),
            extensions=_extensions(node),
        )

    def encoding(self, node: Any, where: str) -> Encoding:
        node = _mapping(node, where)
        return Encoding(
            content_type=_str(node, "contentType", where),
            headers=self._table(node.get("headers"), f"{where}/headers", self.header_ref),
            style=_str(node, "style", where),
            explode=_opt_bool(node, "explode", where),
            allow_reserved=_bool(node, "allowReserved", where),
        )

    def header_ref(self, node: Any, where: str) -> HeaderRef:
        return self._ref(node, where, HeaderRef, "headers", self.header)

    def header(self, node: Mapping, where: str) -> Header:
        return Header(
            description=_str(node, "description", where),
            required=_bool(node, "required", where),
            deprecated=_bool(node, "deprecated", where),
            schema=self._optional(node, "schema", where, self.schema_ref),
            content=self._content(node, where),
            extensions=_extensions(node),
        )

    def parameter_ref(self, node: Any, where: str) -> ParameterRef:
        return self._ref(node, where, ParameterRef, "parameters", self.parameter)

    def parameter(self, node: Mapping, where: str) -> Parameter:
        return Parameter(
            name=_str(node, "name", where),
            location=_str(node, "in", where),
            description=_str(node, "description", where),
            style=_str(node, "style", where),
            explode=_opt_bool(node, "explode", where),
            allow_empty_value=_bool(node, "allowEmptyValue", where),
            allow_reserved=_bool(node, "allowReserved", where),
            deprecated=_bool(node, "deprecated", where),
            required=_bool(node, "required", where),
            schema=self._optional(node, "schema", where, self.schema_ref),
            example=node.get("example"),
            examples=self._table(node.get("examples"), f"{where}/examples", self.example_ref),
            content=self._content(node, where),
            extensions=_extensions(node),
        )

    def request_body_ref(self, node: Any, where: str) -> RequestBodyRef:
        return self._ref(node, where, RequestBodyRef, "requestBodies", self.request_body)

    def request_body(self, node: Mapping, where: str) -> RequestBody:
        return RequestBody(
            description=_str(node, "description", where),
            required=_bool(node, "required", where),
            content=self._content(node, where) or {},
            extensions=_extensions(node),
        )

    def response_ref(self, node: Any, where: str) -> ResponseRef:
        return self._ref(node, where, ResponseRef, "responses", self.response)

    def response(self, node: Mapping, where: str) -> Response:
        description = node.get("description")
        if description is not None and not isinstance(description, str):
            raise SpecError(f"{where}/description: expected a string")
        return Response(
            description=description,
            headers=self._table(node.get("headers"), f"{where}/headers", self.header_ref),
            content=self._content(node, where) or {},
            links=self._table(node.get("links"), f"{where}/links", self.link_ref),
            extensions=_extensions(node),
        )

    def callback_ref(self, node: Any, where: str) -> CallbackRef:
        return self._ref(node, where, CallbackRef, "callbacks", self.callback)

    def callback(self, node: Mapping, where: str) -> Callback:
        return Callback(paths=self._table(node, where, self.path_item, skip_extensions=True))

    def _security(self, node: Any, where: str) -> list[dict[str, list[str]]]:
        requirements = []
        for raw in _sequence(node, where):
            raw = _mapping(raw, where)
            requirements.append(
                {str(k): [str(s) for s in _sequence(v, f"{where}/{k}")] for k, v in raw.items()}
            )
        return requirements

    def operation(self, node: Any, where: str) -> Operation:
        node = _mapping(node, where)
        return Operation(
            tags=_str_list(node, "tags", where),
            summary=_str(node, "summary", where),
            description=_str(node, "description", where),
            operation_id=_str(node, "operationId", where),
            parameters=[
                self.parameter_ref(p, f"{where}/parameters")
                for p in _sequence(node.get("parameters"), f"{where}/parameters")
            ],
            request_body=self._optional(node, "requestBody", where, self.request_body_ref),
            responses=self._table(
                node.get("responses"), f"{where}/responses", self.response_ref, skip_extensions=True
            ),
            callbacks=self._table(node.get("callbacks"), f"{where}/callbacks", self.callback_ref),
            deprecated=_bool(node, "deprecated", where),
            security=self._security(node["security"], f"{where}/security")
            if node.get("security") is not None
            else None,
            servers=_raw_list(node, "servers", where) if node.get("servers") is not None else None,
            extensions=_extensions(node),
        )

    def path_item(self, node: Any, where: str) -> PathItem:
        node = _mapping(node, where)
        if "$ref" in node:
            raise SpecError(f"{where}: path item references are not supported")
        item = PathItem(
            summary=_str(node, "summary", where),
            description=_str(node, "description", where),
            servers=_raw_list(node, "servers", where) if node.get("servers") is not None else None,
            parameters=[
                self.parameter_ref(p, f"{where}/parameters")
                for p in _sequence(node.get("parameters"), f"{where}/parameters")
            ],
            extensions=_extensions(node),
        )
        for method in HTTP_METHODS:
            key = method.lower()
            if node.get(key) is not None:
                item.set_operation(method, self.operation(node[key], f"{where}/{key}"))
        return item

    def components(self, node: Any, where: str) -> Components:
        node = _mapping(node, where)
        builders = {
            "schemas": self.schema_ref,
            "parameters": self.parameter_ref,
            "headers": self.header_ref,
            "requestBodies": self.request_body_ref,
            "responses": self.response_ref,
            "securitySchemes": self.security_scheme_ref,
            "examples": self.example_ref,
            "links": self.link_ref,
            "callbacks": self.callback_ref,
        }
        tables = {
            _SECTION_ATTRS[section]: self._table(node.get(section), f"{where}/{section}", build)
            for section, build in builders.items()
        }
        return Components(**tables, extensions=_extensions(node))

    def resolve(self, components: Components | None) -> None:
        for section, obj in self._pending:
            obj.value = self._target(section, obj.ref, components, set())

    def _target(self, section: str, ref: str, components: Components | None, seen: set) -> Any:
        if not ref.startswith("#"):
            # External documents are not loaded; the reference stays unresolved.
            return None
        prefix = f"#/components/{section}/"
        if not ref.startswith(prefix):
            raise SpecError(f"unsupported reference: {ref}")
        name = ref[len(prefix):].replace("~1", "/").replace("~0", "~")
        table = getattr(components, _SECTION_ATTRS[section]) if components is not None else {}
        target = table.get(name)
        if target is None:
            raise SpecError(f"unresolved reference: {ref}")
        if target.value is not None:
            return target.value
        if ref in seen:
            raise SpecError(f"circular reference: {ref}")
        seen.add(ref)
        return self._target(section, target.ref, components, seen)


def parse_document(data: Any) -> Document:
    """Build a Document from already decoded JSON or YAML data."""
    node = _mapping(data, "#")
    parser = _Parser()
    components = (
        parser.components(node["components"], "#/components")
        if node.get("components") is not None
        else None
    )
    info = node.get("info") or {}
    document = Document(
        openapi=str(node.get("openapi") or ""),
        info=dict(_mapping(info, "#/info")),
        servers=_raw_list(node, "servers", "#"),
        paths=parser._table(node.get("paths"), "#/paths", parser.path_item, skip_extensions=True),
        components=components,
        security=parser._security(node.get("security"), "#/security"),
        tags=_raw_list(node, "tags", "#"),
        extensions=_extensions(node),
    )
    parser.resolve(components)
    return document


def load_document(text: str | bytes) -> Document:
    """Parse an OpenAPI document given as YAML or JSON text."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SpecError(f"invalid document: {exc}") from exc
    return parse_document(data)