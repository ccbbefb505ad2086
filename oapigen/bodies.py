"""Descriptions of operation request bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from oapigen.gotypes import Schema, TypeDefinition


@dataclass
class RequestBodyEncoding:
    """Encoding options for one field of a form body."""

    content_type: str = ""
    style: str = ""
    explode: bool | None = None


@dataclass
class RequestBodyDefinition:
    """A request body for one content type, with its generated type."""

    required: bool = False
    schema: Schema = field(default_factory=Schema)
    name_tag: str = ""
    content_type: str = ""
    default: bool = False
    encoding: dict[str, RequestBodyEncoding] = field(default_factory=dict)

    def type_def(self, op_id: str) -> TypeDefinition:
        """Return the type definition named after the operation and tag."""
        return TypeDefinition(type_name=f"{op_id}{self.name_tag}RequestBody", schema=self.schema)

    def custom_type(self) -> bool:
        """Return whether the body is an inline type rather than a predefined one."""
        return self.schema.ref_type == ""

    def suffix(self) -> str:
        """Return the suffix for functions handling this body; empty for the default."""
        if self.default:
            return ""
        return "With" + self.name_tag + "Body"

    def is_supported(self) -> bool:
        """Return whether the server side knows how to decode this content type."""
        return self.name_tag != ""

    def is_fixed_content_type(self) -> bool:
        """Return whether the content type contains no wildcard."""
        return "*" not in self.content_type


def encodings_from_media_type(media_type: Any) -> dict[str, RequestBodyEncoding]:
    """Return the encoding options declared by a media type, keyed by field name."""
    encodings = getattr(media_type, "encoding", None) or {}
    return {
        name: RequestBodyEncoding(
            content_type=getattr(enc, "content_type", "") or "",
            style=getattr(enc, "style", "") or "",
            explode=getattr(enc, "explode", None),
        )
        for name, enc in encodings.items()
    }