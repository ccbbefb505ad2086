"""Descriptions of operation responses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from oapigen.gotypes import Schema

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass
class ResponseContentDefinition:
    """One content type of a response, with its generated type."""

    schema: Schema = field(default_factory=Schema)
    content_type: str = ""
    name_tag: str = ""

    def is_supported(self) -> bool:
        """Return whether the content type has a known tag."""
        return self.name_tag != ""

    def has_fixed_content_type(self) -> bool:
        """Return whether the content type contains no wildcard."""
        return "*" not in self.content_type


@dataclass
class ResponseHeaderDefinition:
    """A header sent with a response."""

    name: str = ""
    go_name: str = ""
    schema: Schema = field(default_factory=Schema)


@dataclass
class ResponseDefinition:
    """A response of an operation for one status code."""

    status_code: str = ""
    description: str = ""
    contents: list[ResponseContentDefinition] = field(default_factory=list)
    headers: list[ResponseHeaderDefinition] = field(default_factory=list)
    ref: str = ""

    def has_fixed_status_code(self) -> bool:
        """Return whether the status code is a plain integer rather than a range or default."""
        if _INTEGER.fullmatch(self.status_code) is None:
            return False
        return _INT64_MIN <= int(self.status_code) <= _INT64_MAX

    def is_ref(self) -> bool:
        """Return whether the response refers to a predefined response."""
        return self.ref != ""

    def is_external_ref(self) -> bool:
        """Return whether the response refers to a response in another package."""
        return self.is_ref() and "." in self.ref