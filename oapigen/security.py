"""Security requirements of operations, flattened for the templates."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass
class SecurityDefinition:
    """One security provider an operation accepts, with the scopes it needs."""

    provider_name: str = ""
    scopes: list[str] = field(default_factory=list)


def describe_security_definition(
    requirements: Iterable[Mapping[str, Iterable[str]]] | None,
) -> list[SecurityDefinition]:
    """Flatten security requirements into definitions.

    Requirements keep their order; within each requirement the providers
    are sorted by name.
    """
    return [
        SecurityDefinition(provider_name=name, scopes=list(requirement[name]))
        for requirement in requirements or ()
        for name in sorted(requirement)
    ]