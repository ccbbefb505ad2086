"""Selection of operations by their tags."""

from __future__ import annotations

from collections.abc import Iterable

from oapigen.configuration import Configuration
from oapigen.spec import Document, Operation, PathItem


def filter_operations_by_tag(document: Document, options: Configuration) -> None:
    """Drop operations according to the include and exclude tag options."""
    output = options.output_options
    if output.exclude_tags:
        exclude_operations_with_tags(document.paths, output.exclude_tags)
    if output.include_tags:
        include_operations_with_tags(document.paths, output.include_tags, False)


def exclude_operations_with_tags(paths: dict[str, PathItem], tags: Iterable[str]) -> None:
    """Remove every operation tagged with any of tags."""
    include_operations_with_tags(paths, tags, True)


def include_operations_with_tags(
    paths: dict[str, PathItem], tags: Iterable[str], exclude: bool = False
) -> None:
    """Keep only operations with one of tags, or with none of them if exclude."""
    tags = list(tags)
    for path_item in paths.values():
        for method, operation in path_item.operations().items():
            if operation_has_tag(operation, tags) == exclude:
                path_item.set_operation(method, None)


def operation_has_tag(operation: Operation | None, tags: Iterable[str]) -> bool:
    """Return whether the operation is tagged with any of tags."""
    if operation is None:
        return False
    wanted = set(tags)
    return any(tag in wanted for tag in operation.tags)