"""Struct tags for the fields of generated object types."""

from __future__ import annotations

from oapigen.extension import (
    EXT_PROP_EXTRA_TAGS,
    EXT_PROP_GO_JSON_IGNORE,
    EXT_PROP_OMIT_EMPTY,
    ExtensionError,
    ext_extra_tags,
    ext_parse_go_json_ignore,
    ext_parse_omit_empty,
)
from oapigen.gotypes import Property


def omit_empty(prop: Property, disable_required_readonly_as_pointer: bool = False) -> bool:
    """Return whether the field's JSON tag carries omitempty.

    A valid boolean x-omitempty extension overrides the computed answer.
    """
    result = (
        not prop.nullable
        and (not prop.required or prop.read_only or prop.write_only)
        and (not prop.required or not prop.read_only or not disable_required_readonly_as_pointer)
    )
    if EXT_PROP_OMIT_EMPTY in prop.extensions:
        try:
            result = ext_parse_omit_empty(prop.extensions[EXT_PROP_OMIT_EMPTY])
        except ExtensionError:
            pass
    return result


def field_tags(prop: Property, disable_required_readonly_as_pointer: bool = False) -> dict[str, str]:
    """Return the struct tags of a property's field, keyed by tag name in sorted order."""
    suffix = ",omitempty" if omit_empty(prop, disable_required_readonly_as_pointer) else ""
    tags = {"json": prop.json_field_name + suffix}
    if prop.needs_form_tag:
        tags["form"] = prop.json_field_name + suffix

    if EXT_PROP_GO_JSON_IGNORE in prop.extensions:
        try:
            if ext_parse_go_json_ignore(prop.extensions[EXT_PROP_GO_JSON_IGNORE]):
                tags["json"] = "-"
        except ExtensionError:
            pass

    if EXT_PROP_EXTRA_TAGS in prop.extensions:
        try:
            tags.update(ext_extra_tags(prop.extensions[EXT_PROP_EXTRA_TAGS]))
        except ExtensionError:
            pass

    return {key: tags[key] for key in sorted(tags)}


def format_field_tags(tags: dict[str, str]) -> str:
    """Render tags as a back-quoted struct annotation with keys in sorted order."""
    return "`" + " ".join(f'{key}:"{tags[key]}"' for key in sorted(tags)) + "`"