"""Value strings and constant names for enum schemas."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from oapigen.extension import (
    EXT_ENUM_NAMES,
    EXT_ENUM_VAR_NAMES,
    ExtensionError,
    ext_parse_enum_var_names,
)


def _format_float(value: float) -> str:
    """Format a float in the shortest form, switching to exponent notation far from 1."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, raw_digits, exponent = Decimal(repr(value)).as_tuple()
    digits = list(raw_digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    point = len(digits) + exponent
    leading = point - 1
    prefix = "-" if sign else ""
    if leading < -4 or leading >= 21:
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        exp_sign = "+" if leading >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(leading):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{text}"
    if point >= len(text):
        return prefix + text + "0" * (point - len(text))
    return f"{prefix}{text[:point]}.{text[point:]}"


def enum_value_string(value: Any) -> str:
    """Return the text of one enum value as it appears in generated constants."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Mapping):
        items = sorted(
            (enum_value_string(k), enum_value_string(v)) for k, v in value.items()
        )
        return "map[" + " ".join(f"{k}:{v}" for k, v in items) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(enum_value_string(item) for item in value) + "]"
    return str(value)


def enum_value_strings(values: Iterable[Any]) -> list[str]:
    """Return the text of every enum value, in order."""
    return [enum_value_string(value) for value in values]


def enum_names(extensions: Mapping[str, Any], values: list[str]) -> list[str]:
    """Return the constant names for enum values.

    A valid x-enum-varnames list wins, then a valid x-enumNames list;
    otherwise the values themselves are used as names.
    """
    for key in (EXT_ENUM_VAR_NAMES, EXT_ENUM_NAMES):
        if key in extensions:
            try:
                return ext_parse_enum_var_names(extensions[key])
            except ExtensionError:
                continue
    return list(values)