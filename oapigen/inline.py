"""Compressed, base64 encoded form of a specification for embedding in code."""

from __future__ import annotations

import base64
import binascii
import gzip
import json
from typing import Any

WIDTH = 80


def _as_json_bytes(spec: Any) -> bytes:
    if isinstance(spec, bytes):
        return spec
    if isinstance(spec, str):
        return spec.encode("utf-8")
    return json.dumps(spec, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def compress_spec(spec: Any) -> str:
    """Gzip a specification's JSON at best compression and base64 encode it.

    The specification may be JSON text, JSON bytes, or data to serialise.
    """
    compressed = gzip.compress(_as_json_bytes(spec), compresslevel=9, mtime=0)
    return base64.b64encode(compressed).decode("ascii")


def chunk(text: str, width: int = WIDTH) -> list[str]:
    """Split text into pieces of at most width characters."""
    if width <= 0:
        raise ValueError("width must be positive")
    return [text[start:start + width] for start in range(0, len(text), width)]


def spec_parts(spec: Any) -> list[str]:
    """Return the compressed specification cut into lines of 80 characters."""
    return chunk(compress_spec(spec), WIDTH)


def decode_spec_parts(parts: list[str]) -> Any:
    """Reassemble, decompress and parse parts made by spec_parts."""
    try:
        compressed = base64.b64decode("".join(parts), validate=True)
        return json.loads(gzip.decompress(compressed))
    except (binascii.Error, OSError, EOFError, json.JSONDecodeError) as exc:
        raise ValueError(f"error decoding embedded spec: {exc}") from exc