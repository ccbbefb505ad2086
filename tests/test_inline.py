import base64

import pytest

from oapigen.inline import WIDTH, chunk, compress_spec, decode_spec_parts, spec_parts

SPEC = {
    "openapi": "3.0.1",
    "info": {"title": "Embedded", "version": "1.0.0"},
    "paths": {f"/item{n}": {"get": {"operationId": f"getItem{n}"}} for n in range(50)},
}


def test_round_trip():
    assert decode_spec_parts(spec_parts(SPEC)) == SPEC


def test_round_trip_from_text():
    text = '{"openapi":"3.0.1","paths":{}}'
    assert decode_spec_parts(spec_parts(text)) == {"openapi": "3.0.1", "paths": {}}


def test_parts_width():
    parts = spec_parts(SPEC)
    assert len(parts) > 1
    assert all(len(part) == WIDTH for part in parts[:-1])
    assert 0 < len(parts[-1]) <= WIDTH
    assert "".join(parts) == compress_spec(SPEC)


def test_compressed_is_gzip():
    raw = base64.b64decode(compress_spec(SPEC))
    assert raw[:2] == b"\x1f\x8b"


def test_compression_is_deterministic():
    assert compress_spec(SPEC) == compress_spec(dict(SPEC))


def test_chunk():
    assert chunk("abcdefg", 3) == ["abc", "def", "g"]
    assert chunk("", 80) == []
    assert chunk("abc", 3) == ["abc"]


def test_chunk_rejects_bad_width():
    with pytest.raises(ValueError):
        chunk("abc", 0)


def test_decode_rejects_garbage():
    with pytest.raises(ValueError):
        decode_spec_parts(["not base64!"])
    with pytest.raises(ValueError):
        decode_spec_parts([base64.b64encode(b"plain").decode()])