"""
Tests for the versioned raw/deflate payload.
"""

from __future__ import annotations

import pytest

from sharelink import compression, payload
from sharelink.errors import (
    DecompressionFailed,
    EmptyPayload,
    InvalidUtf8,
    ShareLinkError,
    UnknownVersion,
)


REPETITIVE = " ".join(["the purple elephant dances quietly"] * 20)


@pytest.mark.parametrize(
    "phrase",
    [
        "",
        "a",
        "hi",
        "golden castle ancient wizard",
        "le renard brun rapide saute par-dessus le chien paresseux",
        "clé 🔑 ключ 鍵",
        REPETITIVE,
    ],
)
def test_build_parse_roundtrip(phrase: str) -> None:
    assert payload.parse(payload.build(phrase)) == phrase


def test_repetitive_phrase_uses_deflate() -> None:
    built = payload.build(REPETITIVE)
    assert built[0] == payload.VERSION_DEFLATE
    assert len(built) < 1 + len(REPETITIVE.encode("utf-8"))


def test_short_phrase_uses_raw() -> None:
    built = payload.build("x7Qp")
    assert built[0] == payload.VERSION_RAW
    assert built[1:] == b"x7Qp"


def test_empty_phrase_is_raw_version_byte_only() -> None:
    assert payload.build("") == b"\x01"


def test_compressor_failure_falls_back_to_raw(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(compression, "compress", lambda data: None)
    built = payload.build(REPETITIVE)
    assert built[0] == payload.VERSION_RAW
    assert payload.parse(built) == REPETITIVE


def test_parse_rejects_empty_payload() -> None:
    with pytest.raises(EmptyPayload):
        payload.parse(b"")


def test_parse_rejects_unknown_version() -> None:
    with pytest.raises(UnknownVersion) as info:
        payload.parse(b"\x03abc")
    assert info.value.version == 0x03

    with pytest.raises(UnknownVersion):
        payload.parse(b"\x00")


def test_parse_rejects_bad_deflate_stream() -> None:
    with pytest.raises(DecompressionFailed):
        payload.parse(b"\x02\xff\xff\xff")


def test_parse_rejects_invalid_utf8_raw() -> None:
    with pytest.raises(InvalidUtf8):
        payload.parse(b"\x01\xff\xfe")


def test_parse_rejects_invalid_utf8_deflate() -> None:
    packed = compression.compress(b"\xff" * 50)
    assert packed is not None
    with pytest.raises(InvalidUtf8):
        payload.parse(b"\x02" + packed)


def test_all_parse_errors_share_base_class() -> None:
    for bad in (b"", b"\x09", b"\x02\xff", b"\x01\xc3"):
        with pytest.raises(ShareLinkError):
            payload.parse(bad)
