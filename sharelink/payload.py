"""
Versioned payload wrapping the phrase bytes.

Wire format:
    byte 0      version (0x01 raw, 0x02 deflate)
    bytes 1..   UTF-8 phrase bytes, or their raw DEFLATE stream

There is no length prefix; the payload ends where the base58 token ends.
"""

from __future__ import annotations

import logging

from . import compression
from .errors import DecompressionFailed, EmptyPayload, InvalidUtf8, UnknownVersion


logger = logging.getLogger(__name__)

VERSION_RAW = 0x01
VERSION_DEFLATE = 0x02


def build(phrase: str) -> bytes:
    """
    Build the payload for `phrase`, choosing whichever of raw or deflate
    is strictly smaller (raw wins ties and compressor failures).
    """
    raw = phrase.encode("utf-8")
    compressed = compression.compress(raw)

    if compressed is not None and len(compressed) < len(raw):
        logger.debug("payload: deflate %d -> %d bytes", len(raw), len(compressed))
        return bytes([VERSION_DEFLATE]) + compressed

    logger.debug("payload: raw %d bytes", len(raw))
    return bytes([VERSION_RAW]) + raw


def parse(payload: bytes) -> str:
    """
    Recover the phrase from a payload.

    Raises EmptyPayload, UnknownVersion, DecompressionFailed or InvalidUtf8.
    """
    if not payload:
        raise EmptyPayload("Share payload is empty.")

    version = payload[0]
    content = payload[1:]

    if version == VERSION_RAW:
        data = content
    elif version == VERSION_DEFLATE:
        inflated = compression.decompress(content)
        if inflated is None:
            raise DecompressionFailed("Share payload is not a valid deflate stream.")
        data = inflated
    else:
        raise UnknownVersion(version)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8("Share payload is not valid UTF-8.") from exc
