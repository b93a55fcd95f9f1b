"""
Raw DEFLATE primitive used by the payload codec.

Streams carry no zlib header or trailer (wbits=-15); this is the format
the mobile apps put on the wire.

Contract:
- compress() returns None instead of raising; callers fall back to raw.
- decompress() returns None for malformed, truncated or oversized streams
  and for streams followed by trailing bytes. A valid stream that inflates
  to nothing returns b"".

Config:
- SHARELINK_MAX_INFLATE_BYTES caps decompress() output (default 1 MiB).
"""

from __future__ import annotations

import logging
import os
import zlib


logger = logging.getLogger(__name__)

_RAW_DEFLATE_WBITS = -15
DEFAULT_MAX_INFLATE_BYTES = 1024 * 1024


def max_inflate_bytes() -> int:
    """
    Return the decompression cap from SHARELINK_MAX_INFLATE_BYTES.

    Unset, non-integer or non-positive values mean the default.
    """
    raw = os.getenv("SHARELINK_MAX_INFLATE_BYTES")
    if raw is None:
        return DEFAULT_MAX_INFLATE_BYTES
    try:
        value = int(raw.strip())
    except ValueError:
        return DEFAULT_MAX_INFLATE_BYTES
    return value if value > 0 else DEFAULT_MAX_INFLATE_BYTES


def compress(data: bytes) -> bytes | None:
    try:
        co = zlib.compressobj(level=9, wbits=_RAW_DEFLATE_WBITS)
        return co.compress(data) + co.flush()
    except zlib.error as exc:
        logger.debug("deflate failed: %s", exc)
        return None


def decompress(data: bytes) -> bytes | None:
    limit = max_inflate_bytes()
    d = zlib.decompressobj(wbits=_RAW_DEFLATE_WBITS)
    try:
        # Ask for one byte past the limit so an oversized stream is detectable.
        out = d.decompress(data, limit + 1)
    except zlib.error as exc:
        logger.debug("inflate failed: %s", exc)
        return None

    if len(out) > limit or d.unconsumed_tail:
        logger.debug("inflate exceeded %d bytes", limit)
        return None
    if not d.eof:
        logger.debug("inflate stream truncated")
        return None
    if d.unused_data:
        logger.debug("inflate stream followed by %d trailing bytes", len(d.unused_data))
        return None
    return out
