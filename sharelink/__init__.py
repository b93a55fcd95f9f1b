"""
Vaultaire share links: recovery phrase <-> short URL-safe token.

    phrase -> payload.build -> base58.encode -> link.build_url
    url    -> link.extract_token -> base58.decode -> payload.parse -> phrase
"""

from .deep_link import DeepLinkHandler
from .errors import (
    DecompressionFailed,
    EmptyPayload,
    InvalidCharacter,
    InvalidUtf8,
    ShareLinkError,
    TokenAbsent,
    UnknownVersion,
    UnsupportedUrl,
)
from .link import (
    LinkShape,
    build_url,
    classify,
    decode_token,
    decode_url,
    encode_phrase,
    extract_token,
    is_supported_share_url,
    phrase_from_url,
)

__all__ = [
    "DeepLinkHandler",
    "DecompressionFailed",
    "EmptyPayload",
    "InvalidCharacter",
    "InvalidUtf8",
    "LinkShape",
    "ShareLinkError",
    "TokenAbsent",
    "UnknownVersion",
    "UnsupportedUrl",
    "build_url",
    "classify",
    "decode_token",
    "decode_url",
    "encode_phrase",
    "extract_token",
    "is_supported_share_url",
    "phrase_from_url",
]
