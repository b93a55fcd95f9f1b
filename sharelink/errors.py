"""
Error taxonomy for share-link decoding.

Every error derives from ShareLinkError, which itself is a ValueError, so
callers that already treat malformed input as ValueError keep working.

Public entry points that must never raise (link.phrase_from_url,
DeepLinkHandler.handle) collapse all of these into "no phrase".
"""

from __future__ import annotations


class ShareLinkError(ValueError):
    pass


class InvalidCharacter(ShareLinkError):
    """Base58 input contained a symbol outside the alphabet."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Invalid base58 character {char!r} at position {position}")
        self.char = char
        self.position = position


class EmptyPayload(ShareLinkError):
    pass


class UnknownVersion(ShareLinkError):
    def __init__(self, version: int) -> None:
        super().__init__(f"Unknown payload version: 0x{version:02x}")
        self.version = version


class DecompressionFailed(ShareLinkError):
    pass


class InvalidUtf8(ShareLinkError):
    pass


class UnsupportedUrl(ShareLinkError):
    pass


class TokenAbsent(ShareLinkError):
    pass
