"""
Share link recognition and construction (contract-locked).

This module is the single source of truth for share URLs.

Accepted shapes (scheme and host compared case-insensitively):
    https://vaultaire.app/s#<token>        host may also be a subdomain
    vaultaire://s#<token>                  path empty or "/"
    vaultaire://<anything>/s#<token>       legacy host, path "/s"
Any of the above may carry the token as ?p=<token> instead, for handoff
flows that strip fragments. The fragment always wins when non-empty.

build_url() only ever emits the first shape, with the token in the fragment.

Rules:
- Strict decoding (decode_token, decode_url) raises ShareLinkError.
- phrase_from_url() is total: any ShareLinkError becomes None.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Tuple
from urllib.parse import SplitResult, parse_qsl, unquote, urlsplit, urlunsplit

from . import base58, payload
from .errors import ShareLinkError, TokenAbsent, UnsupportedUrl


logger = logging.getLogger(__name__)

SHARE_HOST = "vaultaire.app"
SHARE_PATH = "/s"
CUSTOM_SCHEME = "vaultaire"
CUSTOM_SCHEME_HOST = "s"
QUERY_PARAM = "p"


class LinkShape(str, Enum):
    CANONICAL = "canonical"
    CUSTOM_SCHEME = "custom_scheme"
    CUSTOM_SCHEME_LEGACY_HOST = "custom_scheme_legacy_host"


def _is_share_path(path: str) -> bool:
    return path == SHARE_PATH or path == SHARE_PATH + "/"


def _is_share_host(host: str | None) -> bool:
    if not host:
        return False
    return host == SHARE_HOST or host.endswith("." + SHARE_HOST)


def _classify_parts(parts: SplitResult) -> Optional[LinkShape]:
    scheme = parts.scheme.lower()
    host = parts.hostname  # already lowercased
    path = unquote(parts.path)

    if scheme == "https":
        if _is_share_host(host) and _is_share_path(path):
            return LinkShape.CANONICAL
        return None

    if scheme == CUSTOM_SCHEME:
        if host == CUSTOM_SCHEME_HOST:
            if path in ("", "/"):
                return LinkShape.CUSTOM_SCHEME
            return None
        if _is_share_path(path):
            return LinkShape.CUSTOM_SCHEME_LEGACY_HOST
        return None

    return None


def classify(url: str) -> Optional[LinkShape]:
    """Return which share shape `url` has, or None if it is not a share link."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    return _classify_parts(parts)


def is_supported_share_url(url: str) -> bool:
    return classify(url) is not None


# ---------------------------------------------------------------------------
# Token extraction
# ---------------------------------------------------------------------------


def _token_from_fragment(parts: SplitResult) -> str | None:
    return parts.fragment or None


def _token_from_query(parts: SplitResult) -> str | None:
    for name, value in parse_qsl(parts.query, keep_blank_values=True):
        if name == QUERY_PARAM:
            # Only the first occurrence counts.
            return value or None
    return None


# Evaluated in order; the query is only a fallback for stripped fragments.
_TOKEN_EXTRACTORS: Tuple[Callable[[SplitResult], str | None], ...] = (
    _token_from_fragment,
    _token_from_query,
)


def extract_token(url: str) -> str | None:
    """
    Return the base58 token carried by `url`, or None.

    Does not check the URL shape; see is_supported_share_url().
    """
    parts = urlsplit(url)
    for extractor in _TOKEN_EXTRACTORS:
        token = extractor(parts)
        if token:
            return token
    return None


# ---------------------------------------------------------------------------
# Encode / decode
# ---------------------------------------------------------------------------


def encode_phrase(phrase: str) -> str:
    """Encode a phrase into its base58 share token."""
    return base58.encode(payload.build(phrase))


def decode_token(token: str) -> str:
    """
    Decode a base58 share token into the phrase.

    Raises InvalidCharacter, EmptyPayload, UnknownVersion,
    DecompressionFailed or InvalidUtf8.
    """
    return payload.parse(base58.decode(token))


def build_url(phrase: str) -> str:
    """Build the canonical https share URL for `phrase`."""
    return urlunsplit(("https", SHARE_HOST, SHARE_PATH, "", encode_phrase(phrase)))


def decode_url(url: str) -> str:
    """
    Strict variant of phrase_from_url().

    Raises UnsupportedUrl, TokenAbsent, or any error from decode_token().
    """
    if classify(url) is None:
        raise UnsupportedUrl("Not a supported share link.")

    token = extract_token(url)
    if token is None:
        raise TokenAbsent("Share link carries no token.")

    return decode_token(token)


def phrase_from_url(url: str) -> str | None:
    """
    Return the phrase carried by a share URL, or None.

    Foreign or malformed links are ignored rather than reported.
    """
    try:
        return decode_url(url)
    except ShareLinkError as exc:
        logger.debug("share link ignored: %s", type(exc).__name__)
        return None
