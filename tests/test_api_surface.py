"""
Public API surface: names integrations import from the package root.
"""

from __future__ import annotations

import sharelink
from sharelink.errors import ShareLinkError


def test_public_names_exist() -> None:
    for name in sharelink.__all__:
        assert hasattr(sharelink, name), name


def test_error_taxonomy_roots_at_value_error() -> None:
    for name in (
        "InvalidCharacter",
        "EmptyPayload",
        "UnknownVersion",
        "DecompressionFailed",
        "InvalidUtf8",
        "UnsupportedUrl",
        "TokenAbsent",
    ):
        cls = getattr(sharelink, name)
        assert issubclass(cls, ShareLinkError)
        assert issubclass(cls, ValueError)
