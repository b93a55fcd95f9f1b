"""
Deep-link intake for share links.

Incoming URLs (from the OS, a QR scan, a paste) are handed to
DeepLinkHandler.handle(). A recognised share link leaves its phrase in
`pending_share_phrase` until the consumer calls clear_pending().
Anything else is ignored.

Phrases are never logged, only their length.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .link import phrase_from_url


logger = logging.getLogger(__name__)


@dataclass
class DeepLinkHandler:
    pending_share_phrase: Optional[str] = None

    def handle(self, url: str) -> bool:
        """Decode `url`; on success store the phrase and return True."""
        logger.info("Handling share URL")

        phrase = phrase_from_url(url)
        if phrase is None:
            logger.warning("Could not extract phrase from URL")
            return False

        logger.info("Received share link, phrase length: %d", len(phrase))
        self.pending_share_phrase = phrase
        return True

    def clear_pending(self) -> None:
        self.pending_share_phrase = None
