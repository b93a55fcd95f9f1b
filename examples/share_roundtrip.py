"""
Simple end-to-end share link roundtrip example.

This simulates:

1. The sharing device turning a recovery phrase into a share URL.
2. The receiving device handling that URL (web link, custom scheme, and
   the legacy ?p= form some handoff flows produce).
3. A foreign link being ignored.
"""

import logging

from sharelink import DeepLinkHandler, build_url, encode_phrase


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    phrase = "the purple elephant dances quietly under the golden castle"

    # 1. Sharing side
    url = build_url(phrase)
    token = encode_phrase(phrase)
    print("Share URL:")
    print(url)
    print()

    # 2. Receiving side
    handler = DeepLinkHandler()
    for incoming in (
        url,
        f"vaultaire://s#{token}",
        f"https://vaultaire.app/s?p={token}",
        f"https://evil.com/s#{token}",
    ):
        ok = handler.handle(incoming)
        print(f"{incoming[:40]}... -> {'accepted' if ok else 'ignored'}")

    if handler.pending_share_phrase == phrase:
        print("✅ phrase recovered")
    else:
        print("❌ phrase NOT recovered")
    handler.clear_pending()


if __name__ == "__main__":
    main()
