"""
Base58 codec for share tokens.

Bitcoin alphabet (no 0, O, I, l). Leading zero bytes are significant:
each one becomes exactly one leading '1' and comes back unchanged.

The two base conversions work on explicit little-endian limb lists with
full carry propagation, so they stay independent of the payload format
and can be tested on their own:

- bytes_to_digits: big-endian bytes -> big-endian base58 digits
- digits_to_bytes: big-endian base58 digits -> big-endian bytes

Both return an empty sequence for a zero magnitude.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from .errors import InvalidCharacter


ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE = len(ALPHABET)  # 58

_INDEX: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}
_ZERO = ALPHABET[0]


def bytes_to_digits(data: bytes) -> List[int]:
    # Limbs are little-endian base58, seeded with a single zero limb.
    limbs = [0]
    for byte in data:
        carry = byte
        for i in range(len(limbs)):
            carry += limbs[i] << 8
            limbs[i] = carry % BASE
            carry //= BASE
        while carry > 0:
            limbs.append(carry % BASE)
            carry //= BASE

    # The seed limb is still zero only when the magnitude is zero; it is not
    # a digit and must not be mistaken for a leading-zero marker.
    if limbs == [0]:
        return []
    return limbs[::-1]


def digits_to_bytes(digits: Iterable[int]) -> bytes:
    # Limbs are little-endian base256.
    limbs = [0]
    for digit in digits:
        carry = digit
        for i in range(len(limbs)):
            carry += limbs[i] * BASE
            limbs[i] = carry & 0xFF
            carry >>= 8
        while carry > 0:
            limbs.append(carry & 0xFF)
            carry >>= 8

    out = bytearray(reversed(limbs))
    start = 0
    while start < len(out) and out[start] == 0:
        start += 1
    return bytes(out[start:])


def _count_leading(seq: Iterable, zero) -> int:
    count = 0
    for item in seq:
        if item != zero:
            break
        count += 1
    return count


def encode(data: bytes) -> str:
    """Encode bytes to a base58 token."""
    leading_zeros = _count_leading(data, 0)
    significant = bytes_to_digits(data[leading_zeros:])
    return _ZERO * leading_zeros + "".join(ALPHABET[d] for d in significant)


def decode(token: str) -> bytes:
    """
    Decode a base58 token back to bytes.

    Raises InvalidCharacter for any symbol outside ALPHABET.
    """
    digits = []
    for position, char in enumerate(token):
        value = _INDEX.get(char)
        if value is None:
            raise InvalidCharacter(char, position)
        digits.append(value)

    leading_ones = _count_leading(digits, 0)
    return b"\x00" * leading_ones + digits_to_bytes(digits[leading_ones:])
