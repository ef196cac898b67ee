"""
Identifier generation for context items.

IDs are the base-36 wall-clock millisecond timestamp followed by nine
random base-36 characters, so they sort roughly by creation time.
Uniqueness is probabilistic: two IDs minted in the same millisecond
collide with odds of 1 in 36**9.  Use uuid_id() where that is not
acceptable; ContextStore takes either as its id_factory.
"""

import secrets
import time
import uuid

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

SUFFIX_LENGTH = 9
_SUFFIX_SPACE = 36 ** SUFFIX_LENGTH


def to_base36(n: int) -> str:
    """Encode a non-negative integer in lower-case base 36."""
    if n < 0:
        raise ValueError(f"Cannot encode negative number: {n}")
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Time-prefixed ID: base36(epoch ms) + 9 random base-36 characters."""
    millis = time.time_ns() // 1_000_000
    suffix = to_base36(secrets.randbelow(_SUFFIX_SPACE)).rjust(SUFFIX_LENGTH, "0")
    return to_base36(millis) + suffix


def uuid_id() -> str:
    """128-bit random ID, for callers that need guaranteed-unique IDs."""
    return uuid.uuid4().hex
