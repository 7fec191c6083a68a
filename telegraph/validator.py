from __future__ import annotations

from .alphabet import DIGITS, LETTERS

ENCODE_CHARS = frozenset(LETTERS + DIGITS + " ")
DECODE_CHARS = frozenset(".- /")


def is_valid_for_encode(text: str) -> bool:
    # Expects text that is already upper-cased.
    if not text:
        return False
    if any(ch not in ENCODE_CHARS for ch in text):
        return False
    if text.count(" ") == len(text):
        return False
    return True


def is_valid_for_decode(text: str) -> bool:
    if not text:
        return False
    if any(ch not in DECODE_CHARS for ch in text):
        return False
    # Only uniform runs are rejected; a mix such as "/ /" passes.
    if text.count(" ") == len(text) or text.count("/") == len(text):
        return False
    return True
