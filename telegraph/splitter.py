from __future__ import annotations

from typing import List


def split_by_delimiter(text: str, delimiter: str) -> List[str]:
    """
    Literal substring split: one element per delimiter occurrence plus the tail.
    Consecutive delimiters produce empty elements and "" produces [""].
    Scanning resumes one character past each hit.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")

    parts: List[str] = []
    last = 0
    while True:
        hit = text.find(delimiter, last)
        if hit < 0:
            break
        parts.append(text[last:hit])
        last = hit + 1
    parts.append(text[last:])
    return parts
