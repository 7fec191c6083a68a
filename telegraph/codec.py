from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from .alphabet import code_for, symbol_for
from .splitter import split_by_delimiter
from .validator import is_valid_for_decode, is_valid_for_encode

INVALID_INPUT = "Invalid input."
CHAR_SEPARATOR = " "
WORD_SEPARATOR = " / "
WORD_DELIMITER = "/"

# Only ASCII letters are folded; "ß".upper() == "SS" must not turn into valid input.
_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


class Direction(str, Enum):
    TO_MORSE = "to_morse"
    FROM_MORSE = "from_morse"


@dataclass(frozen=True)
class Translation:
    text: str
    valid: bool = True

    @classmethod
    def invalid(cls) -> "Translation":
        return cls(text="", valid=False)

    def render(self) -> str:
        """Text for the console boundary: the translation or the sentinel."""
        return self.text if self.valid else INVALID_INPUT


def to_morse(text: str) -> Translation:
    message = text.translate(_ASCII_UPPER)
    if not is_valid_for_encode(message):
        return Translation.invalid()

    words: List[str] = []
    for word in split_by_delimiter(message, " "):
        words.append(CHAR_SEPARATOR.join(code_for(ch) for ch in word))
    return Translation(WORD_SEPARATOR.join(words))


def from_morse(text: str) -> Translation:
    if not is_valid_for_decode(text):
        return Translation.invalid()

    words: List[str] = []
    for word in split_by_delimiter(text, WORD_DELIMITER):
        letters: List[str] = []
        for token in split_by_delimiter(word, CHAR_SEPARATOR):
            symbol = symbol_for(token)
            # Unknown tokens are dropped without an error.
            if symbol is not None:
                letters.append(symbol)
        words.append("".join(letters))
    return Translation(" ".join(words))


def translate(text: str, direction: Direction) -> Translation:
    if direction == Direction.TO_MORSE:
        return to_morse(text)
    return from_morse(text)


def encode_to_morse(text: str) -> str:
    return to_morse(text).render()


def decode_from_morse(text: str) -> str:
    return from_morse(text).render()


def translate_text(text: str, direction: Direction) -> str:
    return translate(text, direction).render()
