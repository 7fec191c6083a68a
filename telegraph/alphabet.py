from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

# ITU Morse, letters A-Z then digits 0-9. Order is significant.
ALPHABET: Tuple[Tuple[str, str], ...] = (
    ("A", ".-"),
    ("B", "-..."),
    ("C", "-.-."),
    ("D", "-.."),
    ("E", "."),
    ("F", "..-."),
    ("G", "--."),
    ("H", "...."),
    ("I", ".."),
    ("J", ".---"),
    ("K", "-.-"),
    ("L", ".-.."),
    ("M", "--"),
    ("N", "-."),
    ("O", "---"),
    ("P", ".--."),
    ("Q", "--.-"),
    ("R", ".-."),
    ("S", "..."),
    ("T", "-"),
    ("U", "..-"),
    ("V", "...-"),
    ("W", ".--"),
    ("X", "-..-"),
    ("Y", "-.--"),
    ("Z", "--.."),
    ("0", "-----"),
    ("1", ".----"),
    ("2", "..---"),
    ("3", "...--"),
    ("4", "....-"),
    ("5", "....."),
    ("6", "-...."),
    ("7", "--..."),
    ("8", "---.."),
    ("9", "----."),
)

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
DIGIT_OFFSET = len(LETTERS)


def build_indexes(pairs: Sequence[Tuple[str, str]]) -> Tuple[Dict[str, str], Dict[str, str]]:
    """
    Build the symbol -> code and code -> symbol maps.
    Raises ValueError if a symbol or a code is repeated.
    """
    forward: Dict[str, str] = {}
    reverse: Dict[str, str] = {}
    for symbol, code in pairs:
        if symbol in forward:
            raise ValueError(f"Duplicate symbol in alphabet: {symbol!r}")
        if code in reverse:
            raise ValueError(f"Duplicate code in alphabet: {code!r} ({reverse[code]} and {symbol})")
        forward[symbol] = code
        reverse[code] = symbol
    return forward, reverse


SYMBOL_TO_CODE, CODE_TO_SYMBOL = build_indexes(ALPHABET)


def code_for(symbol: str) -> str:
    if len(symbol) == 1 and "A" <= symbol <= "Z":
        return ALPHABET[ord(symbol) - ord("A")][1]
    if len(symbol) == 1 and "0" <= symbol <= "9":
        return ALPHABET[DIGIT_OFFSET + ord(symbol) - ord("0")][1]
    raise KeyError(symbol)


def symbol_for(code: str) -> Optional[str]:
    return CODE_TO_SYMBOL.get(code)
