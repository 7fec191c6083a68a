from __future__ import annotations

import pytest

from telegraph.alphabet import ALPHABET, CODE_TO_SYMBOL, SYMBOL_TO_CODE, build_indexes, code_for, symbol_for


def test_alphabet_has_letters_then_digits_in_order():
    symbols = "".join(symbol for symbol, _ in ALPHABET)
    assert symbols == "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    assert all(set(code) <= {".", "-"} for _, code in ALPHABET)


def test_indexes_are_unique_in_both_directions():
    assert len(SYMBOL_TO_CODE) == 36
    assert len(CODE_TO_SYMBOL) == 36
    for symbol, code in ALPHABET:
        assert CODE_TO_SYMBOL[SYMBOL_TO_CODE[symbol]] == symbol
        assert SYMBOL_TO_CODE[CODE_TO_SYMBOL[code]] == code


def test_build_indexes_rejects_duplicate_code():
    with pytest.raises(ValueError):
        build_indexes([("A", ".-"), ("B", ".-")])


def test_build_indexes_rejects_duplicate_symbol():
    with pytest.raises(ValueError):
        build_indexes([("A", ".-"), ("A", "-...")])


def test_code_for_uses_letter_and_digit_offsets():
    assert code_for("A") == ".-"
    assert code_for("Z") == "--.."
    assert code_for("0") == "-----"
    assert code_for("9") == "----."
    with pytest.raises(KeyError):
        code_for("a")
    with pytest.raises(KeyError):
        code_for("!")


def test_symbol_for_returns_none_for_unknown_code():
    assert symbol_for("...") == "S"
    assert symbol_for(".....") == "5"
    assert symbol_for("......") is None
    assert symbol_for("") is None
