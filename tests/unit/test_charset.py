"""Unit tests for the symbol table."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from bech32codec.charset import alphabet, char_of, reverse_map, value_of
from bech32codec.errors import ErrorKind, InvalidCharacterError


def test_alphabet_is_32_distinct_characters():
    chars = alphabet()
    assert chars == "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
    assert len(set(chars)) == 32


@pytest.mark.parametrize(
    "char,expected",
    [("q", 0), ("p", 1), ("l", 31), ("Q", 0), ("L", 31), ("0", 15), ("7", 30)],
)
def test_value_of(char, expected):
    assert value_of(char) == expected


def test_value_of_is_inverse_of_char_of():
    for symbol in range(32):
        assert value_of(char_of(symbol)) == symbol
        assert value_of(char_of(symbol).upper()) == symbol


@pytest.mark.parametrize("char", ["1", "b", "i", "o", "B", "I", "O", " ", "-"])
def test_value_of_rejects_characters_outside_alphabet(char):
    with pytest.raises(InvalidCharacterError) as exc_info:
        value_of(char)
    assert exc_info.value.char == char
    assert exc_info.value.kind is ErrorKind.INVALID_CHARACTER


@pytest.mark.parametrize("char", ["\u00e9", "\u212a", "\x80", "\U0001f642"])
def test_value_of_rejects_non_ascii(char):
    with pytest.raises(InvalidCharacterError):
        value_of(char, position=4)


def test_value_of_reports_position():
    with pytest.raises(InvalidCharacterError) as exc_info:
        value_of("b", position=7)
    assert exc_info.value.position == 7
    assert "position 7" in str(exc_info.value)


def test_value_of_rejects_multi_character_input():
    with pytest.raises(InvalidCharacterError):
        value_of("qq")


@pytest.mark.parametrize("symbol", [-1, 32, 100])
def test_char_of_rejects_out_of_range(symbol):
    with pytest.raises(ValueError):
        char_of(symbol)


def test_reverse_map_is_cached():
    assert reverse_map() is reverse_map()
    assert len(reverse_map()) == 128


def test_reverse_map_concurrent_first_use():
    reverse_map.cache_clear()
    with ThreadPoolExecutor(max_workers=8) as pool:
        tables = list(pool.map(lambda _: reverse_map(), range(32)))
    assert all(table == tables[0] for table in tables)
    both_cases = set(alphabet() + alphabet().upper())
    assert sum(1 for v in tables[0] if v != -1) == len(both_cases)
