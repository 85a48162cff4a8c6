"""
Symbol table for the 32-character alphabet.

The reverse map covers the 7-bit ASCII range and folds case, so both
``q`` and ``Q`` resolve to symbol 0. It is built on first use and never
mutated afterwards; two threads racing on first use build identical tables.
"""

from functools import lru_cache
from typing import Optional, Tuple

from .config import CHARSET
from .errors import InvalidCharacterError

_NOT_IN_ALPHABET = -1


def alphabet() -> str:
    """Return the 32 alphabet characters in symbol order."""
    return CHARSET


@lru_cache(maxsize=None)
def reverse_map() -> Tuple[int, ...]:
    """Return a 128-entry table mapping an ASCII code point to its symbol, or -1."""
    table = [_NOT_IN_ALPHABET] * 128
    for symbol, char in enumerate(CHARSET):
        table[ord(char)] = symbol
        table[ord(char.upper())] = symbol
    return tuple(table)


def value_of(char: str, position: Optional[int] = None) -> int:
    """
    Look up the 5-bit symbol for a single character.

    Args:
        char: One character, either case
        position: Index of the character in the input, for error reporting

    Returns:
        Symbol value in [0, 32)

    Raises:
        InvalidCharacterError: If the character is not ASCII or not in the alphabet
    """
    if len(char) != 1:
        raise InvalidCharacterError(char, position)
    code = ord(char)
    if code >= 128:
        raise InvalidCharacterError(char, position)
    symbol = reverse_map()[code]
    if symbol == _NOT_IN_ALPHABET:
        raise InvalidCharacterError(char, position)
    return symbol


def char_of(symbol: int) -> str:
    """Render a symbol as its lowercase alphabet character."""
    if not 0 <= symbol < len(CHARSET):
        raise ValueError(f"Symbol out of range: {symbol}")
    return CHARSET[symbol]
