"""
Checksum Engine

The checksum is a BCH code over GF(32). ``polymod`` keeps the remainder in a
30-bit register: each step shifts in one 5-bit symbol and reduces by the
generator for every bit that falls off the top. A string is valid when the
remainder over the expanded HRP plus all data symbols (checksum included)
equals the target constant of one of the two variants.

Algorithm Overview:
1. Expand the HRP into its high bits, a zero symbol, then its low bits
2. Append the data symbols
3. Run polymod over the sequence
4. Compare the result with the Bech32 constant (1) and the Bech32m constant
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .config import BECH32_CONST, BECH32M_CONST, CHECKSUM_LENGTH, GENERATORS


class Variant(Enum):
    """Checksum variant, identified by the constant polymod must equal."""

    BECH32 = BECH32_CONST
    BECH32M = BECH32M_CONST

    @property
    def constant(self) -> int:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Variant":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown variant '{name}'. Valid variants: {[v.name.lower() for v in cls]}"
            ) from None


def hrp_expand(hrp: str) -> List[int]:
    """Expand the human-readable part into checksum input symbols."""
    codes = [ord(c) for c in hrp]
    return [c >> 5 for c in codes] + [0] + [c & 0x1F for c in codes]


def polymod(values: Iterable[int]) -> int:
    """Compute the 30-bit BCH remainder of a symbol sequence."""
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i in range(5):
            if (top >> i) & 1:
                chk ^= GENERATORS[i]
    return chk


def verify_checksum(hrp: str, data: Sequence[int]) -> Optional[Variant]:
    """
    Check the trailing checksum of a data part.

    Args:
        hrp: Lowercase human-readable part
        data: Data symbols followed by the 6 checksum symbols

    Returns:
        The variant whose constant matched, or None when neither did
    """
    const = polymod(hrp_expand(hrp) + list(data))
    for variant in Variant:
        if const == variant.constant:
            return variant
    return None


def create_checksum(hrp: str, data: Sequence[int], variant: Variant) -> List[int]:
    """Compute the 6 checksum symbols that make ``verify_checksum`` return ``variant``."""
    values = hrp_expand(hrp) + list(data)
    mod = polymod(values + [0] * CHECKSUM_LENGTH) ^ variant.constant
    return [(mod >> 5 * (CHECKSUM_LENGTH - 1 - i)) & 31 for i in range(CHECKSUM_LENGTH)]
