"""Bit regrouping between fixed-width integer sequences."""

from typing import Iterable, List

from .errors import InvalidPaddingError


def convert_bits(
    data: Iterable[int], from_bits: int, to_bits: int, pad: bool = True
) -> List[int]:
    """
    Repack a sequence of ``from_bits``-wide values into ``to_bits``-wide values.

    Args:
        data: Unsigned values, each below 2**from_bits
        from_bits: Width of the input values
        to_bits: Width of the output values
        pad: Zero-fill a trailing partial group instead of rejecting it

    Returns:
        List of unsigned values, each below 2**to_bits

    Raises:
        InvalidPaddingError: If an input value is out of range, or if ``pad`` is
            False and the leftover bits are non-zero or make up a whole input group
    """
    if from_bits <= 0 or to_bits <= 0:
        raise ValueError("Bit widths must be positive")

    acc = 0
    bits = 0
    ret = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value < 0 or (value >> from_bits):
            raise InvalidPaddingError(
                f"Value {value} does not fit in {from_bits} bits"
            )
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)

    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits:
        raise InvalidPaddingError(f"{bits} leftover bits form a whole input group")
    elif (acc << (to_bits - bits)) & maxv:
        raise InvalidPaddingError("Non-zero padding bits")
    return ret
