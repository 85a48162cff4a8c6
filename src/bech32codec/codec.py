"""
Bech32 / Bech32m codec.

Converts between an encoded string ``hrp + "1" + data + checksum`` and the
(hrp, payload, variant) triple it carries. The codec knows nothing about what
the payload means; address families and their payload lengths are left to the
caller.

Two decode call shapes are provided:
- ``decode`` accepts either checksum variant and reports which one matched
- ``decode_variant`` accepts exactly one variant and raises WrongVariantError
  for a string that is valid only under the other one
"""

from typing import Iterable, List, NamedTuple, Optional, Tuple

from .bits import convert_bits
from .charset import char_of, value_of
from .checksum import Variant, create_checksum, verify_checksum
from .config import CHECKSUM_LENGTH, SEPARATOR
from .errors import (
    Bech32Error,
    ChecksumMismatchError,
    DataTooShortError,
    HrpTooShortError,
    InvalidCharacterError,
    MixedCaseError,
    NoSeparatorError,
    WrongVariantError,
)
from .log import get_logger, log

_logger = get_logger("codec")


class Decoded(NamedTuple):
    hrp: str
    data: bytes
    variant: Variant


def _check_hrp(hrp: str):
    for position, char in enumerate(hrp):
        if ord(char) >= 128:
            raise InvalidCharacterError(char, position)


def _split(bech: str) -> Tuple[str, List[int], Variant]:
    if bech.lower() != bech and bech.upper() != bech:
        raise MixedCaseError()

    sep = bech.rfind(SEPARATOR)
    if sep == -1:
        raise NoSeparatorError()
    if sep < 1:
        raise HrpTooShortError()
    if len(bech) - sep - 1 < CHECKSUM_LENGTH:
        raise DataTooShortError()

    _check_hrp(bech[:sep])
    hrp = bech[:sep].lower()

    values = [
        value_of(char, sep + 1 + i) for i, char in enumerate(bech[sep + 1 :])
    ]

    variant = verify_checksum(hrp, values)
    if variant is None:
        raise ChecksumMismatchError()
    return hrp, values[:-CHECKSUM_LENGTH], variant


def _to_bytes(words: List[int]) -> bytes:
    return bytes(convert_bits(words, 5, 8, pad=False))


def _decode(bech: str, expected: Optional[Variant] = None) -> Decoded:
    # The variant is checked before regrouping, so it wins over bad padding.
    try:
        hrp, words, variant = _split(bech)
        if expected is not None and variant is not expected:
            raise WrongVariantError(expected, variant)
        data = _to_bytes(words)
    except Bech32Error as e:
        log(_logger, "debug", "Rejected encoded string", kind=e.kind.value)
        raise

    log(
        _logger,
        "debug",
        "Decoded string",
        hrp=hrp,
        length=len(data),
        variant=variant.name.lower(),
    )
    return Decoded(hrp, data, variant)


def decode_words(bech: str) -> Tuple[str, List[int], Variant]:
    """
    Validate a string and return its 5-bit data symbols without regrouping.

    Useful for formats whose data part is not a whole number of bytes, such as
    segwit addresses that prefix a witness version symbol.

    Returns:
        (lowercase hrp, data symbols without the checksum, matched variant)
    """
    try:
        return _split(bech)
    except Bech32Error as e:
        log(_logger, "debug", "Rejected encoded string", kind=e.kind.value)
        raise


def decode(bech: str) -> Decoded:
    """
    Decode a Bech32 or Bech32m string.

    Args:
        bech: Encoded string, entirely lowercase or entirely uppercase

    Returns:
        Decoded(hrp, data, variant) with a lowercase hrp

    Raises:
        Bech32Error: One subclass per failure reason, see ``errors.ErrorKind``
    """
    return _decode(bech)


def decode_variant(bech: str, expected: Variant) -> Decoded:
    """Decode a string whose checksum must be of the ``expected`` variant."""
    return _decode(bech, expected)


def decode_bech32(bech: str) -> Tuple[str, bytes]:
    """Decode a classic Bech32 string; a Bech32m checksum is a WrongVariantError."""
    hrp, data, _ = decode_variant(bech, Variant.BECH32)
    return hrp, data


def encode_words(hrp: str, words: Iterable[int], variant: Variant) -> str:
    """
    Encode 5-bit data symbols under ``hrp`` with a checksum of ``variant``.

    Raises:
        HrpTooShortError: If hrp is empty
        InvalidCharacterError: If hrp holds a character outside 7-bit ASCII
        ValueError: If a symbol is outside [0, 32)
    """
    if not hrp:
        raise HrpTooShortError()
    _check_hrp(hrp)
    hrp = hrp.lower()

    words = list(words)
    data_part = "".join(char_of(w) for w in words)
    checksum = "".join(char_of(w) for w in create_checksum(hrp, words, variant))
    return hrp + SEPARATOR + data_part + checksum


def encode(hrp: str, data: bytes, variant: Variant) -> str:
    """
    Encode a byte payload as a lowercase Bech32 or Bech32m string.

    Args:
        hrp: Non-empty human-readable part, either case
        data: Payload bytes
        variant: Checksum variant to produce

    Returns:
        The encoded string in lowercase
    """
    words = convert_bits(data, 8, 5, pad=True)
    encoded = encode_words(hrp, words, variant)
    log(
        _logger,
        "debug",
        "Encoded payload",
        hrp=hrp.lower(),
        length=len(data),
        variant=variant.name.lower(),
    )
    return encoded
