"""
bech32codec - Checksummed Bech32 / Bech32m text encoding

Converts between a human-readable string and a (prefix, payload, variant)
triple, detecting transcription errors with a BCH checksum over GF(32).

Example Usage:
    from bech32codec import Variant, decode, encode

    s = encode("a", b"", Variant.BECH32)    # a12uel5l
    hrp, data, variant = decode("A1LQFN3A") # ("a", b"", Variant.BECH32M)
"""

from .bits import convert_bits
from .charset import alphabet, char_of, value_of
from .checksum import (
    Variant,
    create_checksum,
    hrp_expand,
    polymod,
    verify_checksum,
)
from .codec import (
    Decoded,
    decode,
    decode_bech32,
    decode_variant,
    decode_words,
    encode,
    encode_words,
)
from .errors import (
    Bech32Error,
    ChecksumMismatchError,
    DataTooShortError,
    ErrorKind,
    HrpTooShortError,
    InvalidCharacterError,
    InvalidPaddingError,
    InvalidSeparatorPositionError,
    MixedCaseError,
    NoSeparatorError,
    WrongVariantError,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "Decoded",
    "decode",
    "decode_bech32",
    "decode_variant",
    "decode_words",
    "encode",
    "encode_words",
    # Checksum
    "Variant",
    "create_checksum",
    "hrp_expand",
    "polymod",
    "verify_checksum",
    # Symbols and bits
    "alphabet",
    "char_of",
    "value_of",
    "convert_bits",
    # Errors
    "Bech32Error",
    "ChecksumMismatchError",
    "DataTooShortError",
    "ErrorKind",
    "HrpTooShortError",
    "InvalidCharacterError",
    "InvalidPaddingError",
    "InvalidSeparatorPositionError",
    "MixedCaseError",
    "NoSeparatorError",
    "WrongVariantError",
]
