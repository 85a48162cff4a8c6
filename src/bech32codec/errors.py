"""
Failure reasons reported by the codec.

Every error raised by decode, encode or the bit regrouper is a subclass of
Bech32Error, which is itself a ValueError. Callers can either catch the
specific subclass or inspect the ``kind`` attribute.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .checksum import Variant


class ErrorKind(Enum):
    INVALID_CHARACTER = "invalid_character"
    MIXED_CASE = "mixed_case"
    NO_SEPARATOR = "no_separator"
    INVALID_SEPARATOR_POSITION = "invalid_separator_position"
    HRP_TOO_SHORT = "hrp_too_short"
    DATA_TOO_SHORT = "data_too_short"
    WRONG_VARIANT = "wrong_variant"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    INVALID_PADDING = "invalid_padding"


class Bech32Error(ValueError):
    """Base exception for encoding and decoding errors"""

    kind: Optional[ErrorKind] = None
    default_message = "Invalid bech32 string"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidCharacterError(Bech32Error):
    """A character is outside the alphabet or outside 7-bit ASCII"""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        self.position = position
        if position is None:
            message = f"Invalid character {char!r}"
        else:
            message = f"Invalid character {char!r} at position {position}"
        super().__init__(message)


class MixedCaseError(Bech32Error):
    kind = ErrorKind.MIXED_CASE
    default_message = "String mixes uppercase and lowercase characters"


class NoSeparatorError(Bech32Error):
    kind = ErrorKind.NO_SEPARATOR
    default_message = "Separator '1' not found"


class InvalidSeparatorPositionError(Bech32Error):
    kind = ErrorKind.INVALID_SEPARATOR_POSITION
    default_message = "Separator is at an invalid position"


class HrpTooShortError(InvalidSeparatorPositionError):
    """Empty human-readable part (separator at position 0)"""

    kind = ErrorKind.HRP_TOO_SHORT
    default_message = "Human-readable part is empty"


class DataTooShortError(Bech32Error):
    kind = ErrorKind.DATA_TOO_SHORT
    default_message = "Data part is shorter than the 6-character checksum"


class WrongVariantError(Bech32Error):
    """The checksum is valid, but for a variant the caller did not accept"""

    kind = ErrorKind.WRONG_VARIANT

    def __init__(self, expected: "Variant", actual: "Variant"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Checksum matches {actual.name.lower()}, expected {expected.name.lower()}"
        )


class ChecksumMismatchError(Bech32Error):
    kind = ErrorKind.CHECKSUM_MISMATCH
    default_message = "Checksum does not match any variant"


class InvalidPaddingError(Bech32Error):
    """Bit regrouping found out-of-range values or non-canonical leftover bits"""

    kind = ErrorKind.INVALID_PADDING
    default_message = "Invalid padding in data part"
