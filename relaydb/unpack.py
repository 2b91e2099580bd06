"""Settings that describe how a byte stream is split into packages."""

from __future__ import annotations

import enum
from dataclasses import dataclass

DEFAULT_PACKAGE_MAX_LENGTH = 1 << 21  # 2M
PACKAGE_MAX_DELIMITER_BYTES = 8

_USHORT_MAX = 0xFFFF
_SHORT_MIN = -0x8000
_SHORT_MAX = 0x7FFF
_UINT_MAX = 0xFFFFFFFF


class UnpackMode(enum.IntEnum):
    """How package boundaries are found in a stream."""

    NONE = 0
    FIXED_LENGTH = 1  # not recommended
    DELIMITER = 2  # suits text protocols
    LENGTH_FIELD = 3  # suits binary protocols


class LengthCoding(enum.IntEnum):
    """Encoding of the length field in length-field mode."""

    VARINT = 17  # 1 MSB + 7 bits
    LITTLE_ENDIAN = 1234
    BIG_ENDIAN = 4321


class LoadBalance(enum.IntEnum):
    """Strategies for picking one of several event loops or peers."""

    ROUND_ROBIN = 0
    RANDOM = 1
    LEAST_CONNECTIONS = 2
    IP_HASH = 3
    URL_HASH = 4


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be within [{low}, {high}], got {value}")


@dataclass
class UnpackSetting:
    """Parameters of a stream unpacker.

    The defaults describe a 5-byte head (1 flag byte and a 4-byte
    big-endian length) in length-field mode.

    In length-field mode the package length is
    ``head_len + body_len + length_adjustment``, where the length field
    holds ``body_len`` and ``head_len`` equals ``body_offset`` (for varint
    coding the actual varint width replaces ``length_field_bytes``).
    """

    mode: UnpackMode = UnpackMode.LENGTH_FIELD
    package_max_length: int = DEFAULT_PACKAGE_MAX_LENGTH
    fixed_length: int = 0
    delimiter: bytes = b""
    body_offset: int = 5
    length_field_offset: int = 1
    length_field_bytes: int = 4
    length_adjustment: int = 0
    length_field_coding: LengthCoding = LengthCoding.BIG_ENDIAN

    def __post_init__(self) -> None:
        self.mode = UnpackMode(self.mode)
        self.length_field_coding = LengthCoding(self.length_field_coding)
        self.delimiter = bytes(self.delimiter)
        if len(self.delimiter) > PACKAGE_MAX_DELIMITER_BYTES:
            raise ValueError(
                f"delimiter is limited to {PACKAGE_MAX_DELIMITER_BYTES} bytes, "
                f"got {len(self.delimiter)}"
            )
        _check_range("package_max_length", self.package_max_length, 0, _UINT_MAX)
        _check_range("fixed_length", self.fixed_length, 0, _UINT_MAX)
        _check_range("body_offset", self.body_offset, 0, _USHORT_MAX)
        _check_range("length_field_offset", self.length_field_offset, 0, _USHORT_MAX)
        _check_range("length_field_bytes", self.length_field_bytes, 0, _USHORT_MAX)
        _check_range("length_adjustment", self.length_adjustment, _SHORT_MIN, _SHORT_MAX)