import pytest

from relaydb.unpack import (
    DEFAULT_PACKAGE_MAX_LENGTH,
    PACKAGE_MAX_DELIMITER_BYTES,
    LengthCoding,
    LoadBalance,
    UnpackMode,
    UnpackSetting,
)


def test_default_setting_is_five_byte_big_endian_head():
    s = UnpackSetting()
    assert s.mode is UnpackMode.LENGTH_FIELD
    assert s.package_max_length == DEFAULT_PACKAGE_MAX_LENGTH
    assert s.body_offset == 5
    assert s.length_field_offset == 1
    assert s.length_field_bytes == 4
    assert s.length_field_coding is LengthCoding.BIG_ENDIAN
    assert s.length_adjustment == 0
    assert s.fixed_length == 0
    assert s.delimiter == b""


def test_default_max_length_is_two_megabytes():
    assert UnpackSetting().package_max_length == 2 * 1024 * 1024


@pytest.mark.parametrize(
    "value, member",
    [
        (17, "VARINT"),
        (1234, "LITTLE_ENDIAN"),
        (4321, "BIG_ENDIAN"),
    ],
)
def test_coding_values_match_byte_order_constants(value, member):
    assert LengthCoding(value) is LengthCoding[member]
    s = UnpackSetting(length_field_coding=value)
    assert s.length_field_coding is LengthCoding[member]


def test_mode_and_balance_ordering():
    assert UnpackMode(0) is list(UnpackMode)[0]
    assert UnpackMode(1) is UnpackMode.FIXED_LENGTH
    assert UnpackMode(2) is UnpackMode.DELIMITER
    assert UnpackMode(3) is UnpackMode.LENGTH_FIELD
    assert LoadBalance(0) is LoadBalance.ROUND_ROBIN
    assert list(LoadBalance) == sorted(LoadBalance)


def test_delimiter_setting_for_line_protocol():
    s = UnpackSetting(mode=UnpackMode.DELIMITER, delimiter=b"\r\n")
    assert s.mode is UnpackMode.DELIMITER
    assert s.delimiter == b"\r\n"
    assert len(s.delimiter) <= PACKAGE_MAX_DELIMITER_BYTES


def test_varint_setting_example():
    s = UnpackSetting(
        body_offset=2,
        length_field_offset=1,
        length_field_bytes=1,
        length_field_coding=LengthCoding.VARINT,
    )
    assert s.length_field_coding is LengthCoding.VARINT
    assert s.body_offset == 2


def test_plain_ints_become_enums():
    s = UnpackSetting(mode=1, length_field_coding=1234)
    assert s.mode is UnpackMode.FIXED_LENGTH
    assert s.length_field_coding is LengthCoding.LITTLE_ENDIAN


def test_delimiter_accepts_bytearray():
    s = UnpackSetting(delimiter=bytearray(b"\n"))
    assert s.delimiter == b"\n"
    assert isinstance(s.delimiter, bytes)


def test_max_delimiter_length_accepted():
    s = UnpackSetting(delimiter=b"x" * PACKAGE_MAX_DELIMITER_BYTES)
    assert len(s.delimiter) == PACKAGE_MAX_DELIMITER_BYTES


def test_too_long_delimiter_rejected():
    with pytest.raises(ValueError):
        UnpackSetting(delimiter=b"x" * (PACKAGE_MAX_DELIMITER_BYTES + 1))


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        UnpackSetting(mode=99)


def test_unknown_coding_rejected():
    with pytest.raises(ValueError):
        UnpackSetting(length_field_coding=0)


@pytest.mark.parametrize(
    "field, value",
    [
        ("body_offset", -1),
        ("body_offset", 0x10000),
        ("length_field_offset", 0x10000),
        ("length_field_bytes", -1),
        ("length_adjustment", 0x8000),
        ("length_adjustment", -0x8001),
        ("package_max_length", -1),
        ("fixed_length", 1 << 32),
    ],
)
def test_out_of_range_fields_rejected(field, value):
    with pytest.raises(ValueError):
        UnpackSetting(**{field: value})


def test_negative_adjustment_allowed():
    s = UnpackSetting(length_adjustment=-5)
    assert s.length_adjustment == -5