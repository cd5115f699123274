import pytest

from rustcraft.protobuf import (
    Field,
    Person,
    PhoneNumber,
    ProtobufError,
    WireType,
    parse_field,
    parse_message,
    parse_varint,
    unpack_tag,
)


def test_id():
    assert parse_message(b"\x10\x2a", Person) == Person(name="", id=42, phone=[])


def test_name():
    data = b"\x0a\x0e" + b"beautiful name"
    assert parse_message(data, Person) == Person(name="beautiful name", id=0, phone=[])


def test_just_person():
    data = bytes([0x0A, 0x04, 0x45, 0x76, 0x61, 0x6E, 0x10, 0x16])
    assert parse_message(data, Person) == Person(name="Evan", id=22, phone=[])


def test_phone():
    data = (
        b"\x0a\x00\x10\x00\x1a\x16\x0a\x0e"
        + b"number-one-abc"
        + b"\x12\x04home"
    )
    assert parse_message(data, Person) == Person(
        name="",
        id=0,
        phone=[PhoneNumber(number="number-one-abc", type="home")],
    )


def test_full_person():
    data = (
        b"\x0a\x07maxwell\x10\x2a"
        + b"\x1a\x16\x0a\x0e"
        + b"number-one-abc"
        + b"\x12\x04home"
        + b"\x1a\x18\x0a\x0e"
        + b"number-two-xyz"
        + b"\x12\x06mobile"
    )
    assert parse_message(data, Person) == Person(
        name="maxwell",
        id=42,
        phone=[
            PhoneNumber(number="number-one-abc", type="home"),
            PhoneNumber(number="number-two-xyz", type="mobile"),
        ],
    )


def test_empty_message_is_default():
    assert parse_message(b"", Person) == Person()


def test_unknown_fields_are_skipped():
    assert parse_message(b"\x20\x05\x10\x2a", Person) == Person(id=42)


def test_parse_varint_multibyte():
    assert parse_varint(b"\x96\x01rest") == (150, b"rest")


def test_parse_varint_single_byte():
    assert parse_varint(b"\x2a") == (42, b"")


def test_parse_varint_not_enough_bytes():
    with pytest.raises(ProtobufError, match="Not enough bytes"):
        parse_varint(b"\x80\x80")


def test_parse_varint_too_many_bytes():
    with pytest.raises(ProtobufError, match="Too many bytes"):
        parse_varint(b"\x80" * 7 + b"\x01")


def test_unpack_tag():
    assert unpack_tag(0x1A) == (3, WireType.LEN)
    assert unpack_tag(0x10) == (2, WireType.VARINT)


def test_unpack_tag_invalid_wire_type():
    with pytest.raises(ProtobufError, match="Invalid wire type"):
        unpack_tag(0x09)


def test_parse_field_returns_remainder():
    parsed, remainder = parse_field(b"\x0a\x02hi\x10\x01")
    assert parsed == Field(1, b"hi")
    assert remainder == b"\x10\x01"


def test_parse_field_unexpected_eof():
    with pytest.raises(ProtobufError, match="Unexpected EOF"):
        parse_field(b"\x0a\x05ab")


def test_field_accessors_reject_wrong_kind():
    with pytest.raises(ProtobufError):
        Field(1, 5).as_str()
    with pytest.raises(ProtobufError):
        Field(1, 5).as_bytes()
    with pytest.raises(ProtobufError):
        Field(1, b"x").as_int()


def test_field_invalid_utf8():
    with pytest.raises(ProtobufError, match="Invalid string"):
        Field(1, b"\xff\xfe").as_str()


def test_person_rejects_string_id():
    with pytest.raises(ProtobufError):
        parse_message(b"\x12\x01x", Person)