"""A minimal decoder for the protobuf wire format."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TypeVar, Union

_MAX_VARINT_BYTES = 7


class ProtobufError(ValueError):
    """Raised when data cannot be decoded."""


class WireType(Enum):
    """A wire type as seen on the wire."""

    VARINT = 0
    """The value is a single varint."""
    LEN = 2
    """The value is a varint length followed by that many bytes."""


@dataclass(frozen=True)
class Field:
    """A decoded field: its number and its value.

    The value is an ``int`` for varint fields and ``bytes`` for length-delimited
    fields.
    """

    field_num: int
    value: Union[int, bytes]

    def as_str(self) -> str:
        """Return the value of a length-delimited field decoded as UTF-8."""
        if not isinstance(self.value, bytes):
            raise ProtobufError("Expected string to be a `Len` field")
        try:
            return self.value.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ProtobufError("Invalid string") from err

    def as_bytes(self) -> bytes:
        """Return the value of a length-delimited field."""
        if not isinstance(self.value, bytes):
            raise ProtobufError("Expected bytes to be a `Len` field")
        return self.value

    def as_int(self) -> int:
        """Return the value of a varint field."""
        if not isinstance(self.value, int):
            raise ProtobufError("Expected `u64` to be a `Varint` field")
        return self.value


class _Message(Protocol):
    def add_field(self, field: Field) -> None: ...


M = TypeVar("M", bound=_Message)


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a varint, returning its value and the remaining bytes."""
    for index, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        if not byte & 0x80:
            chunk = data[: index + 1]
            value = sum((b & 0x7F) << (7 * shift) for shift, b in enumerate(chunk))
            return value, data[index + 1 :]
    if len(data) < _MAX_VARINT_BYTES:
        raise ProtobufError("Not enough bytes for varint")
    raise ProtobufError("Too many bytes for varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into a field number and a wire type."""
    try:
        wire_type = WireType(tag & 0x7)
    except ValueError as err:
        raise ProtobufError(f"Invalid wire type: {tag & 0x7}") from err
    return tag >> 3, wire_type


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        value, remainder = parse_varint(remainder)
        return Field(field_num, value), remainder
    length, remainder = parse_varint(remainder)
    if len(remainder) < length:
        raise ProtobufError("Unexpected EOF")
    return Field(field_num, bytes(remainder[:length])), remainder[length:]


def parse_message(data: bytes, message_type: type[M]) -> M:
    """Parse all of ``data`` into a new ``message_type`` instance.

    ``add_field`` is called on the message for every field in order.
    """
    message = message_type()
    remaining = bytes(data)
    while remaining:
        parsed, remaining = parse_field(remaining)
        message.add_field(parsed)
    return message


@dataclass
class PhoneNumber:
    """A phone number entry with its type."""

    number: str = ""
    type: str = ""

    def add_field(self, field: Field) -> None:
        """Apply a decoded field; unknown field numbers are skipped."""
        if field.field_num == 1:
            self.number = field.as_str()
        elif field.field_num == 2:
            self.type = field.as_str()


@dataclass
class Person:
    """A person with a name, an id and phone numbers."""

    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Apply a decoded field; unknown field numbers are skipped."""
        if field.field_num == 1:
            self.name = field.as_str()
        elif field.field_num == 2:
            self.id = field.as_int()
        elif field.field_num == 3:
            self.phone.append(parse_message(field.as_bytes(), PhoneNumber))