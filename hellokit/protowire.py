"""Protocol-buffer wire encoding for the registration and integer messages."""

import argparse
import base64
import json
import sys
from dataclasses import dataclass, field, fields

WIRE_VARINT = 0
WIRE_FIXED64 = 1
WIRE_LEN = 2
WIRE_FIXED32 = 5

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


class DecodeError(ValueError):
    """Raised when bytes are not a well-formed message."""


def encode_varint(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as a base-128 varint."""
    if value < 0 or value > _MASK64:
        raise ValueError(f"varint out of range: {value}")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode_varint(data, pos=0) -> tuple[int, int]:
    """Decode a varint at pos; return (value, position after it)."""
    result = 0
    for count in range(10):
        index = pos + count
        if index >= len(data):
            raise DecodeError("truncated varint")
        byte = data[index]
        if count == 9 and byte > 1:
            raise DecodeError("varint overflows a 64-bit integer")
        result |= (byte & 0x7F) << (7 * count)
        if byte < 0x80:
            return result, index + 1
    raise DecodeError("varint overflows a 64-bit integer")


def _signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _encode_signed(value: int, bits: int) -> bytes:
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in int{bits}")
    return encode_varint(value & _MASK64)


def _key(number: int, wire: int) -> bytes:
    return encode_varint((number << 3) | wire)


def _length_delimited(number: int, payload: bytes) -> bytes:
    return _key(number, WIRE_LEN) + encode_varint(len(payload)) + payload


def _fields(data):
    """Yield (field number, wire type, value, raw bytes) for every field in data."""
    data = bytes(data)
    pos = 0
    while pos < len(data):
        start = pos
        tag, pos = decode_varint(data, pos)
        number, wire = tag >> 3, tag & 7
        if number == 0:
            raise DecodeError("illegal field number 0")
        if wire == WIRE_VARINT:
            value, pos = decode_varint(data, pos)
        elif wire in (WIRE_FIXED64, WIRE_FIXED32):
            size = 8 if wire == WIRE_FIXED64 else 4
            if pos + size > len(data):
                raise DecodeError("truncated fixed-width field")
            value = int.from_bytes(data[pos:pos + size], "little")
            pos += size
        elif wire == WIRE_LEN:
            length, pos = decode_varint(data, pos)
            end = pos + length
            if end > len(data):
                raise DecodeError("truncated length-delimited field")
            value = data[pos:end]
            pos = end
        else:
            raise DecodeError(f"unsupported wire type {wire}")
        yield number, wire, value, data[start:pos]


def _text(payload: bytes) -> str:
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"string field is not valid UTF-8: {exc}") from None


def _map_entry(payload: bytes) -> tuple[str, str]:
    key, value = "", ""
    for number, wire, item, _ in _fields(payload):
        if wire != WIRE_LEN:
            continue
        if number == 1:
            key = _text(item)
        elif number == 2:
            value = _text(item)
    return key, value


_STRING_FIELDS = {2: "username", 3: "password", 4: "email"}
_ID_FIELDS = (1, 10001)


@dataclass
class RegMessage:
    """Registration message: id (field 1), username (2), password (3), email (4)
    and a string map exts (5). Unset scalar fields are None and not written.

    The id is also accepted under field 10001 when decoding; it is always
    written as field 1. Unrecognised fields are kept and written back.
    """

    id: int | None = None
    username: str | None = None
    password: str | None = None
    email: str | None = None
    exts: dict[str, str] = field(default_factory=dict)
    unknown: bytes = field(default=b"", repr=False)

    def to_bytes(self) -> bytes:
        out = bytearray()
        if self.id is not None:
            out += _key(1, WIRE_VARINT) + _encode_signed(self.id, 32)
        for number, name in _STRING_FIELDS.items():
            value = getattr(self, name)
            if value is not None:
                out += _length_delimited(number, value.encode("utf-8"))
        for key, value in self.exts.items():
            entry = _length_delimited(1, key.encode("utf-8")) + _length_delimited(
                2, value.encode("utf-8")
            )
            out += _length_delimited(5, entry)
        out += self.unknown
        return bytes(out)

    @classmethod
    def from_bytes(cls, data) -> "RegMessage":
        message = cls()
        unknown = bytearray()
        for number, wire, value, raw in _fields(data):
            if number in _ID_FIELDS and wire == WIRE_VARINT:
                message.id = _signed(value, 32)
            elif number in _STRING_FIELDS and wire == WIRE_LEN:
                setattr(message, _STRING_FIELDS[number], _text(value))
            elif number == 5 and wire == WIRE_LEN:
                key, item = _map_entry(value)
                message.exts[key] = item
            else:
                unknown += raw
        message.unknown = bytes(unknown)
        return message

    def to_json(self) -> str:
        """Pretty JSON of the set fields, keys sorted, empty exts left out."""
        document = {
            name: getattr(self, name)
            for name in ("id", "username", "password", "email")
            if getattr(self, name) is not None
        }
        if self.exts:
            document["exts"] = dict(self.exts)
        return json.dumps(document, ensure_ascii=False, indent=2, sort_keys=True)


@dataclass
class IntFields:
    """Nine integer fields numbered 1 to 9, each a signed 64-bit varint; zeros are not written."""

    t1: int = 0
    t2: int = 0
    t3: int = 0
    t4: int = 0
    t5: int = 0
    t6: int = 0
    t7: int = 0
    t8: int = 0
    t9: int = 0
    unknown: bytes = field(default=b"", repr=False)

    def _numbered(self):
        return [(number, f.name) for number, f in enumerate(fields(self)[:9], start=1)]

    def to_bytes(self) -> bytes:
        out = bytearray()
        for number, name in self._numbered():
            value = getattr(self, name)
            if value != 0:
                out += _key(number, WIRE_VARINT) + _encode_signed(value, 64)
        out += self.unknown
        return bytes(out)

    @classmethod
    def from_bytes(cls, data) -> "IntFields":
        message = cls()
        names = dict(message._numbered())
        unknown = bytearray()
        for number, wire, value, raw in _fields(data):
            if number in names and wire == WIRE_VARINT:
                setattr(message, names[number], _signed(value, 64))
            else:
                unknown += raw
        message.unknown = bytes(unknown)
        return message


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Show the wire form of sample messages.")
    parser.add_argument("--decode", help="base64 of a registration message to decode")
    args = parser.parse_args(argv)

    if args.decode:
        try:
            message = RegMessage.from_bytes(base64.b64decode(args.decode, validate=True))
        except ValueError as exc:
            print(f"failed: {exc}", file=sys.stderr)
            return 1
        print(f"name=[{message.username}] \nemail=[{message.email}] \nid=[{message.id}]\n {message.exts}")
        return 0

    password = "password"
    message = RegMessage(
        id=10001,
        username="vicky",
        password=password,
        email="vicky@example.com",
        exts={f"key{i}": f"value{i}" for i in range(4)},
    )
    buffer = message.to_bytes()
    print(f"{base64.b64encode(buffer).decode('ascii')}\n\n{message}\n\n========================")
    decoded = RegMessage.from_bytes(buffer)
    print(f"name=[{decoded.username}] email=[{decoded.email}] id=[{decoded.id}]\nm={decoded}")
    print(message.to_json())

    for value in (1, 127):
        encoded = IntFields(t1=value).to_bytes()
        print(f"i={value} [{base64.b64encode(encoded).decode('ascii')}]: {list(encoded)}")

    ints = IntFields(*range(1, 10))
    encoded = ints.to_bytes()
    print(f"{base64.b64encode(encoded).decode('ascii')} {list(encoded)}")
    again = IntFields.from_bytes(encoded)
    if again.to_bytes() == encoded:
        print("Transform OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())