"""Compact varint encoding of a document id and row, plus greeting helpers."""

from dataclasses import dataclass

from hellokit.protowire import decode_varint, encode_varint

_MASK32 = (1 << 32) - 1


@dataclass
class DocId:
    """A document id and row number, both unsigned 32-bit."""

    id: int = 0
    row: int = 0

    def encode(self) -> bytes:
        """Return the id then the row, each as an unsigned varint."""
        for name, value in (("id", self.id), ("row", self.row)):
            if not 0 <= value <= _MASK32:
                raise ValueError(f"{name} {value} does not fit in uint32")
        return encode_varint(self.id) + encode_varint(self.row)

    @classmethod
    def decode(cls, data) -> "DocId":
        """Read the two varints written by encode; trailing bytes are ignored."""
        doc_id, pos = decode_varint(data, 0)
        row, _ = decode_varint(data, pos)
        return cls(doc_id & _MASK32, row & _MASK32)


def say_hello(name: str) -> None:
    print(f"func SayHello says: Hello, {name}!")


def say_hello_bytes(name: bytes) -> None:
    print(f"func SayHelloByte says: Hello, {bytes(name).decode('utf-8', errors='replace')}!")


def say_bye() -> None:
    print("func SayBye says: Bye!")