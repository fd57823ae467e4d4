"""UUIDs that name the services an application offers to its components."""

from __future__ import annotations

import string
import struct
from functools import total_ordering
from typing import Iterable, Union

_FIELDS = struct.Struct("<IHHH6s")
_SIZE = 16
_HEX = frozenset(string.hexdigits)

NodeLike = Union[bytes, bytearray, Iterable[int]]


@total_ordering
class ERUUID:
    """A 128-bit identifier held in its in-memory (little-endian field) layout.

    The first three 16/32-bit fields and the fourth 16-bit field are stored
    little-endian; the six node bytes are stored as they are.  Ordering
    compares the two 64-bit little-endian halves of that layout.
    """

    __slots__ = ("_raw",)

    unpacked_size = _SIZE

    def __init__(self, raw: bytes = bytes(_SIZE)) -> None:
        raw = bytes(raw)
        if len(raw) != _SIZE:
            raise ValueError(f"UUID data must be {_SIZE} bytes, got {len(raw)}")
        self._raw = raw

    @classmethod
    def from_fields(cls, val1: int, val2: int, val3: int, val4: int, node: NodeLike) -> "ERUUID":
        """Build a UUID from its five fields; ``node`` is the last six bytes."""
        try:
            node_bytes = bytes(node)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid node data: {exc}") from exc
        if len(node_bytes) != 6:
            raise ValueError(f"node must be 6 bytes, got {len(node_bytes)}")
        try:
            raw = _FIELDS.pack(val1, val2, val3, val4, node_bytes)
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc
        return cls(raw)

    @classmethod
    def parse(cls, text: str) -> "ERUUID":
        """Read hexadecimal digits from ``text``, skipping every other character.

        At most sixteen bytes are read; missing bytes are zero and a trailing
        lone digit is ignored.
        """
        digits = [ch for ch in text if ch in _HEX]
        data = bytes(
            int(hi + lo, 16) for hi, lo in zip(digits[0::2], digits[1::2])
        )[:_SIZE].ljust(_SIZE, b"\0")
        return cls.from_fields(
            int.from_bytes(data[0:4], "big"),
            int.from_bytes(data[4:6], "big"),
            int.from_bytes(data[6:8], "big"),
            int.from_bytes(data[8:10], "big"),
            data[10:16],
        )

    @property
    def fields(self) -> tuple[int, int, int, int, bytes]:
        """The five fields: val1, val2, val3, val4 and the node bytes."""
        return _FIELDS.unpack(self._raw)

    def to_string(self) -> str:
        """Upper-case ``XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX`` form."""
        val1, val2, val3, val4, node = self.fields
        return f"{val1:08X}-{val2:04X}-{val3:04X}-{val4:04X}-{node.hex().upper()}"

    def packed(self) -> tuple[int, int]:
        """The data as two unsigned 64-bit integers."""
        return (
            int.from_bytes(self._raw[0:8], "little"),
            int.from_bytes(self._raw[8:16], "little"),
        )

    def unpacked_data(self) -> bytes:
        """The sixteen raw bytes."""
        return self._raw

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ERUUID('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ERUUID):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ERUUID):
            return NotImplemented
        return self.packed() < other.packed()

    def __hash__(self) -> int:
        return hash(self._raw)


LOCAL_FILE = ERUUID.from_fields(
    0x0C2AD544, 0xB29B, 0x4744, 0x9286, (0xA4, 0x82, 0x26, 0x86, 0x98, 0x5E)
)
LOCAL_DIRECTORY = ERUUID.from_fields(
    0x5C947F5C, 0xB8D1, 0x4FA1, 0xAB01, (0x6D, 0xB0, 0xA9, 0xBF, 0xBB, 0x66)
)
STRING_CODEPAGE_CONVERTER = ERUUID.from_fields(
    0x2CE9BCFA, 0xD4B0, 0x4387, 0x8B41, (0x19, 0xB3, 0x53, 0xDB, 0x1C, 0x48)
)
STRING_CHARSET_CONVERTER = ERUUID.from_fields(
    0x2EE46411, 0xFB7E, 0x493F, 0xBD34, (0xF6, 0x9D, 0xA7, 0x73, 0xED, 0x78)
)
CHARSET_DETECTOR = ERUUID.from_fields(
    0x6C1B8B02, 0xE32B, 0x4725, 0xAFAE, (0xD7, 0xF8, 0x88, 0x15, 0x98, 0x42)
)