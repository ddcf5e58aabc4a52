"""Byte-level reading and writing for .vox files.

All multi-byte integers in a .vox file are little-endian. Reading goes through
a ByteCursor, which walks an immutable byte buffer front to back and raises
UnexpectedEndOfData instead of returning short reads. Writing goes through the
small static helpers below, which are the inverse of the cursor reads.
"""

from typing import Optional

from voxcubes.errors import UnexpectedEndOfData


class ByteCursor:
    """Sequential, bounds-checked reader over a fixed byte buffer.

    A cursor may be limited to stop short of the end of its buffer; reads
    past the limit fail exactly as reads past the end of the buffer do.
    """

    def __init__(self, data: bytes, offset: int = 0, end: Optional[int] = None):
        self.data = data
        self.offset = offset
        self.end = len(data) if end is None else min(end, len(data))

    def __len__(self) -> int:
        return self.end

    @property
    def remaining(self) -> int:
        """Number of readable bytes after the current offset."""
        return max(self.end - self.offset, 0)

    @property
    def at_end(self) -> bool:
        return self.offset >= self.end

    def limit(self, end: int) -> "ByteCursor":
        """A cursor over the same buffer, at the same offset, stopping at end."""
        return ByteCursor(self.data, self.offset, min(end, self.end))

    def read_bytes(self, n: int) -> bytes:
        """Read exactly n bytes."""
        if n < 0 or n > self.remaining:
            raise UnexpectedEndOfData(self.offset, n, self.remaining)
        start = self.offset
        self.offset += n
        return bytes(self.data[start : self.offset])

    def read_uint8(self) -> int:
        return self.read_bytes(1)[0]

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit integer."""
        return int.from_bytes(self.read_bytes(4), "little", signed=False)

    def read_int32(self) -> int:
        """Read a signed 32-bit integer."""
        return int.from_bytes(self.read_bytes(4), "little", signed=True)

    def read_string(self, n: int) -> str:
        """Read a fixed-length UTF-8 string of n bytes."""
        return self.read_bytes(n).decode("utf-8", errors="replace")

    def read_tag(self) -> str:
        """Read a 4-character chunk tag."""
        return self.read_bytes(4).decode("ascii", errors="replace")


class UInt32:
    """Representative of .vox file unsigned 32-bit integers."""

    @staticmethod
    def write(uint32: int) -> bytes:
        return uint32.to_bytes(4, "little", signed=False)


class Int32:
    """Representative of .vox file signed 32-bit integers."""

    @staticmethod
    def write(int32: int) -> bytes:
        return int32.to_bytes(4, "little", signed=True)


class String:
    """Representative of .vox file length-prefixed strings."""

    @staticmethod
    def write(string: str) -> bytes:
        encoded = string.encode("utf-8")
        return UInt32.write(len(encoded)) + encoded


class Dict:
    """Representative of .vox file dictionaries."""

    @staticmethod
    def write(dict_: dict[str, str]) -> bytes:
        """Write a pair count followed by key/value strings."""
        bytes_ = UInt32.write(len(dict_))
        for key, value in dict_.items():
            bytes_ += String.write(key) + String.write(value)
        return bytes_
