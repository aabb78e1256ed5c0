"""A little-endian binary buffer with a read/write cursor."""

from __future__ import annotations

import struct


class StreamError(ValueError):
    """Raised when data cannot be read from or written to a stream."""


class DataStream:
    """Byte buffer read and written through a single cursor."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(data)
        self._seek = 0

    def __len__(self) -> int:
        return len(self._data)

    def read_raw(self, size: int) -> bytes:
        """Read ``size`` bytes at the cursor and advance it."""
        if size < 0:
            raise StreamError(f"negative read size {size}")
        end = self._seek + size
        if end > len(self._data):
            raise StreamError(
                f"cannot read {size} bytes at offset {self._seek} of {len(self._data)}"
            )
        chunk = bytes(self._data[self._seek:end])
        self._seek = end
        return chunk

    def write_raw(self, data: bytes) -> None:
        """Write bytes at the cursor, growing the buffer by their length."""
        data = bytes(data)
        size = len(data)
        self._data.extend(bytes(size))
        self._data[self._seek:self._seek + size] = data
        self._seek += size

    def _pack(self, fmt: str, value) -> None:
        try:
            self.write_raw(struct.pack("<" + fmt, value))
        except struct.error as exc:
            raise StreamError(f"cannot encode {value!r}: {exc}") from None

    def _unpack(self, fmt: str):
        fmt = "<" + fmt
        (value,) = struct.unpack(fmt, self.read_raw(struct.calcsize(fmt)))
        return value

    def write_string(self, value: str) -> None:
        """Write a string as a 32-bit length followed by its UTF-8 bytes."""
        encoded = value.encode("utf-8")
        self._pack("i", len(encoded))
        self.write_raw(encoded)

    def read_string(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        size = self._unpack("i")
        if size < 0:
            raise StreamError(f"negative string length {size}")
        raw = self.read_raw(size)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StreamError(f"invalid UTF-8 string: {exc}") from None

    def write_u8(self, value: int) -> None:
        self._pack("B", value)

    def read_u8(self) -> int:
        return self._unpack("B")

    def write_u64(self, value: int) -> None:
        self._pack("Q", value)

    def read_u64(self) -> int:
        return self._unpack("Q")

    def write_double(self, value: float) -> None:
        self._pack("d", value)

    def read_double(self) -> float:
        return self._unpack("d")

    def to_bytes(self) -> bytes:
        """Return the whole buffer."""
        return bytes(self._data)

    def at_end(self) -> bool:
        """Tell whether the cursor has reached the end of the buffer."""
        return self._seek >= len(self._data)