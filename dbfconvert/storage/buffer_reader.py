import struct

from .exceptions import TruncatedFileError


class BufferReader:
    """
    Bounds-checked access to the raw bytes of one file.

    Python slicing silently clamps at the end of a buffer; the decoders need
    a short read to fail instead, so every access goes through here.
    """

    def __init__(self, data: bytes):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes or bytearray, got {type(data)}")
        self.data = bytes(data)

    def __len__(self) -> int:
        return len(self.data)

    def _check(self, offset: int, size: int, what: str) -> None:
        if offset < 0 or offset + size > len(self.data):
            raise TruncatedFileError(offset, size, len(self.data), what)

    def unpack(self, fmt: str, offset: int, what: str = "data") -> int:
        """Unpack a single little-endian integer at an absolute offset."""
        size = struct.calcsize(fmt)
        self._check(offset, size, what)
        return struct.unpack_from(fmt, self.data, offset)[0]

    def read_bytes(self, offset: int, size: int, what: str = "data") -> bytes:
        self._check(offset, size, what)
        return self.data[offset:offset + size]
