class StorageError(Exception):
    """Base class for storage-related errors"""
    pass


class CorruptionError(StorageError):
    """Raised when data corruption is detected"""
    pass


class TruncatedFileError(CorruptionError):
    """Raised when a read would run past the end of a file buffer."""

    def __init__(self, offset: int, size: int, buffer_size: int, what: str = "data"):
        self.offset = offset
        self.size = size
        self.buffer_size = buffer_size
        super().__init__(
            f"Cannot read {size} bytes of {what} at offset {offset}: "
            f"buffer holds only {buffer_size} bytes")
