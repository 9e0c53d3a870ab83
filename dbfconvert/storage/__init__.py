from .exceptions import StorageError, CorruptionError, TruncatedFileError
from .layout import TableFileLayout, IndexFileLayout
from .buffer_reader import BufferReader

__all__ = ["StorageError", "CorruptionError", "TruncatedFileError",
           "TableFileLayout", "IndexFileLayout", "BufferReader"]
