from pathlib import Path
from typing import Union

from ...catalog.table_info import IndexDefinition
from ..buffer_reader import BufferReader
from ..exceptions import StorageError
from ..layout import ENCODING, ENCODING_ERRORS, IndexFileLayout


class IndexDecoder:
    """
    Decoder for compound index files.

    Index File Layout:
    1. Header: one 512-byte slot; the 16-bit entry count lives at offset 4
    2. Entries: consecutive 512-byte slots starting at offset 512
    3. Each entry: bytes 0-10 index name, bytes 11-219 index expression

    Entries with an empty name are dropped without a diagnostic.
    """

    def __init__(self, encoding: str = ENCODING):
        self.encoding = encoding

    def decode_file(self, file_path: Union[str, Path]) -> list[IndexDefinition]:
        """
        Read and decode an index file.

        Raises:
            StorageError: If the file cannot be read
            TruncatedFileError: If an entry runs past the end of the file
        """
        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read index file {file_path}: {e}") from e
        return self.decode(data)

    def decode(self, data: bytes) -> list[IndexDefinition]:
        reader = BufferReader(data)
        entry_count = reader.unpack(IndexFileLayout.ENTRY_COUNT_FORMAT,
                                    IndexFileLayout.ENTRY_COUNT_OFFSET,
                                    "index entry count")

        indices = []
        for entry_index in range(entry_count):
            slot = reader.read_bytes(IndexFileLayout.slot_offset(entry_index),
                                     IndexFileLayout.EXPRESSION_SLICE.stop,
                                     f"index entry {entry_index}")
            name = self._text(slot[IndexFileLayout.NAME_SLICE])
            if not name:
                continue
            expression = self._text(slot[IndexFileLayout.EXPRESSION_SLICE])
            indices.append(IndexDefinition(name=name, expression=expression))
        return indices

    def _text(self, raw: bytes) -> str:
        return raw.decode(self.encoding, ENCODING_ERRORS).strip()
