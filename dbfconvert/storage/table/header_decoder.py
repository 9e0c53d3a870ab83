from typing import Optional

from ...catalog.diagnostics import Diagnostics
from ...core.table import FieldDescriptor, TableStructure
from ..buffer_reader import BufferReader
from ..layout import ENCODING, ENCODING_ERRORS, TableFileLayout


class HeaderDecoder:
    """
    Decoder for the header of a table file.

    Header Layout:
    1. 32-byte prefix; the 16-bit header length lives at offset 8
    2. (header_length - 32) // 32 field descriptor slots of 32 bytes
    3. Each slot: 11-byte NUL-padded name, 1-byte type code,
       4 reserved bytes, 1-byte length, 1-byte decimal count, padding

    Slots whose name is empty after stripping are dropped. The slot index
    reported for a dropped slot is its position in the file, which differs
    from the position of later fields in the resulting structure.
    """

    def __init__(self, encoding: str = ENCODING):
        self.encoding = encoding

    def read_header_length(self, reader: BufferReader) -> int:
        return reader.unpack(TableFileLayout.HEADER_LENGTH_FORMAT,
                             TableFileLayout.HEADER_LENGTH_OFFSET,
                             "header length")

    def decode(self, data: bytes, diagnostics: Optional[Diagnostics] = None,
               table_name: Optional[str] = None) -> TableStructure:
        """
        Decode the field descriptors of a table file.

        Args:
            data: Raw bytes of the whole table file
            diagnostics: Collector for skipped descriptor warnings
            table_name: Used only to label diagnostics

        Returns:
            TableStructure with the valid descriptors in file order

        Raises:
            TruncatedFileError: If the header runs past the end of the buffer
        """
        reader = BufferReader(data)
        header_length = self.read_header_length(reader)

        fields = []
        for slot_index in range(TableFileLayout.descriptor_count(header_length)):
            descriptor = self._decode_descriptor(reader, slot_index)
            if descriptor is None:
                if diagnostics is not None:
                    diagnostics.unnamed_field(slot_index, table_name)
                continue
            fields.append(descriptor)

        return TableStructure(fields)

    def _decode_descriptor(self, reader: BufferReader, slot_index: int) -> Optional[FieldDescriptor]:
        """Decode one slot, or return None when its name is empty."""
        offset = TableFileLayout.descriptor_offset(slot_index)
        raw = reader.read_bytes(offset, TableFileLayout.DESCRIPTOR_SIZE,
                                f"field descriptor {slot_index}")

        name_bytes = raw[TableFileLayout.NAME_OFFSET:
                         TableFileLayout.NAME_OFFSET + TableFileLayout.NAME_SIZE]
        name = name_bytes.decode(self.encoding, ENCODING_ERRORS).replace('\x00', '').strip()
        if not name:
            return None

        return FieldDescriptor(
            name=name,
            type_code=chr(raw[TableFileLayout.TYPE_OFFSET]),
            length=raw[TableFileLayout.LENGTH_OFFSET],
            decimal_count=raw[TableFileLayout.DECIMAL_COUNT_OFFSET],
        )
