from ...core.table import FieldDescriptor, Record, TableStructure
from ...core.types import (
    BoolField,
    DateField,
    DecimalField,
    Field,
    FieldType,
    IntField,
    NullField,
    StringField,
)
from ..buffer_reader import BufferReader
from ..layout import ENCODING, ENCODING_ERRORS, TableFileLayout


class RecordDecoder:
    """
    Decoder for the fixed-length records of a table file.

    Record i starts at header_length + i * record_length. Byte 0 of each
    record is the deletion flag and is skipped; it is not interpreted, so
    deleted rows are decoded like any other. Field offsets are not stored
    per field: they accumulate in structure order starting right after
    the flag, so the structure must be the one the header decoder produced.
    """

    def __init__(self, encoding: str = ENCODING):
        self.encoding = encoding
        self._decoders = {
            FieldType.NUMERIC: self._decode_numeric,
            FieldType.LOGICAL: self._decode_logical,
            FieldType.DATE: self._decode_date,
        }

    def decode(self, data: bytes, structure: TableStructure) -> list[Record]:
        """
        Decode every record announced by the file header.

        The record count is trusted as-is; a file shorter than it claims
        fails on the first record that does not fit.

        Raises:
            TruncatedFileError: If a record runs past the end of the buffer
        """
        reader = BufferReader(data)
        header_length = reader.unpack(TableFileLayout.HEADER_LENGTH_FORMAT,
                                      TableFileLayout.HEADER_LENGTH_OFFSET,
                                      "header length")
        record_length = reader.unpack(TableFileLayout.RECORD_LENGTH_FORMAT,
                                      TableFileLayout.RECORD_LENGTH_OFFSET,
                                      "record length")
        record_count = reader.unpack(TableFileLayout.RECORD_COUNT_FORMAT,
                                     TableFileLayout.RECORD_COUNT_OFFSET,
                                     "record count")

        records = []
        for record_index in range(record_count):
            offset = TableFileLayout.record_offset(header_length, record_length, record_index)
            records.append(self._decode_record(reader, structure, offset, record_index))
        return records

    def _decode_record(self, reader: BufferReader, structure: TableStructure,
                       offset: int, record_index: int) -> Record:
        values: dict[str, Field] = {}
        position = TableFileLayout.STATUS_FLAG_SIZE
        for descriptor in structure:
            raw = reader.read_bytes(offset + position, descriptor.length,
                                    f"record {record_index} field '{descriptor.name}'")
            values[descriptor.name] = self.decode_value(raw, descriptor)
            position += descriptor.length
        return Record(structure, values)

    def decode_value(self, raw: bytes, descriptor: FieldDescriptor) -> Field:
        """Decode the raw bytes of one column according to its type code."""
        text = raw.decode(self.encoding, ENCODING_ERRORS).strip()
        decoder = self._decoders.get(descriptor.field_type, self._decode_text)
        return decoder(text, descriptor)

    def _decode_numeric(self, text: str, descriptor: FieldDescriptor) -> Field:
        # Unparseable text becomes NaN instead of failing the record.
        if not text:
            return NullField()
        try:
            if descriptor.decimal_count > 0:
                return DecimalField.from_text(text)
            return IntField.from_text(text)
        except ValueError:
            return DecimalField.not_a_number()

    def _decode_logical(self, text: str, descriptor: FieldDescriptor) -> Field:
        return BoolField.from_text(text)

    def _decode_date(self, text: str, descriptor: FieldDescriptor) -> Field:
        if not text:
            return NullField()
        return DateField.from_text(text)

    def _decode_text(self, text: str, descriptor: FieldDescriptor) -> Field:
        if not text:
            return NullField()
        return StringField(text)
