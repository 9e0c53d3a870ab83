"""
Byte layout of legacy table (.dbf) and compound index (.cdx) files.

Every decoder reads offsets from here; no other module hard-codes a
position inside a file.
"""


ENCODING = "utf-8"
ENCODING_ERRORS = "replace"


class TableFileLayout:
    """Offsets of the table file header, field descriptors and records."""

    # File prefix (first 32 bytes)
    RECORD_COUNT_OFFSET = 4
    RECORD_COUNT_FORMAT = '<I'
    HEADER_LENGTH_OFFSET = 8
    HEADER_LENGTH_FORMAT = '<H'
    RECORD_LENGTH_OFFSET = 10
    RECORD_LENGTH_FORMAT = '<H'
    PREFIX_SIZE = 32

    # Field descriptor, relative to the start of its slot
    DESCRIPTOR_SIZE = 32
    NAME_OFFSET = 0
    NAME_SIZE = 11
    TYPE_OFFSET = 11
    LENGTH_OFFSET = 16
    DECIMAL_COUNT_OFFSET = 17

    # Record, relative to the start of its slot
    STATUS_FLAG_SIZE = 1

    @classmethod
    def descriptor_count(cls, header_length: int) -> int:
        """Number of descriptor slots implied by the header length."""
        return max(0, (header_length - cls.PREFIX_SIZE) // cls.DESCRIPTOR_SIZE)

    @classmethod
    def descriptor_offset(cls, slot_index: int) -> int:
        return cls.PREFIX_SIZE + slot_index * cls.DESCRIPTOR_SIZE

    @classmethod
    def record_offset(cls, header_length: int, record_length: int, record_index: int) -> int:
        return header_length + record_index * record_length


class IndexFileLayout:
    """Offsets of the compound index file. The header is one slot long."""

    ENTRY_COUNT_OFFSET = 4
    ENTRY_COUNT_FORMAT = '<H'
    SLOT_SIZE = 512
    FIRST_SLOT_OFFSET = 512

    # Relative to the start of an entry slot
    NAME_SLICE = slice(0, 11)
    EXPRESSION_SLICE = slice(11, 220)

    @classmethod
    def slot_offset(cls, entry_index: int) -> int:
        return cls.FIRST_SLOT_OFFSET + entry_index * cls.SLOT_SIZE
