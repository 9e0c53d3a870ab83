from typing import Iterable, Iterator

from .field_descriptor import FieldDescriptor
from ...storage.layout import TableFileLayout


class TableStructure:
    """
    Schema descriptor for one table file.

    A TableStructure defines:
    1. The ordered field descriptors of the table
    2. The record layout, since field offsets are accumulated in this order
    3. The column order of the generated CREATE TABLE and INSERT statements

    It is created once per file by the header decoder and never mutated.
    An empty structure is legal and means the table is skipped.
    """

    def __init__(self, fields: Iterable[FieldDescriptor] = ()):
        self._fields: tuple[FieldDescriptor, ...] = tuple(fields)

    def num_fields(self) -> int:
        """Return the number of fields in this structure."""
        return len(self._fields)

    def is_empty(self) -> bool:
        return not self._fields

    def get_field(self, field_index: int) -> FieldDescriptor:
        """Get the descriptor at the given position."""
        if not (0 <= field_index < len(self._fields)):
            raise IndexError(
                f"Field index {field_index} out of range [0, {len(self._fields)})")
        return self._fields[field_index]

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        return self._fields

    @property
    def field_names(self) -> list[str]:
        return [field.name for field in self._fields]

    def name_to_index(self, field_name: str) -> int:
        """
        Find the position of a field by name.

        With duplicate names the first match is returned.
        """
        for index, field in enumerate(self._fields):
            if field.name == field_name:
                return index
        raise ValueError(f"Field '{field_name}' not found in table structure")

    def get_record_size(self) -> int:
        """
        Calculate the size in bytes of one record described by this structure.

        This is the status flag byte plus the sum of all field lengths. The
        record length stored in the file header may be larger.
        """
        return TableFileLayout.STATUS_FLAG_SIZE + sum(field.length for field in self._fields)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TableStructure) and self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __str__(self) -> str:
        return f"TableStructure({', '.join(str(field) for field in self._fields)})"

    def __repr__(self) -> str:
        return self.__str__()
