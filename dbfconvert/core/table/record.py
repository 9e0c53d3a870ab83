from typing import Any, ItemsView, Mapping, ValuesView

from ..types import Field
from .table_structure import TableStructure


class Record:
    """
    Represents a single decoded row of a table file.

    A Record contains:
    1. TableStructure: the schema the row was decoded with
    2. A mapping from field name to decoded Field

    Values are keyed by name, so when a structure holds the same name twice
    the value decoded last is the one kept.
    """

    def __init__(self, structure: TableStructure, values: Mapping[str, Field]):
        self.structure = structure
        self._values: dict[str, Field] = dict(values)

    def get_structure(self) -> TableStructure:
        return self.structure

    def get_value(self, field_name: str) -> Field:
        """
        Get the decoded value of a field.

        Raises:
            KeyError: If the record has no value for that name
        """
        if field_name not in self._values:
            raise KeyError(f"Record has no field named '{field_name}'")
        return self._values[field_name]

    def values(self) -> ValuesView[Field]:
        return self._values.values()

    def items(self) -> ItemsView[str, Field]:
        return self._values.items()

    def to_python(self) -> dict[str, Any]:
        """Return the record as plain Python values (None for nulls)."""
        return {name: field.get_value() for name, field in self._values.items()}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._values

    def __eq__(self, other: object) -> bool:
        return (isinstance(other, Record)
                and self.structure == other.structure
                and self._values == other._values)

    def __str__(self) -> str:
        parts = [f"{name}={field}" for name, field in self._values.items()]
        return f"Record({', '.join(parts)})"

    def __repr__(self) -> str:
        return self.__str__()
