from dataclasses import dataclass

from ..types import FieldType


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Metadata for one column of a table file.

    Attributes:
        name: Column name, NUL bytes removed and whitespace trimmed
        type_code: Raw single-character type code from the descriptor
        length: Width of the column inside a record, in bytes
        decimal_count: Number of decimal places (numeric columns only)
    """
    name: str
    type_code: str
    length: int
    decimal_count: int = 0

    def __post_init__(self):
        if not self.name:
            raise ValueError("FieldDescriptor name must not be empty")
        if not (0 <= self.length <= 0xFF):
            raise ValueError(f"Field length {self.length} out of range [0, 255]")
        if not (0 <= self.decimal_count <= 0xFF):
            raise ValueError(
                f"Decimal count {self.decimal_count} out of range [0, 255]")

    @property
    def field_type(self) -> FieldType:
        return FieldType.from_code(self.type_code)

    def __str__(self) -> str:
        if self.decimal_count:
            return f"{self.name} {self.type_code}({self.length},{self.decimal_count})"
        return f"{self.name} {self.type_code}({self.length})"
