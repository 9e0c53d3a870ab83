from .field import Field
from ..type_enum import ValueKind


class DateField(Field[str]):
    """
    Field implementation for date columns.

    Storage format in the table file: 8 characters YYYYMMDD.
    Payload: the ISO text YYYY-MM-DD. No calendar validation is done, so
    a value like 20231399 is carried through as 2023-13-99.
    """

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError(f"DateField requires str, got {type(value)}")
        self.value = value

    @classmethod
    def from_text(cls, text: str) -> 'DateField':
        """Reinterpret YYYYMMDD text as YYYY-MM-DD."""
        return cls(f"{text[0:4]}-{text[4:6]}-{text[6:8]}")

    def get_value(self) -> str:
        return self.value

    def get_kind(self) -> ValueKind:
        return ValueKind.DATE

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"DateField({self.value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DateField) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
