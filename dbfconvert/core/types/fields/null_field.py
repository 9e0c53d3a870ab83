from .field import Field
from ..type_enum import ValueKind


class NullField(Field[None]):
    """Field for an empty column value."""

    def get_value(self) -> None:
        return None

    def get_kind(self) -> ValueKind:
        return ValueKind.NULL

    def is_null(self) -> bool:
        return True

    def __str__(self) -> str:
        return "NULL"

    def __repr__(self) -> str:
        return "NullField()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NullField)

    def __hash__(self) -> int:
        return hash(None)
