from .field import Field
from ..type_enum import ValueKind


class BoolField(Field[bool]):
    """
    Field implementation for logical values.
    """

    TRUE_MARKERS = ("y", "t")

    def __init__(self, value):
        """
        Initialize boolean field.

        Args:
            value: Any value that can be converted to bool

        Note: Accepts any type and converts to bool using Python's truthiness rules
        """
        if value is None:
            raise TypeError("BoolField cannot accept None value")
        self.value = bool(value)

    @classmethod
    def from_text(cls, text: str) -> 'BoolField':
        """
        True only for the markers Y/y/T/t. Everything else, including an
        empty column, is False.
        """
        return cls(text.lower() in cls.TRUE_MARKERS)

    def get_value(self) -> bool:
        return self.value

    def get_kind(self) -> ValueKind:
        return ValueKind.BOOLEAN

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"BoolField({self.value})"

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other) -> bool:
        return isinstance(other, BoolField) and self.value == other.value
