from .field import Field
from ..type_enum import ValueKind


class StringField(Field[str]):
    """
    Field implementation for text.

    Character, memo and unknown column types decode to this field. Memo
    columns hold the raw block reference text, the memo file is never read.
    """

    def __init__(self, value):
        """
        Initialize string field with validation.

        Args:
            value: Must be a string

        Raises:
            TypeError: If value is None or not a string
        """
        if value is None:
            raise TypeError("StringField cannot accept None value")

        if not isinstance(value, str):
            raise TypeError(f"StringField requires str, got {type(value)}")

        self.value = value

    def get_value(self) -> str:
        """Return the string value stored in this field."""
        return self.value

    def get_kind(self) -> ValueKind:
        return ValueKind.TEXT

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        escaped_value = repr(self.value)
        return f"StringField({escaped_value})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StringField) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
