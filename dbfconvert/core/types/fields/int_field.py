import re
from .field import Field
from ..type_enum import ValueKind

INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")


class IntField(Field[int]):
    """
    Field implementation for whole numbers.

    Numeric columns without decimal places decode to this field. Python ints
    are unbounded, so any digit string the column can hold fits.
    """

    def __init__(self, value):
        """
        Initialize integer field with validation.

        Args:
            value: Must be an integer (bool is rejected)

        Raises:
            TypeError: If value is not an integer
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"IntField requires int, got {type(value)}")

        self.value = value

    @classmethod
    def from_text(cls, text: str) -> 'IntField':
        """
        Parse the leading integer of a stripped numeric column text.

        Anything after the sign and ASCII digits is ignored, so "1.5" and
        "12abc" read as 1 and 12.

        Raises:
            ValueError: If the text does not start with an integer
        """
        match = INTEGER_PREFIX.match(text)
        if match is None:
            raise ValueError(f"No integer at the start of {text!r}")
        return cls(int(match.group()))

    def get_value(self) -> int:
        return self.value

    def get_kind(self) -> ValueKind:
        return ValueKind.INTEGER

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"IntField({self.value})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IntField) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
