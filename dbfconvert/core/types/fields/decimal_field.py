import math
import re
from .field import Field
from ..type_enum import ValueKind

DECIMAL_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


class DecimalField(Field[float]):
    """
    Field implementation for numeric columns with decimal places.

    Unlike the integer field, NaN is a legal payload: it marks numeric text
    that could not be parsed.
    """

    def __init__(self, value):
        """
        Initialize decimal field.

        Args:
            value: Must be convertible to float

        Raises:
            TypeError: If value cannot be converted to float
        """
        if value is None or isinstance(value, bool):
            raise TypeError(f"DecimalField requires a number, got {type(value)}")

        try:
            self.value = float(value)
        except (ValueError, TypeError) as e:
            raise TypeError(
                f"DecimalField requires numeric value, got {type(value)}: {e}")

    @classmethod
    def from_text(cls, text: str) -> 'DecimalField':
        """
        Parse the leading decimal number of a stripped numeric column text.

        Trailing characters are ignored ("12,50" reads as 12). Python-only
        spellings such as "inf" or "1_000" are not number prefixes.

        Raises:
            ValueError: If the text does not start with a decimal number
        """
        match = DECIMAL_PREFIX.match(text)
        if match is None:
            raise ValueError(f"No decimal number at the start of {text!r}")
        return cls(float(match.group().replace("Infinity", "inf")))

    @classmethod
    def not_a_number(cls) -> 'DecimalField':
        """Return the marker used for unparseable numeric text."""
        return cls(math.nan)

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def get_value(self) -> float:
        return self.value

    def get_kind(self) -> ValueKind:
        return ValueKind.DECIMAL

    def __str__(self) -> str:
        if self.is_nan():
            return "NaN"
        if math.isinf(self.value):
            return "Infinity" if self.value > 0 else "-Infinity"
        return repr(self.value)

    def __repr__(self) -> str:
        return f"DecimalField({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalField):
            return False
        if self.is_nan() or other.is_nan():
            return self.is_nan() and other.is_nan()
        return self.value == other.value

    def __hash__(self) -> int:
        if self.is_nan():
            return hash("NaN")
        return hash(self.value)
