from enum import Enum


class FieldType(Enum):
    """
    Enum for legacy table field type codes.

    The value of each member is the single-character code stored in the
    field descriptor. Codes that are not listed here resolve to OTHER.
    """
    CHARACTER = "C"
    NUMERIC = "N"
    LOGICAL = "L"
    DATE = "D"
    MEMO = "M"
    OTHER = "?"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER

    @classmethod
    def from_code(cls, code: str) -> 'FieldType':
        """Resolve a raw type code character to its FieldType."""
        return cls(code)

    def is_quoted(self) -> bool:
        """Whether literals of this type are emitted as quoted text."""
        return self in (FieldType.CHARACTER, FieldType.MEMO, FieldType.DATE)


class ValueKind(Enum):
    """
    Enum for the payload carried by a decoded value.
    """
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    TEXT = "text"
    NULL = "null"
