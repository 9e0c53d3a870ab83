from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from ..type_enum import ValueKind

T = TypeVar('T')


class Field(ABC, Generic[T]):
    """
    Abstract base class for all decoded values.

    A field represents a single value in a record (row). Each field has:
    - A kind (integer, text, etc.) that fixes the payload type
    - A value
    - Methods for equality, hashing and plain text rendering

    Subclasses are immutable once constructed.
    """

    @abstractmethod
    def get_value(self) -> T:
        """
        Get the value stored in this field.

        Returns:
            The value of the field with its appropriate type
        """
        pass

    @abstractmethod
    def get_kind(self) -> ValueKind:
        """
        Return the payload kind of this field.
        """
        pass

    def is_null(self) -> bool:
        """Whether this field represents a missing value."""
        return False

    @abstractmethod
    def __str__(self) -> str:
        """
        Plain text representation of the field value.
        """
        pass

    @abstractmethod
    def __repr__(self) -> str:
        """
        Unambiguous string representation for debugging.
        """
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """
        Check equality with another field.
        """
        pass

    @abstractmethod
    def __hash__(self) -> int:
        """
        Hash value for this field (needed for sets/dicts).
        """
        pass
