from .exceptions import (
    DbException,
    ConversionError,
)
from .table import FieldDescriptor, TableStructure, Record
from .types import FieldType, ValueKind, Field

__all__ = [
    "DbException",
    "ConversionError",
    "FieldDescriptor",
    "TableStructure",
    "Record",
    "FieldType",
    "ValueKind",
    "Field",
]
