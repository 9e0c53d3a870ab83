from .fields.field import Field
from .fields import (
    IntField,
    DecimalField,
    BoolField,
    DateField,
    StringField,
    NullField,
)
from .type_enum import FieldType, ValueKind

__all__ = [
    'Field',
    'IntField',
    'DecimalField',
    'BoolField',
    'DateField',
    'StringField',
    'NullField',
    'FieldType',
    'ValueKind',
]
