from .int_field import IntField
from .decimal_field import DecimalField
from .boolean_field import BoolField
from .date_field import DateField
from .string_field import StringField
from .null_field import NullField

__all__ = ["IntField", "DecimalField", "BoolField",
           "DateField", "StringField", "NullField"]
