"""
Mapping from legacy field descriptors to SQL column types and literals.
"""
from cachetools import LRUCache

from ..core.table import FieldDescriptor
from ..core.types import Field, FieldType


NULL_LITERAL = "NULL"

fixed_type_mapping = {
    FieldType.LOGICAL: "BOOLEAN",
    FieldType.DATE: "DATE",
    FieldType.MEMO: "TEXT",
}


def column_type(descriptor: FieldDescriptor) -> str:
    """
    Return the column type for a field descriptor.

    Character columns and unknown type codes both become VARCHAR of the
    declared length.
    """
    field_type = descriptor.field_type

    if field_type in fixed_type_mapping:
        return fixed_type_mapping[field_type]

    if field_type is FieldType.NUMERIC:
        if descriptor.decimal_count > 0:
            return f"DECIMAL({descriptor.length},{descriptor.decimal_count})"
        return "BIGINT"

    return f"VARCHAR({descriptor.length})"


class TypeMapper:
    """
    Column type lookup backed by its own LRU cache.

    Each ScriptBuilder owns one mapper, so cached types live only as long
    as the script being built.
    """

    def __init__(self, cache_size: int = 1024):
        self.type_cache: LRUCache[FieldDescriptor, str] = LRUCache(maxsize=cache_size)

    def column_type(self, descriptor: FieldDescriptor) -> str:
        if descriptor in self.type_cache:
            return self.type_cache[descriptor]

        sql_type = column_type(descriptor)
        self.type_cache[descriptor] = sql_type
        return sql_type


def quote(text: str) -> str:
    """Single-quote text, doubling embedded quotes."""
    return "'" + text.replace("'", "''") + "'"


def format_literal(value: Field, descriptor: FieldDescriptor) -> str:
    """
    Render a decoded value as a literal for an INSERT statement.

    The descriptor decides quoting: character, memo and date columns are
    quoted, logical columns become 1/0, and everything else is written as
    the value's plain text.
    """
    if value.is_null():
        return NULL_LITERAL

    field_type = descriptor.field_type

    if field_type.is_quoted():
        return quote(str(value))

    if field_type is FieldType.LOGICAL:
        return "1" if value.get_value() else "0"

    return str(value)
