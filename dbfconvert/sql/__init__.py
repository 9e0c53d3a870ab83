from .type_mapper import TypeMapper, column_type, format_literal, quote, NULL_LITERAL
from .script_generator import (
    ScriptBuilder,
    preamble,
    table_sql,
    index_sql,
    index_name,
)

__all__ = [
    "TypeMapper",
    "column_type",
    "format_literal",
    "quote",
    "NULL_LITERAL",
    "ScriptBuilder",
    "preamble",
    "table_sql",
    "index_sql",
    "index_name",
]
