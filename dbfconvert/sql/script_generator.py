"""
Assembles the SQL script for a converted directory.
"""
from typing import Iterable, Optional, Sequence

from ..catalog.table_info import IndexDefinition
from ..core.table import Record, TableStructure
from .type_mapper import TypeMapper, column_type, format_literal

INDENT = "    "


def preamble(database_name: str) -> str:
    """Drop and recreate the database named after the directory, then select it."""
    return (
        f"-- Database: {database_name}\n"
        f"DROP DATABASE IF EXISTS {database_name};\n"
        f"CREATE DATABASE {database_name};\n"
        f"USE {database_name};\n"
        "\n"
    )


def create_table_sql(table_name: str, structure: TableStructure,
                     mapper: Optional[TypeMapper] = None) -> str:
    to_type = mapper.column_type if mapper is not None else column_type
    columns = ",\n".join(
        f"{INDENT}{field.name} {to_type(field)}" for field in structure)
    return f"CREATE TABLE {table_name} (\n{columns}\n);\n"


def insert_sql(table_name: str, structure: TableStructure,
               records: Sequence[Record]) -> str:
    """
    One multi-row INSERT covering every record, or an empty string when
    there are none. Values follow structure order.
    """
    if not records:
        return ""

    column_list = ", ".join(structure.field_names)
    rows = ",\n".join(_row_sql(structure, record) for record in records)
    return f"INSERT INTO {table_name} ({column_list}) VALUES {rows};\n"


def _row_sql(structure: TableStructure, record: Record) -> str:
    literals = [format_literal(record.get_value(field.name), field)
                for field in structure]
    return f"({', '.join(literals)})"


def table_sql(table_name: str, structure: TableStructure,
              records: Sequence[Record], mapper: Optional[TypeMapper] = None) -> str:
    """
    Schema and data statements for one table.

    A structure without fields produces nothing; a table without records
    gets its CREATE TABLE only.
    """
    if structure.is_empty():
        return ""

    sql = f"-- Table: {table_name}\n"
    sql += create_table_sql(table_name, structure, mapper)
    sql += "\n"

    data = insert_sql(table_name, structure, records)
    if data:
        sql += data + "\n"

    return sql


def index_name(table_name: str, position: int) -> str:
    return f"idx_{table_name}_{position}"


def index_sql(table_name: str, indices: Iterable[IndexDefinition]) -> str:
    """
    One CREATE INDEX per definition that has an expression.

    Names use each definition's position in the decoded list, counted
    before definitions without an expression are left out.
    """
    sql = ""
    for position, index in enumerate(indices):
        if not index.expression:
            continue
        sql += (f"CREATE INDEX {index_name(table_name, position)} "
                f"ON {table_name} ({index.expression});\n")
    return sql + "\n"


class ScriptBuilder:
    """
    Accumulates the statements of one conversion in file order.
    """

    def __init__(self, database_name: str):
        self.database_name = database_name
        self.type_mapper = TypeMapper()
        self._parts: list[str] = [preamble(database_name)]

    def add_table(self, table_name: str, structure: TableStructure,
                  records: Sequence[Record]) -> None:
        self._parts.append(table_sql(table_name, structure, records, self.type_mapper))

    def add_indices(self, table_name: str, indices: Iterable[IndexDefinition]) -> None:
        self._parts.append(index_sql(table_name, indices))

    def build(self) -> str:
        return "".join(self._parts)
