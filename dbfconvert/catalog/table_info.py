from dataclasses import dataclass, asdict, field
from typing import Optional

from ..core.table import TableStructure


@dataclass(frozen=True)
class IndexDefinition:
    """
    Information about one index read from a compound index file.

    🏷️ Represents an expression-based index: a tag name and the key
    expression, which references column names of the owning table.
    """

    """🏷️ Tag name of the index"""
    name: str

    """📋 Key expression, emitted verbatim into CREATE INDEX"""
    expression: str

    def to_dict(self) -> dict:
        """
        📦 Convert index definition to dictionary format for serialization.

        Returns:
            dict: Dictionary representation of the index
        """
        return asdict(self)


@dataclass
class TableResult:
    """
    Summary of one converted table, handed back to the caller.

    📚 Only tables with at least one valid field produce a result,
    whether or not they hold any records.
    """

    """📋 Name of the table (lowercased file stem)"""
    table_name: str

    """📝 Decoded field structure"""
    structure: TableStructure

    """📊 Number of records decoded"""
    record_count: int = 0

    """📇 Index definitions decoded from the companion file"""
    indices: list[IndexDefinition] = field(default_factory=list)

    """📂 Path of the source table file"""
    source_file: Optional[str] = None

    @property
    def fields(self) -> TableStructure:
        return self.structure

    @property
    def index_count(self) -> int:
        return len(self.indices)

    def to_dict(self) -> dict:
        """
        📦 Convert table result to dictionary format for serialization.

        Returns:
            dict: Dictionary representation of the table summary
        """
        return {
            "table_name": self.table_name,
            "fields": [
                {
                    "name": descriptor.name,
                    "type": descriptor.type_code,
                    "length": descriptor.length,
                    "decimal_count": descriptor.decimal_count,
                }
                for descriptor in self.structure
            ],
            "record_count": self.record_count,
            "indices": [index.to_dict() for index in self.indices],
            "source_file": self.source_file,
        }
