from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class DiagnosticKind(Enum):
    UNNAMED_FIELD = "unnamed_field"
    EMPTY_TABLE = "empty_table"


@dataclass(frozen=True)
class Diagnostic:
    """One non-fatal warning raised while converting a directory."""
    kind: DiagnosticKind
    message: str
    table_name: Optional[str] = None
    slot_index: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "table_name": self.table_name,
            "slot_index": self.slot_index,
        }


@dataclass
class Diagnostics:
    """
    Collector for warnings that must not interrupt a conversion.

    Decoders record into the collector they are handed; callers inspect
    it after the run instead of scraping console output.
    """
    entries: list[Diagnostic] = field(default_factory=list)

    def unnamed_field(self, slot_index: int, table_name: Optional[str] = None) -> Diagnostic:
        """Record a field descriptor skipped for having no name."""
        return self._add(Diagnostic(
            kind=DiagnosticKind.UNNAMED_FIELD,
            message=f"Field without a name found at index {slot_index}, it will be skipped",
            table_name=table_name,
            slot_index=slot_index,
        ))

    def empty_table(self, table_name: str) -> Diagnostic:
        """Record a table skipped for having no valid fields."""
        return self._add(Diagnostic(
            kind=DiagnosticKind.EMPTY_TABLE,
            message=f"Table {table_name} has no valid fields and will be skipped",
            table_name=table_name,
        ))

    def _add(self, diagnostic: Diagnostic) -> Diagnostic:
        self.entries.append(diagnostic)
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [entry for entry in self.entries if entry.kind is kind]

    def messages(self) -> list[str]:
        return [entry.message for entry in self.entries]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
