from .table_info import TableResult, IndexDefinition
from .diagnostics import Diagnostics, Diagnostic, DiagnosticKind

__all__ = [
    "TableResult",
    "IndexDefinition",
    "Diagnostics",
    "Diagnostic",
    "DiagnosticKind",
]
