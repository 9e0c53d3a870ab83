"""
Convert legacy dBase/FoxPro table directories into SQL scripts.
"""
from .config import ConverterConfig
from .converter import ConversionResult, DirectoryConverter, convert_directory
from .catalog import Diagnostics, IndexDefinition, TableResult
from .core import FieldDescriptor, Record, TableStructure
from .storage.index import IndexDecoder
from .storage.table import HeaderDecoder, RecordDecoder

__all__ = [
    "ConverterConfig",
    "ConversionResult",
    "DirectoryConverter",
    "convert_directory",
    "Diagnostics",
    "IndexDefinition",
    "TableResult",
    "FieldDescriptor",
    "Record",
    "TableStructure",
    "HeaderDecoder",
    "RecordDecoder",
    "IndexDecoder",
]
