from dataclasses import dataclass

from .storage.layout import ENCODING


@dataclass
class ConverterConfig:
    """Configuration for a directory conversion."""
    table_extension: str = ".dbf"
    index_extension: str = ".cdx"
    output_filename: str = "conversion.sql"
    encoding: str = ENCODING
    write_output: bool = True
