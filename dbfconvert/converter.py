import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from .catalog import Diagnostics, IndexDefinition, TableResult
from .config import ConverterConfig
from .core.exceptions import ConversionError
from .sql import ScriptBuilder
from .storage.exceptions import StorageError
from .storage.index import IndexDecoder
from .storage.table import HeaderDecoder, RecordDecoder


@dataclass
class ConversionResult:
    """Everything produced by one directory conversion."""
    tables: list[TableResult]
    script: str
    output_path: Optional[Path]
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class DirectoryConverter:
    """
    Converts every table file of a directory into a single SQL script.

    For each table file, in directory listing order:
    1. Decode the header; a table without valid fields is skipped with a warning
    2. Decode the records and append CREATE TABLE / INSERT statements
    3. If a companion index file with the same stem exists, append CREATE INDEX
       statements for its definitions

    The script is written next to the tables only once every file has been
    converted. Any storage error aborts the whole run.
    """

    def __init__(self, config: Optional[ConverterConfig] = None,
                 console: Optional[Console] = None):
        self.config = config or ConverterConfig()
        self.console = console
        self.header_decoder = HeaderDecoder(self.config.encoding)
        self.record_decoder = RecordDecoder(self.config.encoding)
        self.index_decoder = IndexDecoder(self.config.encoding)

    def convert(self, directory: Union[str, Path]) -> ConversionResult:
        """
        Convert a directory.

        Args:
            directory: Directory holding the table files

        Returns:
            ConversionResult with the table summaries, script text,
            output path and collected warnings

        Raises:
            ConversionError: If the path is not a directory
            StorageError: If the directory or a file cannot be read, a file is
                truncated, or the script cannot be written
        """
        directory = Path(directory)
        try:
            return self._convert(directory)
        except (ConversionError, StorageError) as e:
            self._say(f"❌ Error processing directory {directory}: {e}", style="bold red")
            raise

    def _convert(self, directory: Path) -> ConversionResult:
        entries = self._list_directory(directory)
        database_name = directory.resolve().name

        diagnostics = Diagnostics()
        builder = ScriptBuilder(database_name)
        tables: list[TableResult] = []

        for entry in entries:
            if not self._has_extension(entry, self.config.table_extension):
                continue

            table = self._convert_table(directory, entry, entries, builder, diagnostics)
            if table is not None:
                tables.append(table)

        script = builder.build()
        output_path = None
        if self.config.write_output:
            output_path = directory / self.config.output_filename
            self._write_script(output_path, script)
            self._say(f"💾 Wrote {output_path}")

        return ConversionResult(tables=tables, script=script,
                                output_path=output_path, diagnostics=diagnostics)

    def _convert_table(self, directory: Path, file_name: str, entries: list[str],
                       builder: ScriptBuilder, diagnostics: Diagnostics) -> Optional[TableResult]:
        table_name = Path(file_name).stem.lower()
        data = self._read_file(directory / file_name)

        warnings_before = len(diagnostics)
        structure = self.header_decoder.decode(data, diagnostics, table_name)
        for warning in diagnostics.entries[warnings_before:]:
            self._say(f"⚠️  {table_name}: {warning.message}", style="yellow")

        if structure.is_empty():
            warning = diagnostics.empty_table(table_name)
            self._say(f"⚠️  {warning.message}", style="yellow")
            return None

        records = self.record_decoder.decode(data, structure)
        builder.add_table(table_name, structure, records)

        indices: list[IndexDefinition] = []
        index_file = self._find_companion(file_name, entries)
        if index_file is not None:
            indices = self.index_decoder.decode_file(directory / index_file)
            builder.add_indices(table_name, indices)

        self._say(f"✅ Converted table '{table_name}' "
                  f"({structure.num_fields()} fields, {len(records)} records, "
                  f"{len(indices)} indices)")

        return TableResult(table_name=table_name, structure=structure,
                           record_count=len(records), indices=indices,
                           source_file=str(directory / file_name))

    def _list_directory(self, directory: Path) -> list[str]:
        """Directory entries in the order the OS lists them."""
        if directory.exists() and not directory.is_dir():
            raise ConversionError(f"Not a directory: {directory}")
        try:
            return os.listdir(directory)
        except OSError as e:
            raise StorageError(f"Failed to read directory {directory}: {e}") from e

    def _find_companion(self, file_name: str, entries: list[str]) -> Optional[str]:
        """Index file sharing the table file's stem, matched case-insensitively."""
        wanted = Path(file_name).stem.lower() + self.config.index_extension.lower()
        for entry in entries:
            if entry.lower() == wanted:
                return entry
        return None

    @staticmethod
    def _has_extension(file_name: str, extension: str) -> bool:
        return Path(file_name).suffix.lower() == extension.lower()

    @staticmethod
    def _read_file(file_path: Path) -> bytes:
        try:
            return file_path.read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read table file {file_path}: {e}") from e

    @staticmethod
    def _write_script(output_path: Path, script: str) -> None:
        try:
            output_path.write_text(script, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write script {output_path}: {e}") from e

    def _say(self, message: str, style: Optional[str] = None) -> None:
        if self.console is not None:
            self.console.print(message, style=style, markup=False)


def convert_directory(directory: Union[str, Path],
                      config: Optional[ConverterConfig] = None) -> list[TableResult]:
    """Convert a directory and return only the table summaries."""
    return DirectoryConverter(config).convert(directory).tables
