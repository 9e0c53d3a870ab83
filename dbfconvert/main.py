"""
Command line entry point: convert a directory of table files to SQL.
"""
import argparse
import json
import sys
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from .config import ConverterConfig
from .converter import ConversionResult, DirectoryConverter
from .core.exceptions import ConversionError
from .storage.exceptions import StorageError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbfconvert",
        description="Convert a directory of .dbf tables (and .cdx indices) into a SQL script.")
    parser.add_argument("directory", help="Directory containing the table files")
    parser.add_argument("--output-name", default=ConverterConfig.output_filename,
                        help="File name of the generated script (default: %(default)s)")
    parser.add_argument("--json", action="store_true",
                        help="Print the table summary and warnings as JSON")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print per-table progress")
    return parser


def summary_table(result: ConversionResult) -> Table:
    """Render the converted tables as a rich table."""
    table = Table(title="Converted tables", box=box.ROUNDED)
    table.add_column("Table", style="cyan")
    table.add_column("Fields", justify="right")
    table.add_column("Records", justify="right")
    table.add_column("Indices", justify="right")

    for entry in result.tables:
        table.add_row(entry.table_name, str(entry.structure.num_fields()),
                      str(entry.record_count), str(entry.index_count))
    return table


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point of the application."""
    args = build_parser().parse_args(argv)
    console = console or Console()

    config = ConverterConfig(output_filename=args.output_name)
    progress_console = None if args.quiet or args.json else console
    converter = DirectoryConverter(config, console=progress_console)

    try:
        result = converter.convert(args.directory)
    except (ConversionError, StorageError) as e:
        console.print(f"✗ {e}", style="bold red", markup=False)
        return 1

    if args.json:
        console.print_json(json.dumps({
            "tables": [entry.to_dict() for entry in result.tables],
            "diagnostics": [warning.to_dict() for warning in result.diagnostics],
        }))
        return 0

    console.print(summary_table(result))
    for warning in result.diagnostics:
        console.print(f"⚠ {warning.message}", style="yellow", markup=False)
    if result.output_path is not None:
        console.print(f"✓ Script written to {result.output_path}", style="green", markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
