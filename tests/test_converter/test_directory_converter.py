import os

import pytest
from rich.console import Console

from dbfconvert import ConverterConfig, DirectoryConverter, convert_directory
from dbfconvert.catalog import DiagnosticKind
from dbfconvert.core.exceptions import ConversionError
from dbfconvert.storage import StorageError, TruncatedFileError


class TestDirectoryConverter:
    """End-to-end tests for directory conversion."""

    def test_shop_example(self, shop_dir):
        result = DirectoryConverter().convert(shop_dir)

        assert "DROP DATABASE IF EXISTS shop;" in result.script
        assert "CREATE TABLE items (\n    id BIGINT,\n    name VARCHAR(20)\n);" in result.script
        assert "INSERT INTO items (id, name) VALUES (7, 'Pen');" in result.script

        [table] = result.tables
        assert table.table_name == "items"
        assert table.structure.field_names == ["id", "name"]
        assert table.record_count == 1
        assert table.index_count == 0

    def test_script_is_written(self, shop_dir):
        result = DirectoryConverter().convert(shop_dir)

        assert result.output_path == shop_dir / "conversion.sql"
        assert result.output_path.read_text(encoding="utf-8") == result.script

    def test_runs_are_byte_identical(self, shop_dir):
        first = DirectoryConverter().convert(shop_dir)
        first_bytes = first.output_path.read_bytes()
        second = DirectoryConverter().convert(shop_dir)
        assert second.output_path.read_bytes() == first_bytes

    def test_write_output_disabled(self, shop_dir):
        result = DirectoryConverter(ConverterConfig(write_output=False)).convert(shop_dir)
        assert result.output_path is None
        assert not (shop_dir / "conversion.sql").exists()

    def test_custom_output_name(self, shop_dir):
        result = DirectoryConverter(ConverterConfig(output_filename="out.sql")).convert(shop_dir)
        assert (shop_dir / "out.sql").exists()
        assert result.output_path.name == "out.sql"

    def test_companion_index(self, shop_dir, index_bytes):
        (shop_dir / "items.cdx").write_bytes(
            index_bytes([("tag0", ""), ("byname", "name")]))

        result = DirectoryConverter().convert(shop_dir)

        assert "CREATE INDEX idx_items_1 ON items (name);" in result.script
        assert "idx_items_0" not in result.script
        assert result.tables[0].index_count == 2

    def test_companion_index_matched_case_insensitively(self, tmp_path, table_bytes, index_bytes):
        (tmp_path / "ITEMS.DBF").write_bytes(table_bytes([("id", "N", 3, 0)], [("1",)]))
        (tmp_path / "Items.CDX").write_bytes(index_bytes([("byid", "id")]))

        result = DirectoryConverter().convert(tmp_path)

        assert result.tables[0].table_name == "items"
        assert "CREATE INDEX idx_items_0 ON items (id);" in result.script

    def test_no_index_statements_without_companion(self, shop_dir):
        assert "CREATE INDEX" not in DirectoryConverter().convert(shop_dir).script

    def test_table_without_fields_is_skipped(self, shop_dir, table_bytes):
        (shop_dir / "empty.dbf").write_bytes(table_bytes([], header_length=32))

        result = DirectoryConverter().convert(shop_dir)

        assert [t.table_name for t in result.tables] == ["items"]
        assert "empty" not in result.script
        [warning] = result.diagnostics.of_kind(DiagnosticKind.EMPTY_TABLE)
        assert warning.table_name == "empty"

    def test_table_with_only_unnamed_fields_is_skipped(self, shop_dir, table_bytes):
        (shop_dir / "ghost.dbf").write_bytes(table_bytes([("", "C", 2, 0)], [("ab",)]))

        result = DirectoryConverter().convert(shop_dir)

        assert "ghost" not in [t.table_name for t in result.tables]
        kinds = [d.kind for d in result.diagnostics if d.table_name == "ghost"]
        assert kinds == [DiagnosticKind.UNNAMED_FIELD, DiagnosticKind.EMPTY_TABLE]

    def test_table_without_records_creates_only(self, tmp_path, table_bytes):
        (tmp_path / "items.dbf").write_bytes(table_bytes([("id", "N", 3, 0)], []))

        result = DirectoryConverter().convert(tmp_path)

        assert "CREATE TABLE items" in result.script
        assert "INSERT" not in result.script
        assert result.tables[0].record_count == 0

    def test_other_files_are_ignored(self, shop_dir):
        (shop_dir / "readme.txt").write_text("not a table")
        (shop_dir / "items.fpt").write_bytes(b"\x00" * 16)
        assert [t.table_name for t in DirectoryConverter().convert(shop_dir).tables] == ["items"]

    def test_tables_follow_listing_order(self, tmp_path, table_bytes):
        for name in ("b", "a", "c"):
            (tmp_path / f"{name}.dbf").write_bytes(table_bytes([("id", "N", 3, 0)], []))

        expected = [entry[:-4] for entry in os.listdir(tmp_path) if entry.endswith(".dbf")]
        result = DirectoryConverter().convert(tmp_path)

        assert [t.table_name for t in result.tables] == expected
        positions = [result.script.index(f"CREATE TABLE {name} ") for name in expected]
        assert positions == sorted(positions)

    def test_truncated_table_aborts_run(self, shop_dir, table_bytes):
        (shop_dir / "broken.dbf").write_bytes(
            table_bytes([("id", "N", 5, 0)], [("1",)], record_count=5))

        with pytest.raises(TruncatedFileError):
            DirectoryConverter().convert(shop_dir)
        assert not (shop_dir / "conversion.sql").exists()

    def test_missing_directory_raises_storage_error(self, tmp_path):
        with pytest.raises(StorageError, match="Failed to read directory"):
            DirectoryConverter().convert(tmp_path / "missing")

    def test_file_path_raises_conversion_error(self, tmp_path):
        path = tmp_path / "table.dbf"
        path.write_bytes(b"")
        with pytest.raises(ConversionError, match="Not a directory"):
            DirectoryConverter().convert(path)

    def test_console_progress(self, shop_dir, table_bytes):
        (shop_dir / "empty.dbf").write_bytes(table_bytes([], header_length=32))
        console = Console(record=True, width=200)

        DirectoryConverter(console=console).convert(shop_dir)

        output = console.export_text()
        assert "Converted table 'items'" in output
        assert "Table empty has no valid fields and will be skipped" in output
        assert "conversion.sql" in output

    def test_convert_directory_returns_tables(self, shop_dir):
        [table] = convert_directory(shop_dir)
        assert table.to_dict()["fields"] == [
            {"name": "id", "type": "N", "length": 5, "decimal_count": 0},
            {"name": "name", "type": "C", "length": 20, "decimal_count": 0},
        ]

    def test_table_result_lists_indices(self, shop_dir, index_bytes):
        (shop_dir / "items.cdx").write_bytes(index_bytes([("byid", "id")]))

        [table] = convert_directory(shop_dir)

        assert table.fields is table.structure
        assert table.to_dict()["indices"] == [{"name": "byid", "expression": "id"}]
