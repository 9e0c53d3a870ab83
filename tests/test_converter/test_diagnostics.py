from dbfconvert.catalog import Diagnostics, DiagnosticKind


class TestDiagnostics:
    """Tests for the warning collector."""

    def test_starts_empty(self):
        diagnostics = Diagnostics()
        assert len(diagnostics) == 0
        assert not diagnostics

    def test_unnamed_field(self):
        diagnostics = Diagnostics()
        warning = diagnostics.unnamed_field(3, "items")

        assert warning.kind is DiagnosticKind.UNNAMED_FIELD
        assert warning.slot_index == 3
        assert diagnostics.messages() == [
            "Field without a name found at index 3, it will be skipped"]

    def test_empty_table(self):
        diagnostics = Diagnostics()
        diagnostics.empty_table("ghost")

        [warning] = diagnostics.of_kind(DiagnosticKind.EMPTY_TABLE)
        assert warning.to_dict() == {
            "kind": "empty_table",
            "message": "Table ghost has no valid fields and will be skipped",
            "table_name": "ghost",
            "slot_index": None,
        }

    def test_preserves_order(self):
        diagnostics = Diagnostics()
        diagnostics.unnamed_field(0, "a")
        diagnostics.empty_table("a")
        assert [d.kind for d in diagnostics] == [
            DiagnosticKind.UNNAMED_FIELD, DiagnosticKind.EMPTY_TABLE]
