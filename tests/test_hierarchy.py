"""Tests for indent level editing and repair."""

import pytest

pytestmark = pytest.mark.unit

from tablednd.models.row import Row
from tablednd.services.drag.hierarchy import HierarchyEditor


class TestCanIndent:
    """Tests for the indent eligibility rule."""

    def test_can_indent_below_sibling(self, make_table):
        """Test a row can go one level below a predecessor at the same depth."""
        table = make_table(["A", "B"])
        assert HierarchyEditor(2).can_indent(table.rows[1], table) is True

    def test_cannot_indent_past_predecessor(self, make_table):
        """Test a row cannot go deeper than one level below its predecessor."""
        table = make_table(["A", "B", "C"], [0, 1, 0])
        editor = HierarchyEditor(3)
        assert editor.can_indent(table.rows[2], table) is True

        table.rows[2].indent_level = 1
        table.rows[1].indent_level = 0
        assert editor.can_indent(table.rows[2], table) is False

    def test_cannot_indent_at_max_level(self, make_table):
        """Test the maximum depth wins even when the predecessor is deeper."""
        table = make_table(["A", "B", "C", "D"], [0, 1, 2, 1])
        assert HierarchyEditor(1).can_indent(table.rows[3], table) is False

    def test_first_row_cannot_indent(self, make_table):
        """Test the first row stays at the root."""
        table = make_table(["A", "B"])
        assert HierarchyEditor(3).can_indent(table.rows[0], table) is False


class TestIndentOutdent:
    """Tests for single-step depth changes."""

    def test_indent_and_outdent(self):
        """Test indent and outdent move one level at a time."""
        row = Row("A")
        HierarchyEditor.indent(row)
        HierarchyEditor.indent(row)
        assert row.indent_level == 2

        HierarchyEditor.outdent(row)
        assert row.indent_level == 1

    def test_outdent_at_root_is_noop(self):
        """Test depth never goes negative."""
        row = Row("A")
        HierarchyEditor.outdent(row)
        assert row.indent_level == 0


class TestNormalize:
    """Tests for post-drag hierarchy repair."""

    def test_first_row_forced_to_root(self, make_table):
        """Test the first row always ends at depth 0."""
        table = make_table(["A", "B"], [2, 3])
        HierarchyEditor.normalize(table)
        assert table.levels() == [0, 1]

    def test_rows_pulled_back_under_predecessor(self, make_table):
        """Test every row ends at most one level below its predecessor."""
        table = make_table(["A", "B", "C", "D", "E"], [0, 3, 3, 0, 2])
        repaired = HierarchyEditor.normalize(table)

        assert table.levels() == [0, 1, 2, 0, 1]
        assert [row.id for row in repaired] == ["B", "C", "E"]

    def test_valid_hierarchy_untouched(self, make_table):
        """Test a well-formed hierarchy is left alone."""
        table = make_table(["A", "B", "C", "D"], [0, 1, 2, 1])
        assert HierarchyEditor.normalize(table) == []
        assert table.levels() == [0, 1, 2, 1]

    @pytest.mark.parametrize(
        "levels",
        [[3, 0, 5, 1], [0, 0, 4, 4, 4], [1, 2, 3, 4], [2, 0, 0, 9]],
    )
    def test_invariant_holds_after_normalize(self, make_table, levels):
        """Test the depth invariant holds for arbitrary input depths."""
        table = make_table([f"R{i}" for i in range(len(levels))], levels)
        HierarchyEditor.normalize(table)

        result = table.levels()
        assert result[0] == 0
        for previous, current in zip(result, result[1:]):
            assert 0 <= current <= previous + 1
