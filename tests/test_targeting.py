"""Tests for drag start eligibility and drop target lookup."""

import pytest

pytestmark = pytest.mark.unit

from tablednd.config import DragConfig
from tablednd.host import HeadlessHost, HitTarget
from tablednd.models.row import Row
from tablednd.services.drag.targeting import DropTargetFinder


@pytest.fixture
def finder(host):
    return DropTargetFinder(host)


class TestCanStart:
    """Tests for pointer-down eligibility."""

    def test_any_cell_starts_without_handle(self):
        """Test any cell qualifies when no handle is configured."""
        config = DragConfig()
        assert DropTargetFinder.can_start(Row("A"), config, HitTarget("td"))
        assert DropTargetFinder.can_start(Row("A"), config, HitTarget("TH"))

    def test_non_cell_target_rejected(self):
        """Test a hit on a non-cell element does not start a drag."""
        assert not DropTargetFinder.can_start(Row("A"), DragConfig(), HitTarget("input"))

    def test_no_drag_row_rejected(self):
        """Test rows flagged no_drag never start a drag."""
        assert not DropTargetFinder.can_start(Row("A", no_drag=True), DragConfig(), HitTarget())

    def test_handle_required_when_configured(self):
        """Test only the configured handle starts a drag."""
        config = DragConfig(drag_handle="dragHandle")
        handle = HitTarget("td", frozenset({"dragHandle"}))

        assert DropTargetFinder.can_start(Row("A"), config, handle)
        assert not DropTargetFinder.can_start(Row("A"), config, HitTarget("td"))
        assert not DropTargetFinder.can_start(Row("A", no_drag=True), config, handle)


class TestFind:
    """Tests for locating the row under a virtual drag position."""

    def test_finds_row_whose_band_contains_y(self, finder, make_table):
        """Test the row with y inside its midpoint band is returned."""
        table = make_table(["A", "B", "C"])
        table.config = DragConfig()
        dragged = table.rows[0]

        assert finder.find(table, dragged, 42) is table.rows[2]
        assert finder.find(table, dragged, 21) is table.rows[1]

    def test_band_edges_are_exclusive(self, finder, make_table):
        """Test a position exactly between two bands matches nothing."""
        table = make_table(["A", "B", "C"])
        table.config = DragConfig()
        assert finder.find(table, table.rows[0], 10) is None

    def test_position_outside_table(self, finder, make_table):
        """Test a position past the last row has no target."""
        table = make_table(["A", "B"])
        table.config = DragConfig()
        assert finder.find(table, table.rows[0], 500) is None

    def test_dragged_row_returned_when_hovering_itself(self, finder, make_table):
        """Test hovering the dragged row returns it for sideways moves."""
        table = make_table(["A", "B"])
        table.config = DragConfig()
        assert finder.find(table, table.rows[1], 20) is table.rows[1]

    def test_nodrop_row_never_returned(self, finder, make_table):
        """Test a no_drop row is never a drop target, wherever the pointer is."""
        table = make_table(["A", "B", "C"])
        table.config = DragConfig()
        table.rows[1].no_drop = True

        for y in range(-9, 60):
            assert finder.find(table, table.rows[0], y) is not table.rows[1]

    def test_allow_drop_hook_can_reject(self, finder, make_table):
        """Test on_allow_drop receives (dragged, candidate) and can veto."""
        seen = []

        def allow(dragged, candidate):
            seen.append((dragged.id, candidate.id))
            return candidate.id != "C"

        table = make_table(["A", "B", "C"])
        table.config = DragConfig(on_allow_drop=allow)

        assert finder.find(table, table.rows[0], 42) is None
        assert finder.find(table, table.rows[0], 22) is table.rows[1]
        assert seen == [("A", "C"), ("A", "B")]

    def test_zero_height_row_measured_by_first_cell(self, make_table):
        """Test degenerate rows are located through their first cell."""
        host = HeadlessHost(row_heights={"B": 0})
        table = make_table(["A", "B", "C"])
        table.config = DragConfig()

        assert DropTargetFinder(host).find(table, table.rows[0], 25) is table.rows[1]
