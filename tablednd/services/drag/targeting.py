"""Drop target lookup and eligibility rules."""

import logging
from typing import Optional

from tablednd.config import DragConfig
from tablednd.host import DragHost, HitTarget
from tablednd.models.row import Row
from tablednd.models.table import Table
from tablednd.services.drag.geometry import GeometryProbe

logger = logging.getLogger(__name__)

CELL_TAGS = frozenset({"td", "th"})


class DropTargetFinder:
    """Finds which row a dragged row is hovering over."""

    def __init__(self, host: DragHost, probe: GeometryProbe | None = None):
        """
        Initialize finder.

        Args:
            host: Host used to query row geometry
            probe: Geometry probe (defaults to a fresh one)
        """
        self.host = host
        self.probe = probe or GeometryProbe()

    @staticmethod
    def can_start(row: Row, config: DragConfig, target: HitTarget) -> bool:
        """
        Check if a pointer-down on ``target`` may start dragging ``row``.

        With a drag handle configured only a hit on an element carrying that
        class qualifies; otherwise any cell of the row does.
        """
        if row.no_drag:
            return False
        if config.drag_handle:
            return config.drag_handle in target.classes
        return target.tag.lower() in CELL_TAGS

    @staticmethod
    def accepts_drop(dragged: Row, candidate: Row, config: DragConfig) -> bool:
        """Check if ``candidate`` may receive ``dragged`` next to it."""
        if candidate.no_drop:
            return False
        if config.on_allow_drop is not None and not config.on_allow_drop(dragged, candidate):
            return False
        return True

    def find(self, table: Table, dragged: Row, y: float) -> Optional[Row]:
        """
        Find the row under a virtual drag position.

        Scans rows in order for the first whose band (its top edge plus or
        minus half its height) contains ``y``. Hovering the dragged row
        itself returns it unchanged so sideways moves can re-indent it; any
        other row must pass the drop eligibility rules.

        Args:
            table: Table being dragged in
            dragged: Row being dragged
            y: Virtual y position of the dragged row

        Returns:
            Row under the pointer, or None if there is no eligible row
        """
        config = table.config or DragConfig()
        for row in table.rows:
            element = self.probe.measured(self.host.element_for(table, row))
            row_y = self.probe.position(element).y
            half_height = element.offset_height / 2
            if row_y - half_height < y < row_y + half_height:
                if row is dragged:
                    return row
                if self.accepts_drop(dragged, row, config):
                    return row
                logger.debug("Row %r rejected as drop target for %r", row.id, dragged.id)
                return None
        return None
