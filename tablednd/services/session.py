"""Drag session state machine.

A ``DragSession`` lives from pointer-down to pointer-up on one row. While
it is active, row swaps and indent changes are applied to the table
immediately so the host can render live feedback. Anyone reading the
table's order during a gesture therefore sees the in-progress arrangement,
not a committed one.

Only one gesture can be in flight, so the active session is kept in a
single process-wide slot (see ``get_active_session``).
"""

import hashlib
import logging
from contextlib import ExitStack
from typing import Optional

from tablednd.config import DragConfig
from tablednd.host import DragHost, EventHandler, PointerEvent
from tablednd.models.row import Row
from tablednd.models.table import Table
from tablednd.services.drag.direction import Direction, DirectionFilter
from tablednd.services.drag.geometry import GeometryProbe, Point
from tablednd.services.drag.hierarchy import HierarchyEditor
from tablednd.services.drag.targeting import DropTargetFinder

logger = logging.getLogger(__name__)


def order_fingerprint(table: Table) -> str:
    """
    Hash the table's row order and depths.

    Any reorder or indent change produces a different fingerprint.

    Args:
        table: Table to fingerprint

    Returns:
        Hex digest over each row's depth and ID in sequence order
    """
    digest = hashlib.sha1()
    for row in table.rows:
        digest.update(f"{row.indent_level}:{row.id or ''}\x1f".encode("utf-8"))
    return digest.hexdigest()


class DragSession:
    """State of a single active drag gesture."""

    def __init__(
        self,
        host: DragHost,
        table: Table,
        row: Row,
        event: PointerEvent,
        probe: GeometryProbe | None = None,
    ):
        """
        Capture everything the gesture needs at pointer-down.

        Args:
            host: Host providing geometry, visuals and listeners
            table: Table the row belongs to
            row: Row being dragged
            event: The pointer-down event
            probe: Geometry probe (defaults to a fresh one)
        """
        self.host = host
        self.table = table
        self.row = row
        self.config: DragConfig = table.config or DragConfig()
        self.probe = probe or GeometryProbe()
        self.finder = DropTargetFinder(host, self.probe)
        self.editor = HierarchyEditor(self.config.hierarchy_level)

        element = host.element_for(table, row)
        self.mouse_offset: Point = self.probe.offset_within(element, event)
        start = self.probe.position(element)
        self.direction = DirectionFilter(start.x, start.y)
        self.original_order = order_fingerprint(table)
        self._listeners = ExitStack()
        self.finished = False

    def __repr__(self) -> str:
        return f"<DragSession(table={self.table.id!r}, row={self.row.id!r})>"

    def listen(self, on_move: EventHandler, on_end: EventHandler) -> None:
        """Register document move/end listeners for the life of the session."""
        self.host.bind_document(on_move, on_end)
        self._listeners.callback(self.host.unbind_document, on_move, on_end)

    def release_listeners(self) -> None:
        self._listeners.close()

    def move(self, event: PointerEvent) -> Direction:
        """
        Process a pointer-move.

        Args:
            event: Pointer-move event

        Returns:
            The direction the filter reported for this move
        """
        pointer = self.probe.pointer_coords(event)
        x = pointer.x - self.mouse_offset.x
        y = pointer.y - self.mouse_offset.y

        self._autoscroll(pointer.y)
        self._apply_drag_visual()

        target = self.finder.find(self.table, self.row, y)
        moving = self.direction.detect(x, y, self.config.sensitivity)

        if moving.vertical != 0 and target is not None and target is not self.row:
            if target.section == self.row.section:
                if moving.vertical < 0:
                    self.table.move_after(self.row, target)
                else:
                    self.table.move_before(self.row, target)
                logger.debug(
                    "Moved row %r %s row %r",
                    self.row.id,
                    "after" if moving.vertical < 0 else "before",
                    target.id,
                )
                self.host.refresh(self.table, self.row)

        if self.config.hierarchy_enabled and moving.horizontal != 0 and target is self.row:
            level = self.row.indent_level
            if moving.horizontal > 0 and level > 0:
                self.editor.outdent(self.row)
            elif moving.horizontal < 0 and self.editor.can_indent(self.row, self.table):
                self.editor.indent(self.row)
            if self.row.indent_level != level:
                logger.debug(
                    "Row %r indent level %d -> %d", self.row.id, level, self.row.indent_level
                )
                self.host.refresh(self.table, self.row)

        return moving

    def finish(self) -> bool:
        """
        End the gesture.

        Listeners are released first, whatever else happens.

        Returns:
            True if order or depths differ from when the drag started
        """
        if self.finished:
            return False
        self.finished = True
        try:
            self.release_listeners()
        finally:
            if self.config.hierarchy_enabled and self.config.auto_clean_relations:
                self.editor.normalize(self.table)
            self._apply_drop_visual()
        changed = order_fingerprint(self.table) != self.original_order
        logger.debug("Drag of row %r finished, changed=%s", self.row.id, changed)
        return changed

    def _autoscroll(self, pointer_y: float) -> None:
        amount = self.config.scroll_amount
        in_view = pointer_y - self.host.scroll_top()
        if in_view < amount:
            self.host.scroll_by(-amount)
        elif self.host.viewport_height() - in_view < amount:
            self.host.scroll_by(amount)

    def _apply_drag_visual(self) -> None:
        if self.config.on_drag_class:
            self.host.add_class(self.row, self.config.on_drag_class)
        elif self.config.on_drag_style:
            self.host.apply_style(self.row, self.config.on_drag_style)

    def _apply_drop_visual(self) -> None:
        if self.config.on_drag_class:
            self.host.remove_class(self.row, self.config.on_drag_class)
        elif self.config.on_drop_style:
            self.host.apply_style(self.row, self.config.on_drop_style)


# Global active session slot
_active_session: Optional[DragSession] = None


def get_active_session() -> Optional[DragSession]:
    """Get the session currently in flight, if any."""
    return _active_session


def claim_session(session: DragSession) -> bool:
    """
    Occupy the process-wide slot.

    Returns:
        False if another session is already active
    """
    global _active_session
    if _active_session is not None:
        return False
    _active_session = session
    return True


def release_session(session: DragSession) -> None:
    """Free the slot if ``session`` holds it."""
    global _active_session
    if _active_session is session:
        _active_session = None


def reset_active_session() -> None:
    """Reset the active session slot (useful for testing)."""
    global _active_session
    if _active_session is not None:
        _active_session.release_listeners()
    _active_session = None
