"""Table drag-and-drop service: the operations exposed to a host."""

import logging
from typing import Any, Optional

from tablednd.config import DragConfig
from tablednd.exceptions import ValidationError
from tablednd.host import DragHost, PointerEvent
from tablednd.models.row import Row
from tablednd.models.table import Table
from tablednd.services.drag.geometry import GeometryProbe
from tablednd.services.drag.targeting import DropTargetFinder
from tablednd.services.serialization_service import (
    RowSequenceSerializer,
    to_json,
    to_query_string,
)
from tablednd.services.session import (
    DragSession,
    claim_session,
    get_active_session,
    release_session,
)

logger = logging.getLogger(__name__)


class TableDnDService:
    """Attaches drag capability to tables and runs their drag sessions."""

    def __init__(self, host: DragHost):
        """
        Initialize service with a host.

        Args:
            host: Host providing geometry, listeners and visuals
        """
        self.host = host
        self.probe = GeometryProbe()
        self.serializer = RowSequenceSerializer()
        self.tables: list[Table] = []
        self.last_table: Optional[Table] = None

    @property
    def active_session(self) -> Optional[DragSession]:
        return get_active_session()

    def build(
        self,
        *tables: Table,
        config: DragConfig | None = None,
        **options: Any,
    ) -> list[Table]:
        """
        Make the rows of one or more tables draggable.

        Calling again on an already built table replaces its configuration
        and rebinds its start listener without duplicating it.

        Args:
            *tables: Tables to attach to
            config: Base configuration (defaults to ``DragConfig()``)
            **options: Overrides applied on top of ``config``

        Returns:
            The tables that were built

        Raises:
            ValidationError: If no table or a non-table is given
            pydantic.ValidationError: If the options are invalid
        """
        if not tables:
            raise ValidationError("At least one table is required", "tables")
        for table in tables:
            if not isinstance(table, Table):
                raise ValidationError(f"Expected a Table, got {type(table).__name__}", "tables")

        if config is None:
            config = DragConfig(**options)
        elif options:
            config = config.merged(**options)

        for table in tables:
            table.config = config
            self._make_draggable(table)
            if table not in self.tables:
                self.tables.append(table)
            logger.debug("Built table %r with %d row(s)", table.id, len(table))
        return list(tables)

    def update_tables(self) -> None:
        """Re-apply draggable wiring using each table's stored configuration."""
        for table in self.tables:
            if table.config is not None:
                self._make_draggable(table)

    def _make_draggable(self, table: Table) -> None:
        self.host.unbind_start(table, self.handle_pointer_down)
        self.host.bind_start(table, self.handle_pointer_down)

    def handle_pointer_down(
        self, table: Table, row: Row, event: PointerEvent
    ) -> Optional[DragSession]:
        """
        Start a drag session if the pointer-down is eligible.

        Args:
            table: Table the row belongs to
            row: Row under the pointer
            event: Pointer-down event

        Returns:
            The new session, or None if no drag started
        """
        if get_active_session() is not None:
            logger.debug("Ignoring pointer-down on %r: a drag is already active", row.id)
            return None
        if table.config is None:
            logger.debug("Ignoring pointer-down on unbuilt table %r", table.id)
            return None
        if not DropTargetFinder.can_start(row, table.config, event.target):
            logger.debug("Row %r is not draggable from %r", row.id, event.target)
            return None

        session = DragSession(self.host, table, row, event, self.probe)
        if not claim_session(session):
            return None
        session.listen(self.handle_pointer_move, self.handle_pointer_up)
        self.last_table = table
        logger.debug("Started dragging row %r in table %r", row.id, table.id)

        if table.config.on_drag_start is not None:
            try:
                table.config.on_drag_start(table, row)
            except Exception:
                session.release_listeners()
                release_session(session)
                raise
        return session

    def handle_pointer_move(self, event: PointerEvent) -> None:
        session = get_active_session()
        if session is None:
            return
        session.move(event)

    def handle_pointer_up(self, event: PointerEvent | None = None) -> bool:
        """
        End the active drag session.

        Also serves pointer-cancel and pointer-leave events.

        Args:
            event: Pointer-up event

        Returns:
            True if the drop changed the table's order or hierarchy
        """
        session = get_active_session()
        if session is None:
            return False
        try:
            changed = session.finish()
        finally:
            release_session(session)

        config = session.config
        if changed and config.on_drop is not None:
            logger.info("Row %r dropped in table %r", session.row.id, session.table.id)
            config.on_drop(session.table, session.row)
        return changed

    def table_data(self, table: Table | None = None) -> dict[str, Any]:
        """Get the structured order of ``table`` (default: last dragged table)."""
        return self.serializer.table_data(table if table is not None else self.last_table)

    def serialize(self, table: Table | None = None) -> str:
        """Get the order of ``table`` (default: last dragged table) as query pairs."""
        return to_query_string(self.table_data(table))

    def serialize_all(self) -> str:
        """Get the order of every built table that has an ID as query pairs."""
        parts = [
            to_query_string(self.serializer.table_data(table))
            for table in self.tables
            if table.id
        ]
        return "&".join(part for part in parts if part)

    def jsonize(self, pretty: bool = False, table: Table | None = None) -> str:
        """Get the structured order as JSON, optionally indented."""
        if table is None:
            table = self.last_table
        indent = None
        if pretty:
            config = (table.config if table is not None else None) or DragConfig()
            indent = config.json_pretty_separator
        return to_json(self.table_data(table), indent)
