"""Indent level editing for nested rows."""

import logging

from tablednd.models.row import Row
from tablednd.models.table import Table

logger = logging.getLogger(__name__)


class HierarchyEditor:
    """Changes row depths while keeping the flat-list tree well formed."""

    def __init__(self, max_level: int):
        """
        Initialize editor.

        Args:
            max_level: Deepest allowed indent level (0 disables nesting)
        """
        self.max_level = max_level

    def can_indent(self, row: Row, table: Table) -> bool:
        """
        Check if a row may go one level deeper.

        A row can only descend below a predecessor that is already at least
        as deep as the row itself, and never past ``max_level``. The first
        row has no predecessor and stays at the root.
        """
        if row.indent_level >= self.max_level:
            return False
        previous = table.previous(row)
        if previous is None:
            return False
        return previous.indent_level >= row.indent_level

    @staticmethod
    def indent(row: Row) -> None:
        row.indent_level += 1

    @staticmethod
    def outdent(row: Row) -> None:
        if row.indent_level > 0:
            row.indent_level -= 1

    @staticmethod
    def normalize(table: Table) -> list[Row]:
        """
        Repair depths after a gesture.

        Forces the first row to the root and pulls every row back until it
        sits at most one level below its predecessor.

        Args:
            table: Table to repair in place

        Returns:
            Rows whose depth was changed
        """
        repaired = []
        previous_level = None
        for row in table.rows:
            original = row.indent_level
            if previous_level is None:
                row.indent_level = 0
            else:
                while row.indent_level > previous_level + 1:
                    row.indent_level -= 1
            if row.indent_level < 0:
                row.indent_level = 0
            if row.indent_level != original:
                repaired.append(row)
            previous_level = row.indent_level

        if repaired:
            logger.debug(
                "Normalized %d row(s) in table %r: %s",
                len(repaired),
                table.id,
                [row.id for row in repaired],
            )
        return repaired
