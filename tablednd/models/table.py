"""Table model holding the ordered row sequence."""

from typing import Iterable, Iterator, Optional

from tablednd.config import DragConfig
from tablednd.exceptions import NotFoundError, ValidationError
from tablednd.models.row import Row


class Table:
    """An ordered, mutable sequence of rows plus its drag configuration."""

    def __init__(self, table_id: str | None, rows: Iterable[Row] = ()):
        """
        Initialize a table.

        Args:
            table_id: Unique table ID, required for serialization
            rows: Initial rows in display order
        """
        self.id = table_id
        self.rows: list[Row] = list(rows)
        self.config: Optional[DragConfig] = None

    @classmethod
    def from_ids(
        cls, table_id: str | None, row_ids: Iterable[str | None], levels: Iterable[int] | None = None
    ) -> "Table":
        """
        Build a table from row IDs and optional indent levels.

        Raises:
            ValidationError: If ``levels`` and ``row_ids`` differ in length
        """
        row_ids = list(row_ids)
        levels = list(levels) if levels is not None else [0] * len(row_ids)
        if len(levels) != len(row_ids):
            raise ValidationError(
                f"Expected {len(row_ids)} indent level(s), got {len(levels)}", "levels"
            )
        return cls(table_id, [Row(row_id, level) for row_id, level in zip(row_ids, levels)])

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"<Table(id={self.id!r}, rows={len(self.rows)})>"

    @property
    def first(self) -> Optional[Row]:
        return self.rows[0] if self.rows else None

    def index_of(self, row: Row) -> int:
        """
        Get the position of a row.

        Raises:
            NotFoundError: If the row does not belong to this table
        """
        for index, candidate in enumerate(self.rows):
            if candidate is row:
                return index
        raise NotFoundError("Row", row.id)

    def previous(self, row: Row) -> Optional[Row]:
        """Get the row immediately before ``row`` (None for the first row)."""
        index = self.index_of(row)
        return self.rows[index - 1] if index > 0 else None

    def get_row(self, row_id: str) -> Row:
        """
        Get a row by ID.

        Raises:
            NotFoundError: If no row has that ID
        """
        for row in self.rows:
            if row.id == row_id:
                return row
        raise NotFoundError("Row", row_id)

    def move_before(self, row: Row, target: Row) -> None:
        """Reposition ``row`` immediately before ``target``."""
        self._move(row, target, after=False)

    def move_after(self, row: Row, target: Row) -> None:
        """Reposition ``row`` immediately after ``target``."""
        self._move(row, target, after=True)

    def _move(self, row: Row, target: Row, after: bool) -> None:
        if row is target:
            return
        source = self.index_of(row)
        index = self.index_of(target)
        self.rows.pop(source)
        if source < index:
            index -= 1
        self.rows.insert(index + 1 if after else index, row)

    def order_ids(self) -> list[str | None]:
        """Get row IDs in display order."""
        return [row.id for row in self.rows]

    def levels(self) -> list[int]:
        """Get indent levels in display order."""
        return [row.indent_level for row in self.rows]
