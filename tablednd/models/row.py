"""Row model for a single draggable table row."""

from dataclasses import dataclass, field


@dataclass(eq=False)
class Row:
    """A row of a table.

    Position in the owning table plus ``indent_level`` together encode the
    hierarchy; a row has no parent pointer of its own. Rows compare by
    identity so two rows sharing an id are still distinct positions.
    """

    id: str | None
    indent_level: int = 0
    no_drag: bool = False
    no_drop: bool = False
    # Parent container name (e.g. thead/tbody); rows only swap inside one.
    section: str = "tbody"
    classes: set[str] = field(default_factory=set)
    style: dict[str, str] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"<Row(id={self.id!r}, indent_level={self.indent_level!r})>"
