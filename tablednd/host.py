"""Host capability interface and an in-memory implementation.

The drag core never touches a real UI. Everything it needs from the
environment (element geometry, listener wiring, visual state, viewport
scrolling) goes through a ``DragHost``. ``HeadlessHost`` implements the
protocol by stacking rows vertically, which is enough for tests and for
driving the state machine from scripted pointer events.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

if TYPE_CHECKING:
    from tablednd.models.row import Row
    from tablednd.models.table import Table

StartHandler = Callable[["Table", "Row", "PointerEvent"], Any]
EventHandler = Callable[["PointerEvent"], Any]


class Element(Protocol):
    """Geometry of a rendered element, relative to its offset parent."""

    offset_left: float
    offset_top: float
    offset_height: float
    offset_parent: Optional["Element"]
    first_child: Optional["Element"]


@dataclass
class Box:
    """Plain ``Element`` implementation."""

    offset_left: float = 0
    offset_top: float = 0
    offset_height: float = 0
    offset_parent: Optional["Box"] = None
    first_child: Optional["Box"] = None


@dataclass(frozen=True)
class HitTarget:
    """The element a pointer-down landed on."""

    tag: str = "td"
    classes: frozenset[str] = frozenset()


@dataclass(frozen=True)
class PointerEvent:
    """A mouse or touch event as reported by the host.

    ``page_x``/``page_y`` are absolute document coordinates. Hosts that only
    know viewport coordinates leave them unset and fill in the client,
    scroll and border values instead.
    """

    type: str = "mousemove"
    page_x: Optional[float] = None
    page_y: Optional[float] = None
    client_x: float = 0
    client_y: float = 0
    scroll_left: float = 0
    scroll_top: float = 0
    client_left: float = 0
    client_top: float = 0
    target: HitTarget = HitTarget()


class DragHost(Protocol):
    """Capabilities the drag core requires from its environment."""

    def element_for(self, table: "Table", row: "Row") -> Element: ...

    def bind_start(self, table: "Table", handler: StartHandler) -> None: ...

    def unbind_start(self, table: "Table", handler: StartHandler) -> None: ...

    def bind_document(self, on_move: EventHandler, on_end: EventHandler) -> None: ...

    def unbind_document(self, on_move: EventHandler, on_end: EventHandler) -> None: ...

    def add_class(self, row: "Row", name: str) -> None: ...

    def remove_class(self, row: "Row", name: str) -> None: ...

    def apply_style(self, row: "Row", style: dict[str, str]) -> None: ...

    def scroll_top(self) -> float: ...

    def viewport_height(self) -> float: ...

    def scroll_by(self, dy: float) -> None: ...

    def refresh(self, table: "Table", row: "Row") -> None: ...


@dataclass
class HeadlessHost:
    """In-memory host laying rows out top to bottom.

    Each table sits at ``origin`` in the document and each row is
    ``row_height`` tall unless overridden in ``row_heights`` (keyed by row
    ID). A zero-height row gets a first child of ``row_height`` so the
    degenerate-row fallback in the geometry probe has something to measure.
    """

    row_height: float = 20
    origin: tuple[float, float] = (0, 0)
    viewport: float = 10_000
    row_heights: dict[str, float] = field(default_factory=dict)
    start_handlers: dict[int, list[StartHandler]] = field(default_factory=dict)
    document_handlers: list[tuple[EventHandler, EventHandler]] = field(default_factory=list)
    scrolled: float = 0
    refreshed: list[str | None] = field(default_factory=list)

    def _height(self, row: "Row") -> float:
        return self.row_heights.get(row.id, self.row_height) if row.id else self.row_height

    def element_for(self, table: "Table", row: "Row") -> Box:
        table_box = Box(offset_left=self.origin[0], offset_top=self.origin[1])
        top = 0.0
        for candidate in table.rows:
            if candidate is row:
                break
            top += self._height(candidate) or self.row_height
        height = self._height(row)
        cell = Box(offset_top=top, offset_height=self.row_height, offset_parent=table_box)
        return Box(
            offset_top=top,
            offset_height=height,
            offset_parent=table_box,
            first_child=cell,
        )

    def bind_start(self, table: "Table", handler: StartHandler) -> None:
        handlers = self.start_handlers.setdefault(id(table), [])
        handlers.append(handler)

    def unbind_start(self, table: "Table", handler: StartHandler) -> None:
        handlers = self.start_handlers.get(id(table), [])
        if handler in handlers:
            handlers.remove(handler)

    def bind_document(self, on_move: EventHandler, on_end: EventHandler) -> None:
        self.document_handlers.append((on_move, on_end))

    def unbind_document(self, on_move: EventHandler, on_end: EventHandler) -> None:
        if (on_move, on_end) in self.document_handlers:
            self.document_handlers.remove((on_move, on_end))

    def add_class(self, row: "Row", name: str) -> None:
        row.classes.add(name)

    def remove_class(self, row: "Row", name: str) -> None:
        row.classes.discard(name)

    def apply_style(self, row: "Row", style: dict[str, str]) -> None:
        row.style.update(style)

    def scroll_top(self) -> float:
        return self.scrolled

    def viewport_height(self) -> float:
        return self.viewport

    def scroll_by(self, dy: float) -> None:
        self.scrolled = max(0, self.scrolled + dy)

    def refresh(self, table: "Table", row: "Row") -> None:
        self.refreshed.append(row.id)

    # Event dispatch helpers for driving the host like a UI toolkit would.

    def press(self, table: "Table", row: "Row", event: PointerEvent) -> None:
        """Deliver a pointer-down to every start handler bound on ``table``."""
        for handler in list(self.start_handlers.get(id(table), [])):
            handler(table, row, event)

    def move(self, event: PointerEvent) -> None:
        """Deliver a pointer-move to the document listeners."""
        for on_move, _ in list(self.document_handlers):
            on_move(event)

    def release(self, event: PointerEvent) -> None:
        """Deliver a pointer-up to the document listeners."""
        for _, on_end in list(self.document_handlers):
            on_end(event)
