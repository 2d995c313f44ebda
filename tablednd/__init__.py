"""tablednd - drag-and-drop row reordering with optional nesting for tables."""

from tablednd.config import DragConfig, Settings, get_settings
from tablednd.exceptions import NotFoundError, TableDnDError, ValidationError
from tablednd.host import Box, DragHost, HeadlessHost, HitTarget, PointerEvent
from tablednd.models import Row, Table
from tablednd.services import RowSequenceSerializer, TableDnDService

__version__ = "0.1.0"

__all__ = [
    "DragConfig",
    "Settings",
    "get_settings",
    "TableDnDError",
    "ValidationError",
    "NotFoundError",
    "Box",
    "DragHost",
    "HeadlessHost",
    "HitTarget",
    "PointerEvent",
    "Row",
    "Table",
    "RowSequenceSerializer",
    "TableDnDService",
]
