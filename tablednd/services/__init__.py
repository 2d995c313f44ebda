"""Service layer for drag sessions and serialization."""

from tablednd.services.dnd_service import TableDnDService
from tablednd.services.serialization_service import (
    RowSequenceSerializer,
    to_json,
    to_query_string,
)
from tablednd.services.session import DragSession, get_active_session, reset_active_session

__all__ = [
    "TableDnDService",
    "RowSequenceSerializer",
    "DragSession",
    "get_active_session",
    "reset_active_session",
    "to_json",
    "to_query_string",
]
