"""Shared pytest fixtures and test utilities for tablednd tests."""

from typing import Callable, Generator

import pytest

from tablednd.config import get_settings
from tablednd.host import HeadlessHost, PointerEvent
from tablednd.models.table import Table
from tablednd.services.dnd_service import TableDnDService
from tablednd.services.session import reset_active_session


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None, None, None]:
    """Reset cached settings and the global session slot around every test."""
    get_settings.cache_clear()
    reset_active_session()
    yield
    reset_active_session()
    get_settings.cache_clear()


@pytest.fixture
def host():
    """Create a headless host with 20px rows starting at the document origin."""
    return HeadlessHost()


@pytest.fixture
def service(host):
    """Create a drag-and-drop service bound to the headless host."""
    return TableDnDService(host)


@pytest.fixture
def make_table() -> Callable[..., Table]:
    """Provide a factory building tables from row IDs and levels."""

    def _make(row_ids, levels=None, table_id="table"):
        return Table.from_ids(table_id, row_ids, levels)

    return _make


class DropRecorder:
    """Callable recording every call it receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


def at(x: float, y: float, kind: str = "mousemove", **kwargs) -> PointerEvent:
    """Build a pointer event at absolute page coordinates."""
    return PointerEvent(type=kind, page_x=x, page_y=y, **kwargs)
