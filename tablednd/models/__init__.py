"""Table and row models for tablednd."""

from tablednd.models.row import Row
from tablednd.models.table import Table

__all__ = ["Row", "Table"]
