"""Custom exceptions for table drag-and-drop operations."""


class TableDnDError(Exception):
    """Base exception for tablednd errors."""

    pass


class ValidationError(TableDnDError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(TableDnDError):
    """Raised when a row or table is not found."""

    def __init__(self, resource_type: str, resource_id: str | None):
        message = f"{resource_type} with ID '{resource_id}' not found"
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id
