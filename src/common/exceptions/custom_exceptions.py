"""Custom application-wide exceptions."""

from typing import Any


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class InvalidInputError(ApplicationError):
    """Exception raised when a query parameter fails validation."""

    def __init__(
        self,
        message: str = "Invalid query parameter",
        value: Any = None,
        original_exception: Exception | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.value = value
        self.message = f"Invalid Input: {message}"


class DataIntegrityError(ApplicationError):
    """Exception raised when a consolidated record carries data that should have been rejected upstream."""

    def __init__(self, message: str = "Record data is corrupt", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Data Integrity Error: {message}"


class IngestionError(ApplicationError):
    """Exception raised when the inventory source cannot be read."""

    def __init__(
        self,
        message: str = "Reading inventory data failed",
        original_exception: Exception | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.path = path
        self.message = f"Ingestion Error: {message}"
