class EntryValidationError(ValueError):
    """Raised when user supplied text for a log entry field is invalid."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class StorageWarning(UserWarning):
    """Issued when the log file cannot be read or written."""
