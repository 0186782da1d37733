"""Custom exceptions for the file monitor."""


class FileMonitorError(Exception):
    """Base exception for file monitor errors."""

    pass


class ResolvedFileNotFoundError(FileMonitorError):
    """Raised when a resolved path does not reference an existing file."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
