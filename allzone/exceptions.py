"""Custom exception hierarchy for allzone."""


class AllZoneError(Exception):
    """Base exception for all allzone errors."""


class StorageUnavailableError(AllZoneError):
    """Raised when the data directory cannot be created or written."""


class CorruptStoreError(AllZoneError):
    """Raised when a backing file exists but cannot be parsed."""


class InvalidRecordError(AllZoneError):
    """Raised when a record violates the model invariants."""


class DuplicatePropertyIdError(InvalidRecordError):
    """Raised when a collection holds two records with the same id."""


class ValidationError(AllZoneError):
    """Raised when contact form input is rejected."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ConfigurationError(AllZoneError):
    """Raised when configuration is invalid or missing."""
