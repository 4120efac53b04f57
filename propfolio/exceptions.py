"""Custom exception hierarchy for propfolio."""


class PropfolioError(Exception):
    """Base exception for all propfolio errors."""


class EntityNotFoundError(PropfolioError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class InvalidEntityStateError(PropfolioError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(PropfolioError):
    """Raised when configuration is invalid or missing."""


class BatchCreateError(PropfolioError):
    """Raised when any record of a batch insert fails; nothing is committed."""

    def __init__(self, message: str, failed: int = 0, total: int = 0) -> None:
        super().__init__(message)
        self.failed = failed
        self.total = total


class ExportError(PropfolioError):
    """Raised when a report or snapshot cannot be written."""
