# fruit_app/core/exceptions.py


class RepositoryError(Exception):
    """Base class for errors raised by the data-access layer."""


class StorageUnavailableError(RepositoryError):
    """The database could not be reached or dropped the connection."""


class ConstraintViolationError(RepositoryError):
    """A key, not-null or check constraint rejected the write."""
