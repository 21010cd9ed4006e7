class RepositoryError(Exception):
    pass


class StaleRecordError(RepositoryError):
    """The row was deleted or changed by another writer since it was read."""


class IntegrityViolationError(RepositoryError):
    """A unique or foreign key constraint rejected the write."""
