"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class StorageError(AdapterError):
    """Image storage error."""

    pass
