"""Exceptions raised by the hash tables."""


class TableFullError(Exception):
    """Raised when a key cannot be placed because no usable slot is left."""


class KeyNotFoundError(LookupError):
    """Raised when a key to be removed is not present in the table."""