"""Errors raised by the products domain on top of Protean's own.

Unknown identifiers surface as ``protean.exceptions.ObjectNotFoundError`` and
invalid input as ``protean.exceptions.ValidationError``; only backend
failures need a dedicated type.
"""


class StoreUnavailableError(Exception):
    """The product store could not complete an operation."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        message = f"Product store unavailable during {operation}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
