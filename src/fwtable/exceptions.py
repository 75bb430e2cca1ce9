"""Exceptions for fwtable."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class FWTableError(Exception):
    """
    Base exception for all fwtable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Argument Exceptions
# ---------------------------------------------------------------------------


class InvalidArgumentError(FWTableError, ValueError):
    """
    Raised when a setter or constructor receives a value it cannot accept.

    The object being configured is left unchanged.

    Attributes:
        argument: Name of the rejected argument
        value: The rejected value
    """

    def __init__(self, operation: str, argument: str, value: object, reason: str) -> None:
        self.operation = operation
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(f"{operation}: invalid {argument} [{value!r}] -> {reason}")


class OutOfRangeError(FWTableError, IndexError):
    """
    Raised when a row or column index falls outside the current bounds.

    Attributes:
        index: The requested index
        size: Number of items available at the time of the request
    """

    def __init__(self, kind: str, index: int, size: int) -> None:
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"{kind} index {index} out of range (size: {size})")
