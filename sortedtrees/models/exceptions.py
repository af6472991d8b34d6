"""
Custom exceptions for tree containers.
"""

from typing import Any


class TreeError(Exception):
    """Base class for every error raised by a tree container."""


class InvalidArgumentError(TreeError, ValueError):
    """
    Raised when a mandatory value is missing or a configuration is invalid.

    Trees never store None, so passing None where a value is required
    (insert, children, parent, ...) is rejected before anything is touched.
    """


class NodeNotFoundError(TreeError, LookupError):
    """
    Raised when a query is made against a value that is not in the tree.
    """

    def __init__(self, value: Any, message: str | None = None):
        """
        Initialize not-found error.

        Args:
            value: The value that could not be located.
            message: Optional override for the default message.
        """
        self.value = value
        super().__init__(message or f"No node was found for {value!r}")


class UnsupportedOperationError(TreeError, NotImplementedError):
    """
    Raised for operations that conflict with how the tree organizes itself.

    A self-ordering tree always decides where a value goes, so asking it to
    attach a child under a caller-chosen parent cannot be honoured.
    """


class TreeModifiedError(TreeError, RuntimeError):
    """
    Raised by an iterator when the tree changed structurally after the
    iterator was created.
    """

    def __init__(self, expected: int, actual: int):
        """
        Initialize modification error.

        Args:
            expected: Modification count captured when iteration started.
            actual: Modification count observed on the next step.
        """
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Tree changed during iteration: "
            f"expected modification count {expected}, got {actual}"
        )
