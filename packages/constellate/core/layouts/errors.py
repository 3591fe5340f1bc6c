"""Exceptions raised by the layout engine.

Layout generation is pure arithmetic, so the error surface is narrow:
bad input is rejected before any computation and unknown layout
identifiers fail fast instead of producing an empty result.
"""

from __future__ import annotations

import numbers


class LayoutError(Exception):
    """Base class for all layout engine errors."""


class InvalidCountError(LayoutError, ValueError):
    """Raised when a record count is not a non-negative integer.

    Attributes:
        count: The rejected value.

    Example:
        >>> raise InvalidCountError(-3)
        InvalidCountError: Layout count must be a non-negative integer, got -3
    """

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(f"Layout count must be a non-negative integer, got {count!r}")


class LayoutNotFoundError(LayoutError, KeyError):
    """Raised when a layout is not found in a registry.

    Attributes:
        layout_id: The ID that was not found.
        available: List of available layout IDs.

    Example:
        >>> raise LayoutNotFoundError("cylinder", ["sphere", "table"])
        LayoutNotFoundError: Layout 'cylinder' not found. Available: sphere, table
    """

    def __init__(self, layout_id: str, available: list[str] | None = None) -> None:
        self.layout_id = layout_id
        self.available = available or []

        message = f"Layout '{layout_id}' not found."
        if self.available:
            message += f" Available: {', '.join(sorted(self.available))}"

        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InvalidOrderingError(LayoutError, ValueError):
    """Raised when a per-record ordering does not match the record count."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Ordering has {actual} entries but {expected} targets were generated")


def validate_count(count: object) -> int:
    """Check a record count before any layout computation.

    Args:
        count: Candidate record count.

    Returns:
        The count as a plain int.

    Raises:
        InvalidCountError: If count is negative, a bool, or not an integer.
    """
    if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count < 0:
        raise InvalidCountError(count)
    return int(count)
