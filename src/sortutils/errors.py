"""
Error types raised by sortutils.

Two kinds of failure exist:
- ContractViolation: a precondition or postcondition did not hold
  (empty array, index out of bounds, unsorted when sorted was required, ...).
- UnsupportedComparison: two elements cannot be ordered against each other
  because they are not both integers or both text.

Both are fail-fast signals. Nothing in the library catches them.
"""

from __future__ import annotations

from typing import Any

__all__ = ["SortUtilsError", "ContractViolation", "UnsupportedComparison"]


class SortUtilsError(Exception):
    """Base class for every error raised by sortutils."""


class ContractViolation(SortUtilsError, AssertionError):
    """Raised when a precondition or postcondition is violated."""

    def __init__(self, condition: str, detail: str) -> None:
        self.condition = condition
        self.detail = detail
        super().__init__(f"[CONTRACT:{condition}] {detail}")

    def __reduce__(self):
        return (type(self), (self.condition, self.detail))


class UnsupportedComparison(SortUtilsError, TypeError):
    """Raised when two elements are not of the same supported kind."""

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Unsupported comparison between {type(left).__name__} ({left!r}) "
            f"and {type(right).__name__} ({right!r})"
        )

    def __reduce__(self):
        return (type(self), (self.left, self.right))
