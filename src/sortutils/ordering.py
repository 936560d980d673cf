"""
Three-way comparison and sortedness over a closed set of element kinds.

Supported element kinds:
- INTEGER: Python ints and NumPy integer scalars (bool is excluded).
- TEXT: Python str (compared by code point, like `str.__lt__`).

Public API (stable):
    element_kind(value) -> ElementKind | None
    compare(a, b) -> int                       # -1, 0 or 1
    is_sorted(array, descending=False) -> bool

Conventions:
- Comparing elements of different kinds, or of any kind outside the closed set,
  raises UnsupportedComparison. There is no fallback ordering.
- is_sorted short-circuits at the first out-of-order pair and does not report
  where it happened.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, Optional, Sequence

import numpy as np

from sortutils.errors import UnsupportedComparison

__all__ = ["ElementKind", "element_kind", "compare", "is_sorted"]


@unique
class ElementKind(Enum):
    INTEGER = "integer"
    TEXT = "text"


def element_kind(value: Any) -> Optional[ElementKind]:
    """Return the kind of `value`, or None if it is not a supported element."""
    # bool is an int subclass but is not an orderable element here
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return ElementKind.INTEGER
    if isinstance(value, str):
        return ElementKind.TEXT
    return None


def compare(a: Any, b: Any) -> int:
    """
    Compare two elements of the same supported kind.

    Returns
    -------
    int
        0 if a == b, 1 if a > b, -1 if a < b.

    Raises
    ------
    UnsupportedComparison
        If `a` and `b` are not both integers or both text.
    """
    kind = element_kind(a)
    if kind is None or kind is not element_kind(b):
        raise UnsupportedComparison(a, b)
    if kind is ElementKind.INTEGER:
        a, b = int(a), int(b)
    return (a > b) - (a < b)


def is_sorted(array: Sequence[Any], descending: bool = False) -> bool:
    """
    Return True iff every adjacent pair of `array` is in the requested order.

    Ascending requires compare(a[i], a[i+1]) <= 0, descending >= 0.
    Empty and single-element arrays are sorted in both directions.
    """
    n = len(array)
    if n < 2:
        return True
    for i in range(n - 1):
        comparison = compare(array[i], array[i + 1])
        if descending and comparison < 0:
            return False
        if not descending and comparison > 0:
            return False
    return True
