"""
Precondition / postcondition checks for array operations.

Every check is always on (unlike the `assert` statement, it is not stripped
under `python -O`) and raises ContractViolation with a message naming the
violated condition and the offending values.

Public API (stable):
    assert_non_null(value) -> None
    assert_not_empty(value) -> None                  # str or sized container
    assert_in_bounds(array, index) -> None
    assert_index_value(array, index, expected) -> None
    assert_identical(a, b) -> None
    assert_sorted(array, descending=False) -> None
    assert_non_negative(value, name="value") -> None
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Sized

import numpy as np

from sortutils.errors import ContractViolation
from sortutils.ordering import is_sorted

__all__ = [
    "assert_non_null",
    "assert_not_empty",
    "assert_in_bounds",
    "assert_index_value",
    "assert_identical",
    "assert_sorted",
    "assert_non_negative",
]


def assert_non_null(value: Any) -> None:
    """Fail if `value` is None."""
    if value is None:
        raise ContractViolation("non_null", "Element is null.")


def assert_not_empty(value: Optional[Sized]) -> None:
    """
    Fail if `value` is None or empty.

    Text must also contain at least one non-whitespace character; any other
    sized container must have at least one element.
    """
    if isinstance(value, str):
        if not value.strip():
            raise ContractViolation("not_empty", "String is null, blank, or empty.")
        return
    if value is None:
        raise ContractViolation("not_empty", "Array is null.")
    if len(value) == 0:
        raise ContractViolation("not_empty", "Array is empty.")


def assert_in_bounds(array: Sequence[Any], index: int) -> None:
    """Fail unless `index` is an int and 0 <= index < len(array)."""
    n = len(array)
    if not _is_int_like(index):
        raise ContractViolation(
            "in_bounds", f"Index {index!r} is not an integer (array of {n} element(s))."
        )
    if not (0 <= index < n):
        raise ContractViolation(
            "in_bounds",
            f"Index [{index}] out of bounds for array of {n} element(s).",
        )


def assert_index_value(array: Sequence[Any], index: int, expected: Any) -> None:
    """Fail unless array[index] == expected."""
    actual = array[index]
    if actual != expected:
        raise ContractViolation(
            "index_value",
            f"Element at index [{index}] did not match expected value ({expected!r}). "
            f"Received {actual!r} instead.",
        )


def assert_identical(a: Optional[Sequence[Any]], b: Optional[Sequence[Any]]) -> None:
    """
    Fail unless `a` and `b` are both present, of equal length and equal
    element-wise. Reports the first differing index.
    """
    if a is None:
        raise ContractViolation("identical", "First array is null.")
    if b is None:
        raise ContractViolation("identical", "Second array is null.")
    if len(a) != len(b):
        raise ContractViolation(
            "identical", f"Arrays of different lengths ({len(a)} != {len(b)})."
        )
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            raise ContractViolation(
                "identical",
                f"Elements differ at index [{i}]. (a[{i}] == {x!r}, b[{i}] == {y!r}).",
            )


def assert_sorted(array: Sequence[Any], descending: bool = False) -> None:
    """Fail unless `array` is sorted in the given direction."""
    if not is_sorted(array, descending):
        raise ContractViolation("sorted", "Array is not sorted")


def assert_non_negative(value: Any, name: str = "value") -> None:
    """Fail unless `value` is an integer >= 0."""
    if not _is_int_like(value):
        raise ContractViolation("non_negative", f"{name} must be an int; got {value!r}")
    if value < 0:
        raise ContractViolation("non_negative", f"{name} must be nonnegative; got {value}")


# ------------------------- helpers ------------------------- #


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (int, np.integer))
