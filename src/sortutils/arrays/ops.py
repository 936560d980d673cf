"""
Array primitives used by divide-and-conquer and exchange sorts.

Public API (stable):
    swap(array, i, j) -> None                    # in place, contract-checked
    cut(array) -> tuple[list, list]              # halves, first gets n // 2
    reverse_array(array) -> list                 # new list, input untouched
    to_int_array(array) -> list[int]
    to_str_array(array) -> list[str]

Conventions:
- Only `swap` mutates its argument. Every other operation returns new lists
  and never keeps a reference to the input.
- Contract failures raise sortutils.errors.ContractViolation.
"""

from __future__ import annotations

import logging
from typing import Any, List, MutableSequence, Sequence, Tuple

from sortutils.contracts import (
    assert_in_bounds,
    assert_index_value,
    assert_non_null,
    assert_not_empty,
)
from sortutils.errors import ContractViolation
from sortutils.ordering import ElementKind, element_kind

from .render import render

__all__ = ["swap", "cut", "reverse_array", "to_int_array", "to_str_array"]

logger = logging.getLogger(__name__)


def swap(array: MutableSequence[Any], i: int, j: int) -> None:
    """
    Exchange array[i] and array[j] in place.

    Pre-conditions: array is non-null and non-empty; both indices in bounds.
    Post-condition: array[j] holds the value previously at array[i].
    """
    assert_not_empty(array)
    assert_in_bounds(array, i)
    assert_in_bounds(array, j)

    i_value = array[i]
    array[i] = array[j]
    array[j] = i_value

    assert_index_value(array, j, i_value)


def cut(array: Sequence[Any]) -> Tuple[List[Any], List[Any]]:
    """
    Split `array` into two contiguous halves.

    The first half receives len(array) // 2 elements, the second the rest,
    so left + right == list(array).

    Raises
    ------
    ContractViolation
        If `array` is None, empty, or has a single element.
    """
    assert_not_empty(array)
    n = len(array)
    if n < 2:
        raise ContractViolation("cut", "Array of length 1 cannot be split.")
    mid = n // 2
    return list(array[:mid]), list(array[mid:])


def reverse_array(array: Sequence[Any]) -> List[Any]:
    """Return a new list holding the elements of `array` in reverse order."""
    target = list(reversed(array))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Input array: %s ==> Reversed array: %s", render(array), render(target))
    return target


def to_int_array(array: Sequence[Any]) -> List[int]:
    """Copy `array` into a list of ints; every element must be an integer."""
    _check_kind(array, ElementKind.INTEGER)
    return [int(v) for v in array]


def to_str_array(array: Sequence[Any]) -> List[str]:
    """Copy `array` into a list of str; every element must be text."""
    _check_kind(array, ElementKind.TEXT)
    return [str(v) for v in array]


# ------------------------- helpers ------------------------- #


def _check_kind(array: Sequence[Any], kind: ElementKind) -> None:
    assert_non_null(array)
    for i, v in enumerate(array):
        if element_kind(v) is not kind:
            raise ContractViolation(
                "element_kind",
                f"Element at index [{i}] is not {kind.value}: {v!r}",
            )
