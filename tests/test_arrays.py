"""
Tests for the array primitives: swap, cut, reverse_array, conversions, render.

What we check:
- swap exchanges exactly two positions in place and validates its indices
- cut returns order-preserving halves (first gets n // 2) and rejects n < 2
- reverse_array returns a new list, never mutates, and is an involution
- render / label text format

Note:
- This file inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import logging
import pathlib
import sys
from typing import Any, List

import pytest
from hypothesis import given, settings, strategies as st

# Ensure `src/` is importable when running `pytest` from the repo root
_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sortutils.arrays import (
    cut,
    label,
    render,
    reverse_array,
    swap,
    to_int_array,
    to_str_array,
)
from sortutils.errors import ContractViolation


# ------------------------- swap ------------------------- #

def test_swap_scenario() -> None:
    a = [2, 4, 1, 3, 5]
    swap(a, 0, 2)
    assert a == [1, 4, 2, 3, 5]


def test_swap_same_index_is_noop() -> None:
    a = ["x", "y", "z"]
    swap(a, 1, 1)
    assert a == ["x", "y", "z"]


@pytest.mark.parametrize(
    "a, i, j",
    [
        ([], 0, 0),
        ([1, 2, 3], -1, 0),
        ([1, 2, 3], 0, 3),
        ([1, 2, 3], 7, 1),
    ],
)
def test_swap_rejects_bad_input(a: List[int], i: int, j: int) -> None:
    before = list(a)
    with pytest.raises(ContractViolation):
        swap(a, i, j)
    # Preconditions fail before any write
    assert a == before


def test_swap_rejects_none() -> None:
    with pytest.raises(ContractViolation):
        swap(None, 0, 0)  # type: ignore[arg-type]


@pytest.mark.parametrize("i, j", [(1.0, 0), (0, True), ("1", 0), (None, 2)])
def test_swap_rejects_non_int_index(i: Any, j: Any) -> None:
    a = [1, 2, 3]
    with pytest.raises(ContractViolation) as info:
        swap(a, i, j)
    assert info.value.condition == "in_bounds"
    assert a == [1, 2, 3]


class _DropWrites(list):
    """A list that silently ignores item assignment."""

    def __setitem__(self, key: Any, value: Any) -> None:
        pass


def test_swap_checks_value_after_exchange() -> None:
    with pytest.raises(ContractViolation) as info:
        swap(_DropWrites([1, 2, 3]), 0, 2)
    assert info.value.condition == "index_value"
    assert "index [2]" in info.value.detail


# ------------------------- cut ------------------------- #

@pytest.mark.parametrize(
    "a, left, right",
    [
        ([1, 2], [1], [2]),
        ([1, 2, 3], [1], [2, 3]),
        ([1, 2, 3, 4], [1, 2], [3, 4]),
        (["a", "b", "c", "d", "e"], ["a", "b"], ["c", "d", "e"]),
    ],
)
def test_cut_cases(a: List[Any], left: List[Any], right: List[Any]) -> None:
    assert cut(a) == (left, right)


@pytest.mark.parametrize("a", [None, [], [1]])
def test_cut_rejects_short(a: Any) -> None:
    with pytest.raises(ContractViolation):
        cut(a)


def test_cut_returns_copies() -> None:
    a = [3, 1, 2, 0]
    left, right = cut(a)
    left[0] = 99
    right[0] = 99
    assert a == [3, 1, 2, 0]


# ------------------------- reverse_array ------------------------- #

def test_reverse_array_scenario() -> None:
    a = [5, 4, 3, 2, 1]
    out = reverse_array(a)
    assert out == [1, 2, 3, 4, 5]
    assert a == [5, 4, 3, 2, 1]
    assert out is not a


def test_reverse_array_empty() -> None:
    assert reverse_array([]) == []


def test_reverse_array_accepts_any_sequence() -> None:
    out = reverse_array(("a", "b", "c"))
    assert out == ["c", "b", "a"]
    assert isinstance(out, list)


def test_reverse_array_logs_before_after(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="sortutils.arrays.ops"):
        reverse_array([1, 2, 3])
    assert "Input array: <1,2,3> ==> Reversed array: <3,2,1>" in caplog.text


# ------------------------- conversions ------------------------- #

def test_to_int_array() -> None:
    source: List[Any] = [3, 1, 2]
    out = to_int_array(source)
    assert out == [3, 1, 2]
    assert out is not source


def test_to_str_array() -> None:
    assert to_str_array(["b", "a"]) == ["b", "a"]
    assert to_str_array([]) == []


def test_conversions_reject_other_kinds() -> None:
    with pytest.raises(ContractViolation, match=r"index \[1\] is not integer"):
        to_int_array([1, "2"])
    with pytest.raises(ContractViolation, match=r"index \[0\] is not text"):
        to_str_array([1])
    with pytest.raises(ContractViolation):
        to_int_array(None)  # type: ignore[arg-type]


# ------------------------- render / label ------------------------- #

@pytest.mark.parametrize(
    "a, expected",
    [
        (None, "<>"),
        ([], "<>"),
        ([1, 2, 3], "<1,2,3>"),
        (["a", "b"], "<a,b>"),
        (["", ""], "<,>"),
        ([-1], "<-1>"),
        ((1.5, None), "<1.5,None>"),
    ],
)
def test_render(a: Any, expected: str) -> None:
    assert render(a) == expected


def test_label() -> None:
    assert label("size", 5) == "size=5"
    assert label("size", 5, template="{}: {}") == "size: 5"


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@settings(deadline=None, max_examples=100)
@given(st.lists(small_ints, min_size=1, max_size=50), st.data())
def test_property_swap_exchanges(a: List[int], data: st.DataObject) -> None:
    i = data.draw(st.integers(min_value=0, max_value=len(a) - 1))
    j = data.draw(st.integers(min_value=0, max_value=len(a) - 1))
    before = list(a)
    swap(a, i, j)
    assert len(a) == len(before)
    assert a[j] == before[i]
    assert a[i] == before[j]
    for k in range(len(a)):
        if k not in (i, j):
            assert a[k] == before[k]


@settings(deadline=None, max_examples=100)
@given(st.lists(small_ints, min_size=2, max_size=80))
def test_property_cut_reassembles(a: List[int]) -> None:
    left, right = cut(a)
    assert left + right == a
    assert len(left) == len(a) // 2


@settings(deadline=None, max_examples=100)
@given(st.lists(st.one_of(small_ints, st.text(max_size=4)), min_size=0, max_size=60))
def test_property_reverse_involution(a: List[Any]) -> None:
    assert reverse_array(reverse_array(a)) == a

