"""
sortutils: comparison, sortedness and array primitives for teaching sorts.

    from sortutils import compare, is_sorted, swap, cut, render
"""

from sortutils.arrays import (
    cut,
    default_rng,
    empty_array,
    generate_array,
    label,
    render,
    reverse_array,
    swap,
    to_int_array,
    to_str_array,
)
from sortutils.contracts import (
    assert_identical,
    assert_in_bounds,
    assert_index_value,
    assert_non_negative,
    assert_non_null,
    assert_not_empty,
    assert_sorted,
)
from sortutils.errors import ContractViolation, SortUtilsError, UnsupportedComparison
from sortutils.ordering import ElementKind, compare, element_kind, is_sorted

__version__ = "0.1.0"

__all__ = [
    "ElementKind",
    "element_kind",
    "compare",
    "is_sorted",
    "swap",
    "cut",
    "reverse_array",
    "to_int_array",
    "to_str_array",
    "generate_array",
    "empty_array",
    "default_rng",
    "render",
    "label",
    "assert_non_null",
    "assert_not_empty",
    "assert_in_bounds",
    "assert_index_value",
    "assert_identical",
    "assert_sorted",
    "assert_non_negative",
    "SortUtilsError",
    "ContractViolation",
    "UnsupportedComparison",
]
