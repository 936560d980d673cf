"""
Contract checks public API.

Re-exports:
    - Assertions:
        assert_non_null
        assert_not_empty
        assert_in_bounds
        assert_index_value
        assert_identical
        assert_sorted
        assert_non_negative

    - Error:
        ContractViolation
"""

from sortutils.errors import ContractViolation

from .assertions import (
    assert_identical,
    assert_in_bounds,
    assert_index_value,
    assert_non_negative,
    assert_non_null,
    assert_not_empty,
    assert_sorted,
)

__all__ = [
    "ContractViolation",
    "assert_non_null",
    "assert_not_empty",
    "assert_in_bounds",
    "assert_index_value",
    "assert_identical",
    "assert_sorted",
    "assert_non_negative",
]
