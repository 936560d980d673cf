"""
Array generators.

Currently implemented:
- generate_array(size):
    Integer array of `size` elements, each drawn uniformly from [0, size).
    The value range is tied to the array length.

- empty_array(size):
    Text array of `size` empty strings, used as a scratch buffer.

Public API (stable):
    generate_array(size: int, rng: numpy.random.Generator | None = None) -> list[int]
    empty_array(size: int) -> list[str]
    default_rng() -> numpy.random.Generator

Conventions:
- `size` must be a nonnegative int; anything else is a ContractViolation.
- Returns Python lists (callers stay NumPy-agnostic).
- The caller may supply the RNG (seeded upstream, for reproducibility). When it
  does not, a process-wide generator is created lazily on first use and shared
  by every call; draws from it are serialized by a lock because
  numpy.random.Generator is not safe for unsynchronized concurrent use.
"""

from __future__ import annotations

import threading
from typing import List, Optional

import numpy as np

from sortutils.contracts import assert_non_negative

__all__ = ["generate_array", "empty_array", "default_rng"]

_DEFAULT_RNG: Optional[np.random.Generator] = None
_DEFAULT_RNG_LOCK = threading.Lock()


def default_rng() -> np.random.Generator:
    """Return the shared process-wide generator, creating it on first use."""
    global _DEFAULT_RNG
    with _DEFAULT_RNG_LOCK:
        if _DEFAULT_RNG is None:
            _DEFAULT_RNG = np.random.default_rng()
        return _DEFAULT_RNG


def generate_array(size: int, rng: Optional[np.random.Generator] = None) -> List[int]:
    """
    Make an array of `size` random integers in [0, size).

    Parameters
    ----------
    size : int
        Number of elements to generate. Must be >= 0.
    rng : numpy.random.Generator, optional
        Random number generator owned by the caller. Defaults to the shared
        generator returned by `default_rng()`.

    Returns
    -------
    list[int]
        A list of length `size`.
    """
    assert_non_negative(size, "size")
    n = int(size)
    if n == 0:
        return []
    if rng is not None:
        return _draw(rng, n)
    shared = default_rng()
    with _DEFAULT_RNG_LOCK:
        return _draw(shared, n)


def empty_array(size: int) -> List[str]:
    """Make an array of `size` blank strings."""
    assert_non_negative(size, "size")
    return [""] * int(size)


# ------------------------- helpers ------------------------- #


def _draw(rng: np.random.Generator, n: int) -> List[int]:
    # np.random.Generator.integers is half-open [low, high) by default.
    arr = rng.integers(0, n, size=n, dtype=np.int64)
    return arr.tolist()
