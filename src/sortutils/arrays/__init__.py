"""
Array utilities public API.

Re-export the array helpers so callers can write:
    from sortutils.arrays import swap, cut, generate_array, render
"""

from .generators import default_rng, empty_array, generate_array
from .ops import cut, reverse_array, swap, to_int_array, to_str_array
from .render import label, render

__all__ = [
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
]
