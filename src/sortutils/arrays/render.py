"""
Text rendering for arrays and labelled values.

Format:
    render([])          -> "<>"
    render(None)        -> "<>"
    render([1, 2, 3])   -> "<1,2,3>"
    render(["a", "b"])  -> "<a,b>"

Integers render in decimal, text verbatim (no quotes), anything else via str().
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

__all__ = ["render", "label", "LABEL_TEMPLATE"]

LABEL_TEMPLATE = "{}={}"


def render(array: Optional[Sequence[Any]]) -> str:
    if array is None or len(array) == 0:
        return "<>"
    return "<" + ",".join(str(v) for v in array) + ">"


def label(name: str, value: Any, template: str = LABEL_TEMPLATE) -> str:
    """Format `name` and `value` as a key/value pair, e.g. ``size=5``."""
    return template.format(name, value)
