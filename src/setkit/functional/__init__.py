"""Functional primitives for setkit.

This module provides block-based helpers over unordered sets. Utilities are
stateless and leave their input untouched (apart from the explicitly mutating
``perform_*`` functions) so they can be composed freely.
"""

from setkit.functional.set_ops import each, match, select, reject, map, reduce
from setkit.functional.inplace import (
    perform_select,
    perform_reject,
    perform_map,
    any_match,
    all_match,
    none_match,
)

__all__ = [
    "each",
    "match",
    "select",
    "reject",
    "map",
    "reduce",
    "perform_select",
    "perform_reject",
    "perform_map",
    "any_match",
    "all_match",
    "none_match",
]
