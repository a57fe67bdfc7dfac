"""Block-style iteration, search, partition, mapping and folding over sets."""

from setkit.core import Missing, NOT_FOUND, Settings, settings
from setkit.functional import (
    each,
    match,
    select,
    reject,
    map,
    reduce,
    perform_select,
    perform_reject,
    perform_map,
    any_match,
    all_match,
    none_match,
)
from setkit.data import BlockSet

__all__ = [
    "Missing",
    "NOT_FOUND",
    "Settings",
    "settings",
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
    "BlockSet",
]
