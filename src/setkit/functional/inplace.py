"""Mutating set operations and boolean queries.

The ``perform_*`` functions are the in-place counterparts of
:func:`~setkit.functional.set_ops.select`, :func:`~setkit.functional.set_ops.reject`
and :func:`~setkit.functional.set_ops.map`. They only accept mutable sets, run
the block over every element first and only then modify the set, so a block
that raises leaves the set exactly as it was.
"""

import typing as tp
from collections.abc import MutableSet

from setkit.core.types import Predicate, T, Transform
from setkit.functional.utils import as_set, require_callable
from setkit.logger.logger import get_operation_logger

__all__ = [
    "perform_select",
    "perform_reject",
    "perform_map",
    "any_match",
    "all_match",
    "none_match",
]


def _as_mutable(target: tp.Any, operation: str) -> tp.MutableSet:
    if not isinstance(target, MutableSet):
        raise TypeError(
            f"{operation}() expects a mutable set, got '{type(target).__name__}'"
        )
    return target


def _discard_where(
    target: tp.MutableSet, predicate: Predicate, keep: bool, operation: str
) -> None:
    doomed = [element for element in target if bool(predicate(element)) is not keep]
    for element in doomed:
        target.discard(element)
    get_operation_logger(operation).debug(f"removed {len(doomed)} elements")


def perform_select(target: tp.MutableSet[T], predicate: Predicate) -> None:
    """Remove from ``target`` every element that fails ``predicate``.

    Args:
        target: Mutable set modified in place.
        predicate: Single-argument callable; truthy keeps the element.

    Raises:
        TypeError: If ``target`` is not a mutable set or ``predicate`` is not
            callable.
    """
    target = _as_mutable(target, "perform_select")
    require_callable(predicate, "predicate", "perform_select")
    _discard_where(target, predicate, keep=True, operation="perform_select")


def perform_reject(target: tp.MutableSet[T], predicate: Predicate) -> None:
    """Remove from ``target`` every element that satisfies ``predicate``."""
    target = _as_mutable(target, "perform_reject")
    require_callable(predicate, "predicate", "perform_reject")
    _discard_where(target, predicate, keep=False, operation="perform_reject")


def perform_map(target: tp.MutableSet[T], transform: Transform) -> None:
    """Replace the contents of ``target`` with ``transform`` of each element.

    Equal results collapse, so ``target`` may shrink.

    Args:
        target: Mutable set modified in place.
        transform: Single-argument callable returning a hashable value.

    Raises:
        TypeError: If ``target`` is not a mutable set, ``transform`` is not
            callable, or ``transform`` returns an unhashable value. ``target``
            is unchanged in every case.
    """
    target = _as_mutable(target, "perform_map")
    require_callable(transform, "transform", "perform_map")
    produced = [transform(element) for element in target]
    # Unhashable results must fail here, while target is still intact
    rebuilt = set(produced)
    target.clear()
    for value in rebuilt:
        target.add(value)
    get_operation_logger("perform_map").debug(
        f"{len(produced)} values, {len(rebuilt)} distinct"
    )


def any_match(source: tp.AbstractSet[T], predicate: Predicate) -> bool:
    """Return True if at least one element of ``source`` satisfies ``predicate``."""
    elements = as_set(source, "any_match")
    require_callable(predicate, "predicate", "any_match")
    return any(predicate(element) for element in elements)


def all_match(source: tp.AbstractSet[T], predicate: Predicate) -> bool:
    """Return True if every element satisfies ``predicate`` (True when empty)."""
    elements = as_set(source, "all_match")
    require_callable(predicate, "predicate", "all_match")
    return all(predicate(element) for element in elements)


def none_match(source: tp.AbstractSet[T], predicate: Predicate) -> bool:
    """Return True if no element of ``source`` satisfies ``predicate``."""
    elements = as_set(source, "none_match")
    require_callable(predicate, "predicate", "none_match")
    return not any(predicate(element) for element in elements)
