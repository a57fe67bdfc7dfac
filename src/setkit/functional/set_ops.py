"""Block-style operations over unordered sets.

This module provides the six higher-order operations setkit is built around:
iteration (:func:`each`), search (:func:`match`), partition (:func:`select`
and :func:`reject`), transformation (:func:`map`) and accumulation
(:func:`reduce`). Each takes a set as its first argument and a plain Python
callable as its block.

Semantics:
    - **Order**: sets are unordered, so blocks are called in whatever order
      the container iterates. ``select``, ``reject`` and ``map`` produce the
      same set for any traversal order; ``reduce`` does too as long as the
      reducer is associative and commutative.
    - **No mutation**: ``select``, ``reject`` and ``map`` always build a new
      set of the same kind as the input (``set`` in, ``set`` out;
      ``frozenset`` in, ``frozenset`` out). The input is only read.
    - **Collapsing map**: results of ``map`` are stored in a set, so a
      transform that sends two elements to equal values yields one element.
      ``map({"a", "b", "cc"}, len) == {1, 2}``. Multiplicity is not kept.
    - **Not found**: ``match`` returns :data:`setkit.core.enums.NOT_FOUND`
      when nothing matches, never ``None``, so a matching ``None`` element is
      still distinguishable.
    - **Errors**: exceptions raised by a block propagate unchanged and stop
      the operation at once. No partial result is ever returned.

Examples:
    >>> from setkit.functional.set_ops import select, map, reduce
    >>> select({1, 2, 3, 4}, lambda x: x % 2 == 0)
    {2, 4}
    >>> map(frozenset({"a", "bb", "ccc"}), len)
    frozenset({1, 2, 3})
    >>> reduce({1, 2, 3}, 0, lambda acc, x: acc + x)
    6

See Also:
    - :mod:`setkit.functional.inplace`: Mutating variants and boolean queries.
    - :mod:`setkit.data.blockset`: Chainable method-style wrapper.
"""

import typing as tp
from functools import reduce as _fold

from setkit.core.enums import Missing
from setkit.core.types import Acc, Predicate, Procedure, Reducer, T, T2, Transform
from setkit.functional.utils import as_set, rebuild, require_callable
from setkit.logger.logger import get_operation_logger

__all__ = [
    "each",
    "match",
    "select",
    "reject",
    "map",
    "reduce",
]

_D = tp.TypeVar("_D")


# =============================================================================
# Operations
# =============================================================================


def each(source: tp.AbstractSet[T], block: Procedure) -> None:
    """Call ``block`` once with every element of ``source``.

    Args:
        source: The set to walk.
        block: Single-argument callable run for its side effects. Its return
            value is ignored.

    Raises:
        TypeError: If ``source`` is not a set or ``block`` is not callable.

    Note:
        If ``block`` raises, iteration stops and the exception propagates;
        elements not yet visited are skipped.
    """
    elements = as_set(source, "each")
    require_callable(block, "block", "each")
    for element in elements:
        block(element)


def match(
    source: tp.AbstractSet[T],
    predicate: Predicate,
    *,
    default: tp.Union[_D, Missing] = Missing.NOT_FOUND,
) -> tp.Union[T, _D, Missing]:
    """Return an element of ``source`` satisfying ``predicate``.

    Iteration stops at the first hit. When several elements match, which one
    is returned depends on the container's iteration order and is not part of
    the contract.

    Args:
        source: The set to search.
        predicate: Single-argument callable returning a truthy value for a hit.
        default: Value returned when nothing matches. Defaults to
            :data:`Missing.NOT_FOUND`.

    Returns:
        A matching element, or ``default`` if the set is empty or no element
        matches.

    Raises:
        TypeError: If ``source`` is not a set or ``predicate`` is not callable.

    Example:
        >>> match({1, 2, 3}, lambda x: x == 2)
        2
        >>> match({1, 2, 3}, lambda x: x > 5)
        Missing.NOT_FOUND
    """
    elements = as_set(source, "match")
    require_callable(predicate, "predicate", "match")
    for element in elements:
        if predicate(element):
            return element
    return default


def _partition(
    elements: tp.AbstractSet[T], predicate: Predicate, keep: bool, operation: str
) -> tp.AbstractSet[T]:
    kept = [element for element in elements if bool(predicate(element)) is keep]
    get_operation_logger(operation).debug(
        f"kept {len(kept)} of {len(elements)} elements"
    )
    return rebuild(elements, kept)


def select(source: tp.AbstractSet[T], predicate: Predicate) -> tp.AbstractSet[T]:
    """Return a new set of the elements of ``source`` satisfying ``predicate``.

    Args:
        source: The set to filter. It is not modified.
        predicate: Single-argument callable; truthy keeps the element.

    Returns:
        A new set of the same kind as ``source``. Empty when nothing matches.

    Raises:
        TypeError: If ``source`` is not a set or ``predicate`` is not callable,
            or if the kept elements cannot be stored in a new container of
            the same kind (``dict.items()`` views with unhashable values).
    """
    elements = as_set(source, "select")
    require_callable(predicate, "predicate", "select")
    return _partition(elements, predicate, keep=True, operation="select")


def reject(source: tp.AbstractSet[T], predicate: Predicate) -> tp.AbstractSet[T]:
    """Return a new set of the elements of ``source`` failing ``predicate``.

    Exactly ``select(source, lambda x: not predicate(x))``; together the two
    partition ``source``.

    This is handy for dropping elements::

        idle = reject(connections, lambda conn: conn.busy)

    Args:
        source: The set to filter. It is not modified.
        predicate: Single-argument callable; truthy drops the element.

    Returns:
        A new set of the same kind as ``source``. Empty when every element
        matches.

    Raises:
        TypeError: If ``source`` is not a set or ``predicate`` is not callable,
            or on the same unhashable ``dict.items()`` values as :func:`select`.
    """
    elements = as_set(source, "reject")
    require_callable(predicate, "predicate", "reject")
    return _partition(elements, predicate, keep=False, operation="reject")


def map(source: tp.AbstractSet[T], transform: Transform) -> tp.AbstractSet[T2]:
    """Return a new set of ``transform`` applied to every element of ``source``.

    The result is a set: when ``transform`` maps different elements to equal
    values they collapse into one, so the result can be smaller than
    ``source``. This is intended; counts are not preserved.

    Args:
        source: The set to transform. It is not modified.
        transform: Single-argument callable returning a hashable value.

    Returns:
        A new set of the same kind as ``source`` holding the transformed
        values.

    Raises:
        TypeError: If ``source`` is not a set, ``transform`` is not callable,
            or ``transform`` returns an unhashable value.

    Example:
        >>> map({"a", "b", "cc"}, len)
        {1, 2}
    """
    elements = as_set(source, "map")
    require_callable(transform, "transform", "map")
    produced = [transform(element) for element in elements]
    result = rebuild(elements, produced)
    if len(result) < len(produced):
        get_operation_logger("map").debug(
            f"{len(produced)} values collapsed to {len(result)} distinct elements"
        )
    return result


def reduce(source: tp.AbstractSet[T], initial: Acc, reducer: Reducer) -> Acc:
    """Fold ``reducer`` over the elements of ``source`` starting from ``initial``.

    The accumulator can be any value, including ``None`` to mean "nothing
    seen yet". For the result to be independent of iteration order the
    reducer must be associative and commutative; this is not checked.

    Args:
        source: The set to fold.
        initial: Starting accumulator, returned unchanged for an empty set.
        reducer: Two-argument callable ``(accumulator, element)`` returning
            the next accumulator.

    Returns:
        The final accumulator.

    Raises:
        TypeError: If ``source`` is not a set or ``reducer`` is not callable.

    Example:
        >>> reduce({1, 2, 3}, 0, lambda acc, x: acc + x)
        6
        >>> reduce({"ab", "c"}, 0, lambda acc, s: acc + len(s))
        3
    """
    elements = as_set(source, "reduce")
    require_callable(reducer, "reducer", "reduce")
    return _fold(reducer, elements, initial)
