"""Input checks and result construction shared by the set operations."""

import typing as tp
from collections.abc import Iterable, Set

from setkit.core.config import settings
from setkit.logger.logger import get_operation_logger

__all__ = [
    "as_set",
    "require_callable",
    "rebuild",
]


def as_set(source: tp.Any, operation: str) -> tp.AbstractSet:
    """Return ``source`` as a set, enforcing ``settings.STRICT_SETS``.

    Args:
        source: The collection handed to a public operation.
        operation: Name of the calling operation, used in error messages.

    Returns:
        ``source`` itself when it already is a set, otherwise a ``frozenset``
        of its elements (lenient mode only).

    Raises:
        TypeError: If ``source`` is not a set and strict mode is on, or if it
            cannot be turned into one.
    """
    if isinstance(source, Set):
        return source

    kind = type(source).__name__
    if settings.STRICT_SETS:
        raise TypeError(f"{operation}() expects a set, got '{kind}'")
    if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        raise TypeError(f"{operation}() cannot treat '{kind}' as a set")

    coerced = frozenset(source)
    get_operation_logger(operation).debug(
        f"coerced {kind} to frozenset of {len(coerced)}"
    )
    return coerced


def require_callable(fn: tp.Any, role: str, operation: str) -> None:
    if not callable(fn):
        raise TypeError(
            f"{operation}() {role} must be callable, got '{type(fn).__name__}'"
        )


def rebuild(source: tp.AbstractSet, elements: tp.Iterable) -> tp.AbstractSet:
    """Build a new set of the same kind as ``source`` from ``elements``.

    Builtin sets use their own type. Other ``collections.abc.Set``
    implementations go through their ``_from_iterable`` hook, which is how the
    ABC itself builds results for ``|``, ``&`` and ``-``. Anything else falls
    back to ``frozenset``.

    Raises:
        TypeError: If an element is unhashable for the target container. This
            includes ``dict.items()`` views holding unhashable values, since
            ``ItemsView._from_iterable`` stores the ``(key, value)`` pairs in
            a plain ``set``.
    """
    if isinstance(source, (set, frozenset)):
        return type(source)(elements)
    builder = getattr(type(source), "_from_iterable", None)
    if builder is None:
        return frozenset(elements)
    return builder(elements)
