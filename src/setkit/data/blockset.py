"""Immutable set with the block operations available as methods."""

from __future__ import annotations

import typing as tp
from collections.abc import Set

from setkit.core.enums import Missing
from setkit.core.types import Acc, Predicate, Procedure, Reducer, T, Transform
from setkit.functional import inplace, set_ops

__all__ = ["BlockSet"]


class BlockSet(Set, tp.Generic[T]):
    """A frozen set whose block operations chain.

    ``select``, ``reject`` and ``map`` return new ``BlockSet`` instances, so a
    pipeline reads left to right::

        BlockSet(words).reject(str.isupper).map(len).reduce(0, max)

    Comparison and the ``|``, ``&``, ``-`` operators come from
    ``collections.abc.Set`` and work against builtin sets too.
    """

    __slots__ = ("_items",)

    def __init__(self, items: tp.Iterable[T] = ()):
        self._items = frozenset(items)

    @classmethod
    def _from_iterable(cls, it: tp.Iterable[T]) -> "BlockSet[T]":
        return cls(it)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> tp.Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        if not self._items:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({set(self._items)!r})"

    def to_frozenset(self) -> frozenset:
        return self._items

    # --- Block operations ---
    def each(self, block: Procedure) -> None:
        set_ops.each(self, block)

    def match(
        self, predicate: Predicate, *, default: tp.Any = Missing.NOT_FOUND
    ) -> tp.Any:
        return set_ops.match(self, predicate, default=default)

    def select(self, predicate: Predicate) -> "BlockSet[T]":
        return set_ops.select(self, predicate)

    def reject(self, predicate: Predicate) -> "BlockSet[T]":
        return set_ops.reject(self, predicate)

    def map(self, transform: Transform) -> "BlockSet":
        """Transform every element; equal results collapse into one."""
        return set_ops.map(self, transform)

    def reduce(self, initial: Acc, reducer: Reducer) -> Acc:
        return set_ops.reduce(self, initial, reducer)

    # --- Queries ---
    def any(self, predicate: Predicate) -> bool:
        return inplace.any_match(self, predicate)

    def all(self, predicate: Predicate) -> bool:
        return inplace.all_match(self, predicate)

    def none(self, predicate: Predicate) -> bool:
        return inplace.none_match(self, predicate)
