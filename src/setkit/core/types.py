"""Reusable type definitions for setkit.

Type Aliases:
    Procedure: A single-argument callable run for its side effects.
    Predicate: A single-argument callable answering yes or no about an element.
    Transform: A single-argument callable producing a new element.
    Reducer: A two-argument callable folding an element into an accumulator.
"""

import typing as tp

__all__ = [
    "T",
    "T2",
    "Acc",
    "Procedure",
    "Predicate",
    "Transform",
    "Reducer",
]

T = tp.TypeVar("T", bound=tp.Hashable)
T2 = tp.TypeVar("T2", bound=tp.Hashable)
Acc = tp.TypeVar("Acc")

Procedure = tp.Callable[[T], None]
Predicate = tp.Callable[[T], bool]
Transform = tp.Callable[[T], T2]
Reducer = tp.Callable[[Acc, T], Acc]
