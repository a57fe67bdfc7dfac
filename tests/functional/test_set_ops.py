import random
from collections.abc import Set

import pytest

from setkit.core.config import settings
from setkit.core.enums import Missing, NOT_FOUND
from setkit.functional.set_ops import each, match, select, reject, map, reduce


class ShuffledSet(Set):
    """Set whose iteration order is a seeded shuffle of its elements."""

    def __init__(self, items=(), seed=0):
        self._items = list(dict.fromkeys(items))
        random.Random(seed).shuffle(self._items)
        self.seed = seed

    @classmethod
    def _from_iterable(cls, it):
        return cls(it)

    def __contains__(self, item):
        return item in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)


SEEDS = [0, 1, 7, 42, 1234]


@pytest.fixture
def numbers():
    return set(range(1, 21))


@pytest.fixture
def lenient(monkeypatch):
    monkeypatch.setattr(settings, "STRICT_SETS", False)


def is_even(x):
    return x % 2 == 0


# --- each ---
def test_each_empty_set_makes_no_calls():
    calls = []
    each(set(), calls.append)
    assert calls == []


def test_each_visits_every_element_once():
    calls = []
    result = each({"a", "b", "c"}, calls.append)
    assert result is None
    assert len(calls) == 3
    assert sorted(calls) == ["a", "b", "c"]


def test_each_stops_on_first_error():
    calls = []

    def block(x):
        calls.append(x)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        each({1, 2, 3}, block)
    assert len(calls) == 1


# --- match ---
def test_match_found():
    assert match({1, 2, 3}, lambda x: x == 2) == 2


def test_match_not_found_returns_sentinel():
    assert match({1, 2, 3}, lambda x: x > 5) is NOT_FOUND


def test_match_empty_set_never_calls_predicate():
    def predicate(x):
        raise AssertionError("predicate should not run")

    assert match(frozenset(), predicate) is Missing.NOT_FOUND


def test_match_none_element_is_distinct_from_not_found():
    assert match({None, 1}, lambda x: x is None) is None


def test_match_with_default():
    assert match({1, 2}, lambda x: x > 5, default=0) == 0


def test_match_returns_one_of_several_hits(numbers):
    found = match(numbers, is_even)
    assert found in numbers
    assert is_even(found)


def test_match_stops_at_first_hit():
    calls = []

    def predicate(x):
        calls.append(x)
        return True

    match({1, 2, 3}, predicate)
    assert len(calls) == 1


# --- select / reject ---
@pytest.mark.parametrize("seed", SEEDS)
def test_select_and_reject_partition(seed):
    source = ShuffledSet(range(50), seed=seed)
    kept = select(source, is_even)
    dropped = reject(source, is_even)
    assert kept | dropped == source
    assert not (kept & dropped)
    assert kept == set(range(0, 50, 2))


@pytest.mark.parametrize("seed", SEEDS)
def test_select_is_order_independent(seed):
    source = ShuffledSet(range(30), seed=seed)
    assert select(source, lambda x: x % 3 == 0) == {0, 3, 6, 9, 12, 15, 18, 21, 24, 27}


def test_select_always_true_and_always_false(numbers):
    assert select(numbers, lambda x: True) == numbers
    assert select(numbers, lambda x: False) == set()


def test_select_no_match_returns_empty_set_not_sentinel():
    result = select({1, 2, 3}, lambda x: x > 10)
    assert result == set()
    assert isinstance(result, set)


def test_select_does_not_mutate_input(numbers):
    before = set(numbers)
    result = select(numbers, is_even)
    assert numbers == before
    assert result is not numbers


def test_select_preserves_container_kind():
    assert type(select({1, 2}, is_even)) is set
    assert type(select(frozenset({1, 2}), is_even)) is frozenset
    assert isinstance(select(ShuffledSet([1, 2, 4]), is_even), ShuffledSet)


def test_select_on_dict_keys_view_returns_set():
    result = select({"a": 1, "bb": 2}.keys(), lambda k: len(k) > 1)
    assert result == {"bb"}
    assert type(result) is set


@pytest.mark.parametrize("seed", SEEDS)
def test_reject_matches_negated_select(seed):
    source = ShuffledSet(range(40), seed=seed)
    assert reject(source, is_even) == select(source, lambda x: not is_even(x))


def test_reject_all_elements_returns_empty_set():
    assert reject({1, 2, 3}, lambda x: True) == set()


# --- map ---
def test_map_injective_keeps_size(numbers):
    assert len(map(numbers, lambda x: x * 10)) == len(numbers)


def test_map_constant_collapses_to_single_element(numbers):
    assert map(numbers, lambda x: "c") == {"c"}


def test_map_string_lengths():
    assert map({"a", "bb", "ccc"}, len) == {1, 2, 3}


def test_map_string_lengths_collapse_duplicates():
    assert map({"a", "b", "cc"}, len) == {1, 2}


def test_map_empty_set():
    assert map(frozenset(), len) == frozenset()


def test_map_may_change_element_type():
    result = map(frozenset({1, 2}), str)
    assert result == frozenset({"1", "2"})
    assert type(result) is frozenset


@pytest.mark.parametrize("seed", SEEDS)
def test_map_is_order_independent(seed):
    source = ShuffledSet(range(-5, 6), seed=seed)
    assert map(source, abs) == {0, 1, 2, 3, 4, 5}


def test_map_unhashable_result_raises_type_error():
    with pytest.raises(TypeError):
        map({1, 2}, lambda x: [x])


# --- reduce ---
def test_reduce_empty_returns_initial_without_calling_reducer():
    initial = object()

    def reducer(acc, x):
        raise AssertionError("reducer should not run")

    assert reduce(set(), initial, reducer) is initial


@pytest.mark.parametrize("seed", SEEDS)
def test_reduce_sum_is_order_independent(seed):
    assert reduce(ShuffledSet([1, 2, 3], seed=seed), 0, lambda acc, x: acc + x) == 6


def test_reduce_with_none_initial():
    total = reduce({"ab", "c"}, None, lambda acc, s: (acc or 0) + len(s))
    assert total == 3


def test_reduce_to_other_type():
    assert reduce({3, 1, 2}, frozenset(), lambda acc, x: acc | {x * 2}) == {2, 4, 6}


# --- errors ---
@pytest.mark.parametrize(
    "call",
    [
        lambda fn: select({1, 2, 3}, fn),
        lambda fn: reject({1, 2, 3}, fn),
        lambda fn: map({1, 2, 3}, fn),
        lambda fn: match({1, 2, 3}, fn),
        lambda fn: each({1, 2, 3}, fn),
        lambda fn: reduce({1, 2, 3}, 0, lambda acc, x: fn(x)),
    ],
)
def test_callable_errors_propagate_unchanged(call):
    error = ValueError("bad element")

    def fn(x):
        raise error

    with pytest.raises(ValueError) as excinfo:
        call(fn)
    assert excinfo.value is error


def test_strict_mode_rejects_list():
    with pytest.raises(TypeError, match="select\\(\\) expects a set, got 'list'"):
        select([1, 2, 3], is_even)


def test_strict_mode_reject_names_itself():
    with pytest.raises(TypeError, match="reject\\(\\) expects a set"):
        reject((1, 2), is_even)


def test_non_callable_block_raises():
    with pytest.raises(TypeError, match="predicate must be callable"):
        select({1, 2}, None)
    with pytest.raises(TypeError, match="reducer must be callable"):
        reduce({1, 2}, 0, 5)


def test_lenient_mode_coerces_iterables(lenient):
    result = select([1, 2, 2, 4], is_even)
    assert result == {2, 4}
    assert type(result) is frozenset
    assert map((1, 1, 1), str) == frozenset({"1"})


def test_lenient_mode_still_rejects_strings(lenient):
    with pytest.raises(TypeError, match="cannot treat 'str' as a set"):
        map("abc", str.upper)


def test_lenient_mode_rejects_non_iterables(lenient):
    with pytest.raises(TypeError, match="cannot treat 'int' as a set"):
        reduce(5, 0, lambda acc, x: acc)


def test_items_view_with_unhashable_values_raises():
    scores = {"a": [1], "b": [2]}
    with pytest.raises(TypeError, match="unhashable"):
        select(scores.items(), lambda _: True)


def test_items_view_with_hashable_values_returns_set():
    result = select({"a": 1, "b": 2}.items(), lambda item: item[1] > 1)
    assert result == {("b", 2)}
    assert type(result) is set
