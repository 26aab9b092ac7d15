# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator
import random

import pytest

from listdiff import (
    diff, diff_sync, patch, op_insert, op_delete,
    FunctionComparison, KeyComparison, ListDiffUsageError,
)

from .utils import (
    run, check_diff_and_patch, check_symmetric_diff_and_patch,
    check_async_diff_and_patch,
)


def test_diff_fruits(fruits):
    old, new = fruits
    expected = [
        op_insert(0, 'kiwi'),
        op_insert(2, 'maracuja'),
        op_insert(4, 'banana'),
        op_delete(5, 'peanut'),
    ]
    assert run(diff(old, new)) == expected
    assert diff_sync(old, new) == expected
    assert patch(old, expected) == new


def test_diff_empty_old_list():
    assert run(diff([], ['a', 'b'])) == [op_insert(0, 'a'), op_insert(1, 'b')]


def test_diff_empty_new_list():
    assert run(diff(['a', 'b'], [])) == [op_delete(0, 'a'), op_delete(0, 'b')]


def test_diff_empty_lists():
    assert run(diff([], [])) == []
    assert diff_sync([], []) == []


def test_diff_equal_lists_is_empty():
    for a in ([], [1], list("abcabc"), [{'a': 1}, [1, 2]]):
        assert run(diff(a, list(a))) == []
        assert diff_sync(a, list(a)) == []


def test_diff_does_not_modify_inputs(fruits):
    old, new = fruits
    old_copy, new_copy = list(old), list(new)
    diff_sync(old, new)
    run(diff(old, new))
    assert old == old_copy
    assert new == new_copy


def test_diff_sequence_combinations():
    a = """\
    def f(a, b):
        c = a * b
        return c

    def g(x):
        y = x**2
        return y
    """.splitlines()

    b = []
    check_symmetric_diff_and_patch(a, b)

    for i in range(len(a)+1):
        for j in range(i, len(a)+1):
            for k in range(len(a)+1):
                for l in range(k, len(a)+1):
                    b = a[i:j] + a[k:l]
                    check_diff_and_patch(a, b)


def test_diff_random_lists():
    rng = random.Random(1234)
    for _ in range(200):
        a = [rng.randint(0, 5) for _ in range(rng.randint(0, 12))]
        b = [rng.randint(0, 5) for _ in range(rng.randint(0, 12))]
        check_symmetric_diff_and_patch(a, b)
        check_async_diff_and_patch(a, b, spawn_worker=False)


def test_trimming_only_shifts_indices():
    rng = random.Random(42)
    for _ in range(50):
        a = [rng.randint(0, 4) for _ in range(rng.randint(0, 8))]
        b = [rng.randint(0, 4) for _ in range(rng.randint(0, 8))]
        # Sentinels that can't be matched by anything in a or b
        prefix = ['p%d' % i for i in range(rng.randint(1, 4))]
        suffix = ['s%d' % i for i in range(rng.randint(1, 4))]

        plain = diff_sync(a, b)
        padded = diff_sync(prefix + a + suffix, prefix + b + suffix)
        assert padded == [
            dict(e, index=e.index + len(prefix)) for e in plain
        ]


def test_diff_with_functions():
    old = ['Apple', 'banana', 'Cherry']
    new = ['apple', 'cherry', 'date']

    def are_equal(a, b):
        return a.lower() == b.lower()

    def get_hash_code(item):
        return hash(item.lower())

    d = run(diff(old, new, are_equal=are_equal, get_hash_code=get_hash_code))
    assert d == [op_delete(1, 'banana'), op_insert(2, 'date')]
    assert diff_sync(old, new, are_equal=are_equal) == d


def test_diff_with_comparison():
    old = [{'id': 1, 'v': 'a'}, {'id': 2, 'v': 'b'}]
    new = [{'id': 2, 'v': 'changed'}, {'id': 3, 'v': 'c'}]
    d = run(diff(old, new, comparison=KeyComparison(operator.itemgetter('id'))))
    assert d == [
        op_delete(0, {'id': 1, 'v': 'a'}),
        op_insert(1, {'id': 3, 'v': 'c'}),
    ]


def test_diff_unhashable_items():
    old = [[1], {'a': 1}, [2]]
    new = [{'a': 1}, [3], [2]]
    d = check_async_diff_and_patch(old, new)
    assert d == [op_delete(0, [1]), op_insert(1, [3])]


class Untouchable(object):
    "A sequence that fails the test when it is used in any way."

    def __len__(self):
        raise AssertionError("list was touched")

    def __getitem__(self, index):
        raise AssertionError("list was touched")

    def __iter__(self):
        raise AssertionError("list was touched")


def test_diff_requires_both_functions():
    with pytest.raises(ListDiffUsageError):
        diff(Untouchable(), Untouchable(), are_equal=operator.__eq__)
    with pytest.raises(ListDiffUsageError):
        diff(Untouchable(), Untouchable(), get_hash_code=hash)


def test_diff_rejects_comparison_with_functions():
    with pytest.raises(ListDiffUsageError):
        diff(Untouchable(), Untouchable(), comparison=FunctionComparison(operator.__eq__, hash),
             are_equal=operator.__eq__, get_hash_code=hash)


def test_diff_sync_rejects_non_callable():
    with pytest.raises(ListDiffUsageError):
        diff_sync(Untouchable(), Untouchable(), are_equal="==")


def test_diff_sync_propagates_compare_errors():
    def are_equal(a, b):
        raise KeyError("boom")

    with pytest.raises(KeyError):
        diff_sync([1], [2], are_equal=are_equal)


def test_diff_matches_hashable_and_unhashable_equal_items():
    # frozenset({1}) == {1}, but only the frozenset can be hashed
    old = ['a', frozenset({1}), 'x']
    new = ['b', {1}, 'y']
    expected = diff_sync(old, new)
    assert len(expected) == 4
    assert run(diff(old, new, spawn_worker=False)) == expected
    assert run(diff(old, new, spawn_worker=True)) == expected
