# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Comparison capabilities used to decide which items of two lists are equal.

A comparison bundles two operations, `equals` and `hash`, that must be
consistent: items that compare equal must hash equally. The hash is only
used to rule out comparisons early, never to declare items equal. A hash
of None means the item has no usable hash and is compared with everything.

Comparisons that are handed to a worker process are pickled, so they
should be instances of module level classes holding only picklable
state (no lambdas, no closures over live objects).
"""

from ..log import ListDiffUsageError

__all__ = [
    "ItemComparison", "FunctionComparison", "KeyComparison",
    "default_comparison", "resolve_comparison",
]


class ItemComparison(object):
    """Compare items with == and hash them with the builtin hash.

    Items that can't be hashed (lists, dicts, ...) get None as hash,
    which leaves the decision to `equals`.
    """

    def equals(self, a, b):
        return a == b

    def hash(self, item):
        try:
            return hash(item)
        except TypeError:
            return None

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return "{}()".format(type(self).__name__)


class FunctionComparison(ItemComparison):
    "Comparison built from an equality function and a hash function."

    def __init__(self, are_equal, get_hash_code):
        self.are_equal = are_equal
        self.get_hash_code = get_hash_code

    def equals(self, a, b):
        return self.are_equal(a, b)

    def hash(self, item):
        return self.get_hash_code(item)

    def __hash__(self):
        return hash((self.are_equal, self.get_hash_code))

    def __repr__(self):
        return "FunctionComparison({!r}, {!r})".format(
            self.are_equal, self.get_hash_code)


class KeyComparison(ItemComparison):
    """Items are equal when their keys are equal.

    E.g. ``KeyComparison(operator.itemgetter('id'))`` treats two dicts
    with the same id as the same item.
    """

    def __init__(self, key):
        self.key = key

    def equals(self, a, b):
        return self.key(a) == self.key(b)

    def hash(self, item):
        return super(KeyComparison, self).hash(self.key(item))

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return "KeyComparison({!r})".format(self.key)


default_comparison = ItemComparison()


def resolve_comparison(comparison=None, are_equal=None, get_hash_code=None):
    """Return the comparison to use for a diff call.

    Either a ready made `comparison`, or both of `are_equal` and
    `get_hash_code`, or none of them may be given. Anything else raises
    ListDiffUsageError.
    """
    if (are_equal is None) != (get_hash_code is None):
        raise ListDiffUsageError(
            "You have to either provide both an are_equal and a get_hash_code "
            "function or none at all, as items that are equal must also have "
            "equal hash codes.")
    if comparison is not None:
        if are_equal is not None:
            raise ListDiffUsageError(
                "Pass either a comparison or are_equal/get_hash_code, not both.")
        return comparison
    if are_equal is not None:
        return FunctionComparison(are_equal, get_hash_code)
    return default_comparison
