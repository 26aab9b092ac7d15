# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from .. import log
from ..diff_format import shift_ops
from ..log import ListDiffUsageError
from ..profiling import timer
from .comparing import resolve_comparison
from .offload import should_offload
from .seq_bruteforce import diff_sequence_bruteforce
from .trim import trim
from .worker import calculate_in_worker

__all__ = ["diff", "diff_sync"]


def diff(old, new, spawn_worker=None, are_equal=None, get_hash_code=None,
         comparison=None, start_method=None, offload_threshold=None):
    """Calculate a minimal list of operations converting `old` into `new`.

    Returns an awaitable resolving to a list of insertions and deletions::

        operations = await diff(
            ['coconut', 'nut', 'peanut'],
            ['kiwi', 'coconut', 'maracuja', 'nut', 'banana'],
        )
        # Insertion of 'kiwi' at 0.
        # Insertion of 'maracuja' at 2.
        # Insertion of 'banana' at 4.
        # Deletion of 'peanut' at 5.

    The operations must be applied in the given order, each index referring
    to the list as it is after all previous operations were applied.

    Items are compared with ``comparison`` (an ItemComparison), or with the
    pair of functions ``are_equal(a, b)`` and ``get_hash_code(item)``, or
    with ``==`` and ``hash`` if none are given. Passing only one of the two
    functions raises ListDiffUsageError right away.

    The calculation takes O(len(old) * len(new)) time and memory after
    common prefixes and suffixes are removed. For large inputs it is moved
    to a worker process, leaving the event loop free. Pass
    ``spawn_worker=True`` or ``False`` to force either mode, or move the
    size limit with ``offload_threshold`` (see should_offload). Things sent
    to the worker (items and comparison) must be picklable, and
    ``start_method`` picks how the worker process is started.

    See also:
    - diff_sync, to diff small lists without an event loop.
    """
    comparison = resolve_comparison(comparison, are_equal, get_hash_code)
    return _diff(old, new, spawn_worker, comparison, start_method, offload_threshold)


async def _diff(old, new, spawn_worker, comparison, start_method, offload_threshold):
    with timer.time('trim'):
        trimmed = trim(old, new, comparison.equals)
    log.debug("Trimmed %d common leading items, %d x %d items left",
              trimmed.start, len(trimmed.shortened_old), len(trimmed.shortened_new))

    if spawn_worker is None:
        spawn_worker = should_offload(
            len(trimmed.shortened_old), len(trimmed.shortened_new),
            threshold=offload_threshold)

    if spawn_worker:
        operations = await calculate_in_worker(
            trimmed.shortened_old, trimmed.shortened_new, comparison,
            start_method=start_method)
    else:
        with timer.time('calculate'):
            operations = diff_sequence_bruteforce(
                trimmed.shortened_old, trimmed.shortened_new,
                comparison.equals, comparison.hash)

    # Shift operations back past the trimmed prefix
    return shift_ops(operations, trimmed.start)


def diff_sync(old, new, are_equal=None):
    """Calculate a minimal list of operations converting `old` into `new`.

    Unlike diff, this runs inline and returns the operations directly.
    Only an equality function is needed, no worker is ever used.
    """
    if are_equal is None:
        are_equal = operator.__eq__
    elif not callable(are_equal):
        raise ListDiffUsageError("are_equal must be callable, got {!r}.".format(are_equal))

    with timer.time('trim'):
        trimmed = trim(old, new, are_equal)
    with timer.time('calculate'):
        operations = diff_sequence_bruteforce(
            trimmed.shortened_old, trimmed.shortened_new, are_equal)
    return shift_ops(operations, trimmed.start)
