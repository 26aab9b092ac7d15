# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import asyncio

from listdiff import patch, diff, diff_sync
from listdiff.diff_format import is_valid_operations
from listdiff.diffing.seq_bruteforce import bruteforce_compare_grid, bruteforce_cost_grid


def run(coro):
    "Run a coroutine to completion in a fresh event loop."
    return asyncio.run(coro)


def edit_distance(a, b):
    "Minimal number of insertions and deletions turning a into b."
    return bruteforce_cost_grid(bruteforce_compare_grid(a, b), len(b))[len(a)][len(b)]


def check_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b with a minimal edit script."
    d = diff_sync(a, b)
    assert is_valid_operations(d)
    assert patch(a, d) == b
    assert len(d) == edit_distance(a, b)
    return d


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def check_async_diff_and_patch(a, b, **kwargs):
    "Same as check_diff_and_patch, for the awaitable entry point."
    d = run(diff(a, b, **kwargs))
    assert is_valid_operations(d)
    assert patch(a, d) == b
    assert len(d) == edit_distance(a, b)
    return d
