# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator
from collections import namedtuple

__all__ = ["TrimResult", "trim"]


# start is the length of the removed common prefix, i.e. the offset to add
# to indices computed on the shortened lists
TrimResult = namedtuple("TrimResult", ["start", "shortened_old", "shortened_new"])


def trim(old, new, compare=operator.__eq__):
    """Strip the common prefix and suffix of two sequences.

    Equal runs at the boundaries never change the interior of a minimal
    edit script, they only shift its indices. The suffix is never allowed
    to overlap the prefix.
    """
    N, M = len(old), len(new)
    limit = min(N, M)

    start = 0
    while start < limit and compare(old[start], new[start]):
        start += 1

    end = 0
    while end < limit - start and compare(old[N-1-end], new[M-1-end]):
        end += 1

    return TrimResult(start, list(old[start:N-end]), list(new[start:M-end]))
