# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Decide whether a diff is expensive enough to run in a worker process."""

from .. import log

__all__ = ["should_offload", "DEFAULT_OFFLOAD_THRESHOLD"]


# Number of cells in the cost grid above which a diff is moved off the
# calling thread. Spawning a worker process costs tens of milliseconds,
# which is about what filling this many cells costs.
DEFAULT_OFFLOAD_THRESHOLD = 100000


def should_offload(old_len, new_len, threshold=None):
    """Return True if a grid of old_len x new_len cells should be computed
    in a worker process instead of inline."""
    if threshold is None:
        threshold = DEFAULT_OFFLOAD_THRESHOLD
    cells = old_len * new_len
    decision = cells > threshold
    log.debug("Grid of %d cells (threshold %d): %s", cells, threshold,
              "offloading to worker" if decision else "running inline")
    return decision
