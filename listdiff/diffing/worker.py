# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Run a single diff calculation in a separate worker process.

The caller and the worker only exchange two messages: a DiffRequest
holding the two (trimmed) lists and the comparison, and a DiffResponse
holding the resulting operations. Both are pickled across the process
boundary, so nothing is shared between the two sides. Every worker
serves exactly one request and is shut down afterwards.
"""

import asyncio
import multiprocessing
from collections import namedtuple
from concurrent.futures import ProcessPoolExecutor

from .. import log
from ..log import ListDiffWorkerError
from .seq_bruteforce import diff_sequence_bruteforce

__all__ = ["DiffRequest", "DiffResponse", "handle_request", "calculate_in_worker"]


DiffRequest = namedtuple("DiffRequest", ["old", "new", "comparison"])

DiffResponse = namedtuple("DiffResponse", ["operations"])


def handle_request(request):
    "Worker side: compute the edit script for one request."
    comparison = request.comparison
    operations = diff_sequence_bruteforce(
        request.old, request.new, comparison.equals, comparison.hash)
    return DiffResponse(operations)


def _make_executor(start_method=None):
    mp_context = None
    if start_method is not None:
        mp_context = multiprocessing.get_context(start_method)
    return ProcessPoolExecutor(max_workers=1, mp_context=mp_context)


async def calculate_in_worker(old, new, comparison, start_method=None):
    """Compute the edit script of old and new in a fresh worker process.

    Suspends the calling coroutine until the worker has answered. Any
    failure to spawn the worker, to transfer the request or response,
    or inside the worker itself raises ListDiffWorkerError.
    """
    request = DiffRequest(list(old), list(new), comparison)
    loop = asyncio.get_running_loop()
    try:
        executor = _make_executor(start_method)
    except (OSError, ValueError) as e:
        log.error("Could not create diff worker: %s", e)
        raise ListDiffWorkerError("Could not create diff worker.") from e

    log.debug("Spawned diff worker for %d x %d items", len(request.old), len(request.new))
    try:
        response = await loop.run_in_executor(executor, handle_request, request)
    except Exception as e:
        log.error("Diff worker failed: %r", e)
        raise ListDiffWorkerError("Diff calculation in worker failed.") from e
    finally:
        executor.shutdown(wait=False)
        log.debug("Shut down diff worker")
    return response.operations
