# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_sync, ItemComparison, FunctionComparison, KeyComparison
from .diff_format import DiffOp, op_insert, op_delete
from .log import ListDiffUsageError, ListDiffWorkerError, ListDiffFormatError
from .patching import patch


__all__ = [
    "__version__",
    "diff", "diff_sync", "patch",
    "ItemComparison", "FunctionComparison", "KeyComparison",
    "DiffOp", "op_insert", "op_delete",
    "ListDiffUsageError", "ListDiffWorkerError", "ListDiffFormatError",
    ]
