# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff, diff_sync
from .comparing import ItemComparison, FunctionComparison, KeyComparison

__all__ = ["diff", "diff_sync", "ItemComparison", "FunctionComparison", "KeyComparison"]
