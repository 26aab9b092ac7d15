# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import DiffOp, validate_op
from .log import ListDiffFormatError


__all__ = ["patch"]


def patch(obj, operations):
    """Apply an edit script to a sequence, returning a new list.

    The operations are applied one after the other, each index referring
    to the list as left behind by the previous operations. The input
    sequence is not modified.
    """
    newobj = list(obj)
    for e in operations:
        validate_op(e)
        index = e.index
        if e.op == DiffOp.INSERT:
            if index > len(newobj):
                raise ListDiffFormatError(
                    "Cannot insert at {} into list of length {}.".format(index, len(newobj)))
            newobj.insert(index, e.item)
        elif e.op == DiffOp.DELETE:
            if index >= len(newobj):
                raise ListDiffFormatError(
                    "Cannot delete at {} from list of length {}.".format(index, len(newobj)))
            del newobj[index]
        else:
            raise ListDiffFormatError("Invalid op {}.".format(e.op))
    return newobj
