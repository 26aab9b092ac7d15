# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import ListDiffFormatError


class DiffEntry(dict):
    """Operation in an edit script.

    Minimal class providing attribute access to the entry keys
    (``op``, ``index`` and ``item``). Being a plain dict underneath,
    entries can be dumped to json and pickled across process
    boundaries as they are.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DiffOp:
    "Collection of valid values for the op field in edit script entries."
    INSERT = "insert"
    DELETE = "delete"


OPS = (DiffOp.INSERT, DiffOp.DELETE)


def op_insert(index, item):
    "Create an entry inserting item so that it ends up at index."
    return DiffEntry(op=DiffOp.INSERT, index=index, item=item)

def op_delete(index, item):
    "Create an entry removing item, currently found at index."
    return DiffEntry(op=DiffOp.DELETE, index=index, item=item)


def is_insertion(e):
    return e.op == DiffOp.INSERT

def is_deletion(e):
    return e.op == DiffOp.DELETE


def shift_op(e, n):
    "Return a copy of entry e with its index moved by n."
    return DiffEntry(op=e.op, index=e.index + n, item=e.item)


def shift_ops(operations, n):
    "Move all entries by n, e.g. to undo trimming of a common prefix."
    if not n:
        return list(operations)
    return [shift_op(e, n) for e in operations]


def format_op(e):
    "Short human readable description of an entry."
    if is_insertion(e):
        return "Insertion of {!r} at {}.".format(e.item, e.index)
    return "Deletion of {!r} at {}.".format(e.item, e.index)


def to_diffentry_dicts(di):
    "Convert plain dicts (e.g. loaded from json) to DiffEntry objects."
    if isinstance(di, list):
        return [to_diffentry_dicts(v) for v in di]
    elif isinstance(di, dict):
        return DiffEntry(di)
    else:
        return di


def is_valid_operations(operations):
    """Checks whether an edit script is well formed.

    Returns a boolean indicating the well-formedness of the operations.
    """
    try:
        validate_operations(operations)
        result = True
    except ListDiffFormatError:
        result = False
    return result


def validate_operations(operations):
    """Check whether an edit script (list of entries) is well formed.

    Raises a ListDiffFormatError if not well formed.
    """
    if not isinstance(operations, list):
        raise ListDiffFormatError("Edit script must be a list.")
    for e in operations:
        validate_op(e)


def validate_op(e):
    """Check that e is a well formed entry.

    Raises a ListDiffFormatError if not well formed.
    """
    if not isinstance(e, DiffEntry):
        raise ListDiffFormatError("Entry '{}' is not a diff type.".format(e))
    missing = [k for k in ("op", "index", "item") if k not in e]
    if missing:
        raise ListDiffFormatError(
            "Entry '{}' is missing keys {}.".format(e, missing))
    if e.op not in OPS:
        raise ListDiffFormatError("Unknown diff op '{}'.".format(e.op))
    # bool is an int subclass, but never a valid index
    if not isinstance(e.index, int) or isinstance(e.index, bool):
        raise ListDiffFormatError(
            "Entry index must be an integer, not '{}'.".format(e.index))
    if e.index < 0:
        raise ListDiffFormatError(
            "Entry index must be non-negative, not {}.".format(e.index))
