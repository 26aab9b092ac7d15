# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .diff_format import DiffOp


# Indentation offset in pretty-print
IND = "  "


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(" ")
    else:
        return "(no timestamp)"


def format_value(v):
    "Format simple value for printing, using pprint for anything but strings."
    if isinstance(v, str):
        return v
    return pprint.pformat(v)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed."""
    vstr = format_value(value)
    for line in vstr.splitlines() or [""]:
        config.out.write("%s%s%s\n" % (prefix, line, config.RESET))


def pretty_print_operation(e, config=DefaultConfig):
    "Print a single insertion or deletion."
    if e.op == DiffOp.INSERT:
        config.out.write("%sinsert at %d:%s\n" % (config.INFO, e.index, config.RESET))
        pretty_print_value(e.item, config.ADD, config)
    else:
        config.out.write("%sdelete at %d:%s\n" % (config.INFO, e.index, config.RESET))
        pretty_print_value(e.item, config.REMOVE, config)


list_diff_header = """\
listdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""


def pretty_print_operations(afn, bfn, operations, config=DefaultConfig):
    """Pretty-print an edit script

    Parameters
    ----------

    afn: str
        Filename of the old list
    bfn: str
        Filename of the new list
    operations: list
        The operations transforming the old list into the new one
    config: PrettyPrintConfig
        Config object determining where things get printed
    """
    if operations:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(list_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        for e in operations:
            pretty_print_operation(e, config)


def pretty_print_list(items, config=DefaultConfig):
    "Print the items of a list, one entry per item."
    for i, item in enumerate(items):
        config.out.write("%s[%d]%s\n" % (config.INFO, i, config.RESET))
        pretty_print_value(item, config.KEEP, config)


def pretty_print_config(header, d, config=DefaultConfig):
    """Pretty-print a (nested) dict of config values below a header."""
    config.out.write("%s%s%s\n" % (config.INFO, header, config.RESET))
    _pretty_print_dict(d, IND, config)


def _pretty_print_dict(d, prefix, config):
    for k in sorted(d):
        v = d[k]
        if isinstance(v, dict):
            config.out.write("%s%s:\n" % (prefix, k))
            _pretty_print_dict(v, prefix + IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, k, v))
