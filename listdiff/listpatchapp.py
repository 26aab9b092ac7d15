# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_prettyprint_args,
    prettyprint_config_from_args,
    )
from .diff_format import to_diffentry_dicts, validate_operations
from .patching import patch
from .prettyprint import pretty_print_list
from .utils import EXPLICIT_MISSING_FILE, read_list, setup_std_streams


_description = "Apply operations from listdiff to a list."


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = read_list(base_filename)
    with io.open(patch_filename, encoding="utf8") as patch_file:
        operations = to_diffentry_dicts(json.load(patch_file))
    validate_operations(operations)

    after = patch(before, operations)

    if output_filename:
        with io.open(output_filename, "w", encoding="utf8") as f:
            json.dump(after, f, indent=2, separators=(",", ": "))
    else:
        class Printer:
            def write(self, text):
                print(text, end="")

        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_list(after, config=config)

    return 0


def _build_arg_parser(prog='listdiff-patch'):
    """Creates an argument parser for the listdiff-patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["base", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched list is written "
             "to this file as json. Otherwise it is printed "
             "to the terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
