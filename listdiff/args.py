# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_listdiff_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_listdiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_listdiff_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        elif v is None:
            output[k] = '<unset>'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_config, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_config(
            header,
            modify_config_for_print(config),
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all listdiff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments controlling how a diff is calculated.
    """
    worker = parser.add_mutually_exclusive_group()
    worker.add_argument(
        '--spawn-worker',
        dest='spawn_worker',
        action='store_const',
        const=True,
        default=None,
        help="always calculate the diff in a worker process.",
    )
    worker.add_argument(
        '--no-spawn-worker',
        dest='spawn_worker',
        action='store_const',
        const=False,
        help="never calculate the diff in a worker process.",
    )
    parser.add_argument(
        '--offload-threshold',
        type=int,
        default=None,
        help="number of grid cells (old length times new length) above which "
             "the diff is calculated in a worker process.",
    )
    parser.add_argument(
        '--worker-start-method',
        choices=('fork', 'spawn', 'forkserver'),
        default=None,
        help="the multiprocessing start method used for worker processes.",
    )
    parser.add_argument(
        '--lines',
        action='store_true',
        default=False,
        help="read the inputs as text files, one item per line, "
             "instead of json lists.",
    )


filename_help = {
    "old": "the original list, a json file (or text file with --lines).",
    "new": "the changed list, a json file (or text file with --lines).",
    "base": "the list to apply the operations to, a json file.",
    "patch": "the operations to apply, a json file as written by 'listdiff --out'.",
}


def add_filename_args(parser, names):
    """Add positional filename arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )
