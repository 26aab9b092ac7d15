# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_list(f, lines=False):
    """Read and return a list from filename

    Parameters:
        f:  The filename to read from, or null filename
            ("/dev/null" on *nix, "nul" on Windows), which
            reads as an empty list.
        lines: If true, the file is read as text with one
            item per line (line endings stripped). Otherwise
            it must contain a json array.
    """
    if f == EXPLICIT_MISSING_FILE:
        return []
    with io.open(f, encoding='utf-8') as fo:
        if lines:
            return fo.read().splitlines()
        data = json.load(fo)
    if not isinstance(data, list):
        raise ValueError('Expected a json array in %r, got %s' % (
            f, type(data).__name__))
    return data


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream or stream is None:
            # don't wrap captured or redirected output
            continue
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            stream.reconfigure(errors='backslashreplace')


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
