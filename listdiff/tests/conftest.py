# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os

from pytest import fixture, skip

from listdiff import config as listdiff_config


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def fruits():
    return (
        ['coconut', 'nut', 'peanut'],
        ['kiwi', 'coconut', 'maracuja', 'nut', 'banana'],
    )


@fixture
def reset_config():
    """Drop cached config instances, so tests see fresh trait defaults."""
    listdiff_config._config_cache.clear()
    yield
    listdiff_config._config_cache.clear()


@fixture
def list_files(tmpdir, fruits):
    """Write the fruit lists as json and as line based text files."""
    old, new = fruits
    paths = {}
    for name, items in (('old', old), ('new', new)):
        fn = str(tmpdir.join(name + '.json'))
        with open(fn, 'w') as f:
            json.dump(items, f)
        paths[name] = fn
        fn = str(tmpdir.join(name + '.txt'))
        with open(fn, 'w') as f:
            f.write('\n'.join(items) + '\n')
        paths[name + '_lines'] = fn
    return paths


@fixture
def in_tmpdir(tmpdir):
    """Run the test with the temporary directory as working directory."""
    old = os.getcwd()
    os.chdir(str(tmpdir))
    try:
        yield tmpdir
    finally:
        os.chdir(old)
