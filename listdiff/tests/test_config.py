# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

import pytest
from traitlets import TraitError

from listdiff.config import build_config, Diff, config_instance
from listdiff.diffing.offload import DEFAULT_OFFLOAD_THRESHOLD


def write_config(directory, content):
    with open(str(directory.join('listdiff_config.json')), 'w') as f:
        json.dump(content, f)


def test_defaults(tmpdir, reset_config):
    config = build_config('listdiff', path=[str(tmpdir)])
    assert config == {
        'log_level': 'INFO',
        'offload_threshold': DEFAULT_OFFLOAD_THRESHOLD,
        'lines': False,
    }


def test_defaults_include_none(tmpdir, reset_config):
    config = build_config('listdiff', include_none=True, path=[str(tmpdir)])
    assert config['spawn_worker'] is None
    assert config['worker_start_method'] is None


def test_config_from_disk(tmpdir, reset_config):
    write_config(tmpdir, {
        'Global': {'log_level': 'DEBUG'},
        'Diff': {'offload_threshold': 5, 'spawn_worker': True},
    })
    config = build_config('listdiff', path=[str(tmpdir)])
    assert config['log_level'] == 'DEBUG'
    assert config['offload_threshold'] == 5
    assert config['spawn_worker'] is True


def test_config_patch_entrypoint(tmpdir, reset_config):
    write_config(tmpdir, {'Diff': {'offload_threshold': 5}})
    config = build_config('listdiff-patch', path=[str(tmpdir)])
    assert config == {'log_level': 'INFO'}


def test_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('nope')


def test_traits_are_validated(reset_config):
    d = config_instance(Diff)
    with pytest.raises(TraitError):
        d.offload_threshold = -1
    with pytest.raises(TraitError):
        d.worker_start_method = 'teleport'
