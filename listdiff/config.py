# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.offload import DEFAULT_OFFLOAD_THRESHOLD


CONFIG_BASENAME = 'listdiff_config'


class ListDiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def config_search_path():
    "Directories searched for config files, in descending priority."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def build_config(entrypoint, include_none=False, path=None):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    if path is None:
        path = config_search_path()
    for c in _load_config_files(CONFIG_BASENAME, path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, ListDiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(ListDiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(Global):

    offload_threshold = Integer(
        DEFAULT_OFFLOAD_THRESHOLD,
        min=0,
        help="Number of grid cells (old length times new length, after "
             "trimming) above which the diff is calculated in a worker process.",
    ).tag(config=True)

    spawn_worker = Bool(
        None,
        allow_none=True,
        help="Always (true) or never (false) calculate in a worker process. "
             "Unset lets the size of the input decide.",
    ).tag(config=True)

    worker_start_method = Enum(
        ('fork', 'spawn', 'forkserver'),
        None,
        allow_none=True,
        help="The multiprocessing start method for worker processes. "
             "Unset uses the platform default.",
    ).tag(config=True)

    lines = Bool(
        False,
        help="Read inputs as text files, one item per line, instead of json lists.",
    ).tag(config=True)


class Patch(Global):
    pass


entrypoint_configurables = {
    'listdiff': Diff,
    'listdiff-patch': Patch,
}

