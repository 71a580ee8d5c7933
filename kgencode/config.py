# -*- coding: utf-8 -*-
"""
Copyright kgencode developers
"""

import logging
import sys

from os.path import dirname, join

import yaml

DEFAULT_CONFIG_PATH = join(dirname(__file__), 'config.yaml')


class ConfigDict(dict):
    __getattr__ = dict.__getitem__


def _make_config_dict(obj):
    if isinstance(obj, dict):
        return ConfigDict({k: _make_config_dict(v) for k, v in obj.items()})
    elif isinstance(obj, list):
        return [_make_config_dict(x) for x in obj]
    else:
        return obj


def _merge(base, other):
    for k, v in other.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            _merge(base[k], v)
        else:
            base[k] = v
    return base


_config = None


def _read_yaml(path):
    with open(path) as f:
        return yaml.safe_load(f) or {}


def config(args=None, reload=False):
    """Resolved configuration: packaged defaults, then the file given by
    `--config=path`, then the `--section.key=value` overrides.

    """
    global _config
    if _config is None or reload:
        if args is None:
            args = sys.argv[1:]
        raw = _read_yaml(DEFAULT_CONFIG_PATH)
        for arg in args:
            if arg.startswith('--config='):
                _merge(raw, _read_yaml(arg[9:]))
                break
        _config = _make_config_dict(raw)
        overwrite_config_with_args(args)
    return _config


def path_set(path, val, sep='.', auto_convert=False):
    steps = path.split(sep)
    obj = _config
    for step in steps[:-1]:
        obj = obj[step]
        if not isinstance(obj, dict):
            raise KeyError(path)
    old_val = obj.get(steps[-1])
    if not auto_convert:
        obj[steps[-1]] = val
    elif isinstance(old_val, bool):
        obj[steps[-1]] = val.lower() == 'true'
    elif isinstance(old_val, float):
        obj[steps[-1]] = float(val)
    elif isinstance(old_val, int):
        try:
            obj[steps[-1]] = int(val)
        except ValueError:
            obj[steps[-1]] = float(val)
    else:
        obj[steps[-1]] = val


def overwrite_config_with_args(args=None, sep='.'):
    if args is None:
        args = sys.argv[1:]
    for arg in args:
        if arg.startswith('--') and '=' in arg:
            path, val = arg[2:].split('=', 1)
            if path != 'config':
                path_set(path, val, sep, auto_convert=True)


def _dump_config(obj, prefix):
    if isinstance(obj, dict):
        for k, v in obj.items():
            _dump_config(v, prefix + (k,))
    elif isinstance(obj, list):
        for i, v in enumerate(obj):
            _dump_config(v, prefix + (str(i),))
    else:
        if isinstance(obj, str):
            rep = obj
        else:
            rep = repr(obj)
        logging.debug('%s=%s', '.'.join(prefix), rep)


def dump_config():
    return _dump_config(_config, tuple())
