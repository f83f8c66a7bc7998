"""
Defines a global settings registry used by other modules.

Recognised keys:
    USERNAME, PASSWORD: API account credentials
    API_ENDPOINT: URL requests are posted to
    TRANSPORT: name of the transport used by default
    TIMEOUT: HTTP timeout in seconds
    FORWARD_MAXSPLIT: whether send requests carry the maxsplit field

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

from smsbroadcast.protocol import API_ENDPOINT


DEFAULTS = {
    'API_ENDPOINT': API_ENDPOINT,
    'TRANSPORT': 'http',
    'TIMEOUT': 30,
    'FORWARD_MAXSPLIT': True,
}

_config = {}


def set(**kwargs):
    _config.update(kwargs)


def load_dict(dict_items):
    _config.update(dict_items)


def get(key, default=None):
    """
    Return a setting, then its built-in default, then `default`.
    """
    if key in _config:
        return _config[key]
    return DEFAULTS.get(key, default)


def is_set(key):
    return key in _config


def clear():
    _config.clear()
