# -*- coding: utf-8 -*-
#
# Copyright (c) 2019~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

from collections.abc import MutableMapping

def ignore_unknown(config, token: str):
    'a fallback which does nothing.'

def _get_field(config, name: str):
    if isinstance(config, MutableMapping):
        return config[name]
    return getattr(config, name)

def assign(name: str, value):
    'create a callback which set field `name` of the config to `value`.'

    def callback(config):
        if isinstance(config, MutableMapping):
            config[name] = value
        else:
            setattr(config, name, value)
    return callback

def collect_into(name: str):
    'create a fallback which append the unknown token to the list field `name` of the config.'

    def unknown(config, token: str):
        _get_field(config, name).append(token)
    return unknown
