# -*- coding: utf-8 -*-
#
# Copyright (c) 2017~2999 - cologler <skyoflw@gmail.com>
# ----------
#
# ----------

from fsoopify import FileInfo, SerializeError

from .consts import TableKeys
from .parser import Parser

class TableFileError(ValueError):
    pass

def _updater(updates: dict):
    def callback(config: dict):
        config.update(updates)
    return callback

class TableFile:
    def __init__(self, path):
        self._fileinfo = FileInfo(str(path))
        self._data: dict = None

    @property
    def path(self):
        return self._fileinfo.path

    def is_table_file(self):
        return self._fileinfo.is_file()

    def _load(self):
        if self._data is None:
            try:
                data = self._fileinfo.load('json')
            except SerializeError as err:
                raise TableFileError(f'{self.path} is not a valid json file: {err}') from err
            if not isinstance(data, dict):
                raise TableFileError(f'{self.path} is not a json object.')
            self._data = data
        return self._data

    def _load_section(self, key):
        section = self._load().get(key)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise TableFileError(f'section {key!r} of {self.path} is not a json object.')
        return section

    @property
    def defaults(self) -> dict:
        return self._load_section(TableKeys.DEFAULTS)

    @property
    def flags(self) -> dict:
        flags = self._load_section(TableKeys.FLAGS)
        for name, updates in flags.items():
            if not isinstance(updates, dict):
                raise TableFileError(f'flag {name!r} of {self.path} must map to a json object.')
        return flags

    def build_parser(self, unknown) -> Parser:
        'build a parser which config is a copy of the defaults.'
        arguments = {name: _updater(updates) for name, updates in self.flags.items()}
        return Parser.with_arguments(dict(self.defaults), arguments, unknown)
