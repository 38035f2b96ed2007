# -*- coding: utf-8 -*-
#
# Copyright (c) 2020~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import json

import pytest

from argfn.table_file import TableFile, TableFileError
from argfn.utils import ignore_unknown

EXAMPLE_TABLE = {
    'defaults': {'foo': False, 'bar': False},
    'flags': {
        '-foo': {'foo': True},
        '-nofoo': {'foo': False},
        '-bar': {'bar': True},
        '-nobar': {'bar': False},
    }
}

def _write(tmp_path, data, name='flags.json'):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding='utf-8')
    return path

def test_build_parser(tmp_path):
    table_file = TableFile(_write(tmp_path, EXAMPLE_TABLE))
    assert table_file.is_table_file()
    cfg = table_file.build_parser(ignore_unknown).parse(['-bar', '-nofoo', '-foo', '-nobar', '-foo'])
    assert cfg == {'foo': True, 'bar': False}

def test_build_parser_copies_defaults(tmp_path):
    table_file = TableFile(_write(tmp_path, EXAMPLE_TABLE))
    table_file.build_parser(ignore_unknown).parse(['-foo'])
    assert table_file.defaults == {'foo': False, 'bar': False}

def test_missing_sections(tmp_path):
    table_file = TableFile(_write(tmp_path, {}))
    assert table_file.defaults == {}
    assert table_file.flags == {}
    assert table_file.build_parser(ignore_unknown).parse(['-x']) == {}

def test_missing_file(tmp_path):
    assert not TableFile(tmp_path / 'missing.json').is_table_file()

def test_malformed_table(tmp_path):
    with pytest.raises(TableFileError):
        TableFile(_write(tmp_path, [1, 2])).flags
    with pytest.raises(TableFileError):
        TableFile(_write(tmp_path, {'flags': {'-x': True}})).flags
    with pytest.raises(TableFileError):
        TableFile(_write(tmp_path, {'defaults': []})).defaults

def test_invalid_json(tmp_path):
    path = tmp_path / 'flags.json'
    path.write_text('{not json', encoding='utf-8')
    table_file = TableFile(path)
    assert table_file.is_table_file()
    with pytest.raises(TableFileError):
        table_file.flags

def test_table_file_without_json_extension(tmp_path):
    for name in ('flags.cfg', 'flags'):
        table_file = TableFile(_write(tmp_path, EXAMPLE_TABLE, name))
        cfg = table_file.build_parser(ignore_unknown).parse(['-foo', '-bar'])
        assert cfg == {'foo': True, 'bar': True}
