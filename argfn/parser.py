# -*- coding: utf-8 -*-
#
# Copyright (c) 2017~2999 - cologler <skyoflw@gmail.com>
# ----------
#
# ----------

'''
dispatch command line tokens to callbacks.

example:

    cfg = Parser({'foo': False, 'bar': False}, ignore_unknown) \\
        .arg('-foo', assign('foo', True)) \\
        .arg('-nofoo', assign('foo', False)) \\
        .parse(['-nofoo', '-foo'])
'''

import logging
from typing import Callable, Dict, Generic, Iterable, TypeVar

from .utils import ignore_unknown

C = TypeVar('C')

Callback = Callable[[C], None]
UnknownCallback = Callable[[C, str], None]

logger = logging.getLogger('arg-fn').getChild('parser')


class ParserConsumedError(RuntimeError):
    '''raise when a parser is used after `parse()`.'''


class Parser(Generic[C]):
    '''
    hold the config, a map of argument to callback,
    and a callback for arguments which are not in the map.
    '''

    def __init__(self, config: C, unknown: UnknownCallback):
        self._config = config
        self._arguments: Dict[str, Callback] = {}
        self._unknown = unknown
        self._consumed = False

    @classmethod
    def with_arguments(cls, config: C, arguments: Dict[str, Callback], unknown: UnknownCallback):
        'create a parser from a prebuilt argument map.'
        parser = cls(config, unknown)
        parser._arguments.update(arguments)
        return parser

    @classmethod
    def default(cls, config_type: Callable[[], C]):
        'create a parser with `config_type()` as config which ignore unknown arguments.'
        return cls(config_type(), ignore_unknown)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _ensure_building(self):
        if self._consumed:
            raise ParserConsumedError('parser was already consumed by parse().')

    def arg(self, argument: str, callback: Callback):
        'register `callback` for `argument`, replace the previous one if exists.'
        assert isinstance(argument, str), argument
        self._ensure_building()
        if argument in self._arguments:
            logger.debug(f'override callback of {argument!r}.')
        self._arguments[argument] = callback
        return self

    def parse(self, tokens: Iterable[str]) -> C:
        'invoke the callback of each token in order, then return the config.'
        assert not isinstance(tokens, str), tokens
        self._ensure_building()
        self._consumed = True

        config = self._config
        arguments = self._arguments
        try:
            for token in tokens:
                callback = arguments.get(token)
                if callback is not None:
                    callback(config)
                else:
                    logger.debug(f'unknown argument {token!r}.')
                    self._unknown(config, token)
        finally:
            self._config = None
            self._arguments = {}
        return config
