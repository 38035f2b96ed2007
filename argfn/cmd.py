# -*- coding: utf-8 -*-
#
# Copyright (c) 2017~2999 - cologler <skyoflw@gmail.com>
# ----------
#
# ----------

class ArgTable(dict):
    '''
    a map of argument to callback, filled by decorator:

        table = ArgTable()

        @table.arg('-v', '--verbose')
        def _(cfg):
            cfg.verbose = True

        Parser.with_arguments(Config(), table, ignore_unknown)
    '''

    def arg(self, *arguments: str):
        assert arguments, 'require at least one argument.'
        def _(cb):
            for argument in arguments:
                assert isinstance(argument, str), argument
                self[argument] = cb
            return cb
        return _

    def keys_for(self, cb):
        'get the arguments which bind to `cb`.'
        return [k for k, v in self.items() if v is cb]
