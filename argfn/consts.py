# -*- coding: utf-8 -*-
#
# Copyright (c) 2017~2999 - cologler <skyoflw@gmail.com>
# ----------
#
# ----------

DEFAULT_TABLE_NAME = '.argfn.json'

class TableKeys:
    DEFAULTS = 'defaults'
    FLAGS = 'flags'
