# -*- coding: utf-8 -*-
#
# Copyright (c) 2017~2999 - cologler <skyoflw@gmail.com>
# ----------
#
# ----------

from .parser import Parser, ParserConsumedError
from .cmd import ArgTable
from .utils import ignore_unknown, assign, collect_into
