# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 16:53:37
# @Author : Kariko Lin

import logging

from .errors import IniFileError
from .ini import (
    Ini, IniSection, IniBuilder, IniFileHandler,
    OrderedHashMap, Entry, Tokenizer, tokenize, parse_line
)

__all__ = [
    'Ini', 'IniSection', 'IniBuilder', 'IniFileHandler', 'IniFileError',
    'OrderedHashMap', 'Entry', 'Tokenizer', 'tokenize', 'parse_line'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
