# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 16:51:09
# @Author : Kariko Lin

from .ordered import OrderedHashMap, Entry
from .tokenizer import Tokenizer, tokenize
from .parser import (
    parse_line,
    ParsedLine,
    Empty,
    SectionHeader,
    KeyValue,
    Malformed
)
from .model import Ini, IniSection, parse_bool
from .builder import IniBuilder
from .handler import IniFileHandler
