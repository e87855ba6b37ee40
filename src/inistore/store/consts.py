# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 21:05:12
# @Author : Kariko Lin

from enum import Enum


class StoreStatus(int, Enum):
    OK = 0
    NOT_OPENED = 1   # unable to open or decode the file for reading
    MALFORMED_IDENTIFIER = 2  # no section separator, strict mode only
    NOT_FOUND = 3    # section or key
    STORE_EMPTY = 4  # nothing loaded yet
    DUMP_FAILED = 255


COMMENT_MARK = ';'
SECTION_OPEN = '['
SECTION_CLOSE = ']'
PAIRING = '='
IDENTIFIER_SEP = '.'

DEFAULT_DELIMITER = ' = '
