# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 21:02:18
# @Author : Kariko Lin

from .consts import StoreStatus
from .errors import (
    StoreError,
    StoreIOError,
    StoreEmptyError,
    SectionNotFoundError,
    KeyNotFoundError,
    MalformedIdentifierError,
    MalformedIdentifierWarning
)
from .model import IniSection, IniDocument, trim_text, split_identifier
from .parser import IniStoreParser
from .config import ConfigStore
