# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 20:14:06
# @Author : Kariko Lin

import logging

from .store import (
    ConfigStore, IniDocument, IniSection, IniStoreParser, StoreStatus,
    StoreError, StoreIOError, StoreEmptyError,
    SectionNotFoundError, KeyNotFoundError,
    MalformedIdentifierError, MalformedIdentifierWarning
)
from .formats import IniJsonHandler, IniYamlHandler

__all__ = [
    'ConfigStore', 'IniDocument', 'IniSection', 'IniStoreParser',
    'StoreStatus', 'StoreError', 'StoreIOError', 'StoreEmptyError',
    'SectionNotFoundError', 'KeyNotFoundError',
    'MalformedIdentifierError', 'MalformedIdentifierWarning',
    'IniJsonHandler', 'IniYamlHandler'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
