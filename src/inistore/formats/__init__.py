# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/20 00:02:51
# @Author : Kariko Lin
from .mapping import IniJsonHandler, IniYamlHandler

__all__ = ['IniJsonHandler', 'IniYamlHandler']
