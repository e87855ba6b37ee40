# -*- encoding: utf-8 -*-
# @File   : mapping.py
# @Time   : 2026/10/20 00:03:37
# @Author : Kariko Lin

"""Export a store document as nested JSON/YAML mappings, and back.

Both look like `{section: {key: value}}`, sorted the same way as the INI.
"""

import json
from collections.abc import Mapping
from typing import Any

import yaml

from ..abstract import FileHandler
from ..store.model import IniDocument


def _to_document(src: Mapping[str, Any] | None) -> IniDocument:
    ret = IniDocument()
    if src is None:  # empty yaml
        return ret
    if not isinstance(src, Mapping):
        raise ValueError('Top level should be a mapping of sections.')
    for section, pairs in src.items():
        if not isinstance(pairs, Mapping):
            raise ValueError(f'[{section}] should be a mapping of pairs.')
        for k, v in pairs.items():
            # may there be some pure digits considered as int
            ret.put(str(section), str(k), '' if v is None else str(v))
    return ret


class IniJsonHandler(FileHandler[IniDocument]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self.path, 'r', encoding=self._codec) as fp:
            return _to_document(json.load(fp))

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self.path, 'w', encoding=self._codec) as fp:
            json.dump(instance.to_dict(), fp, ensure_ascii=False, indent=indent)
            fp.write('\n')


class IniYamlHandler(FileHandler[IniDocument]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self.path, 'r', encoding=self._codec) as fp:
            return _to_document(yaml.safe_load(fp))

    def write(self, instance: IniDocument) -> None:
        with open(self.path, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                instance.to_dict(), fp,
                allow_unicode=True, sort_keys=True,
                default_flow_style=False)
