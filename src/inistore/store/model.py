# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 21:20:03
# @Author : Kariko Lin

"""
Basically a two-level INI structure: sections of `str: str` pairs.

No inheritance, no `+=`, no `[#include]`, just what a config file needs.
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Iterator
from warnings import warn

from .consts import IDENTIFIER_SEP
from .errors import MalformedIdentifierError, MalformedIdentifierWarning

_log = logging.getLogger(__name__)


def trim_text(text: str) -> str:
    """去掉首尾的空格、制表符，然后去掉行尾换行。

    Newlines go last, so `"v \n"` keeps its space: `"v "`. Lines read from
    a file have their line ends removed before this.
    """
    return text.strip(' \t').rstrip('\n')


def split_identifier(
    identifier: str, strict: bool = False, stacklevel: int = 2
) -> tuple[str, str]:
    """Split `section.key` at the *first* dot.

    The key keeps any further dots, e.g. `db.conn.timeout` gives
    `('db', 'conn.timeout')`.

    Without any dot the whole identifier is the section and the key is
    empty. That is warned about and then accepted, unless `strict`.
    `stacklevel` points the warning at the caller, as in `warnings.warn`.
    """
    section, sep, key = identifier.partition(IDENTIFIER_SEP)
    if not sep:
        if strict:
            _log.error('Malformed identifier "%s"', identifier)
            raise MalformedIdentifierError(
                f'Identifier "{identifier}" has no section separator')
        _log.warning('Malformed identifier "%s", using an empty key',
                     identifier)
        warn(f'Identifier "{identifier}" has no section separator, '
             'falling back to an empty key.',
             MalformedIdentifierWarning, stacklevel=stacklevel)
    return section, key


class IniSection(MutableMapping[str, str]):
    """小节字典，维护一个小节的所有键值对。

    与`IniDocument`共享同一个 dict，所以在这里改动会直接反映到文档上。
    但要注意：在这里删空了小节，小节本身并不会被删除，请用`IniDocument.remove()`。
    """
    def __init__(self, section_name: str, pairs: dict[str, str]) -> None:
        self._name = section_name
        self._data = pairs

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    def sorted_pairs(self) -> list[tuple[str, str]]:
        return sorted(self._data.items())


class IniDocument(MutableMapping[str, IniSection]):
    """The whole file in memory: `section -> {key: value}`.

    Sections without any pair are never kept.
    """
    def __init__(self) -> None:
        self.__raw_dicts: dict[str, dict[str, str]] = {}

    def __getitem__(self, key: str) -> IniSection:
        return IniSection(key, self.__raw_dicts[key])

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict.
        pairs = (
            value.to_dict()
            if isinstance(value, IniSection)
            else dict(value)
        )
        if not pairs:
            self.__raw_dicts.pop(key, None)
            return
        self.__raw_dicts[key] = pairs

    def __delitem__(self, key: str) -> None:
        del self.__raw_dicts[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return 'IniDocument { .sections = %d }' % len(self.__raw_dicts)

    def put(self, section: str, key: str, value: str) -> None:
        """Write a pair, creating the section when missing."""
        self.__raw_dicts.setdefault(section, {})[key] = value

    def remove(self, section: str, key: str) -> None:
        """Delete a pair and drop the section if it gets empty.

        Raises `KeyError` with the missing name; the section is left as is
        when only the key is missing.
        """
        pairs = self.__raw_dicts[section]
        del pairs[key]
        if not pairs:
            del self.__raw_dicts[section]

    def merge(self, another: 'IniDocument') -> None:
        """Later pairs win, like loading `another` on top of self."""
        for section in another:
            for key, value in another[section].items():
                self.put(section, key, value)

    def sorted_sections(self) -> list[IniSection]:
        return [self[i] for i in sorted(self.__raw_dicts)]

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {
            section.name: dict(section.sorted_pairs())
            for section in self.sorted_sections()
        }

    def clear(self) -> None:
        self.__raw_dicts.clear()
