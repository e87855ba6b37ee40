# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2026/10/19 22:31:55
# @Author : Kariko Lin

"""The config store: a loaded INI kept in memory, written back on change.

    ```python
    store = ConfigStore.open('app.ini')
    store.get('db.host')             # 'localhost'
    store.set('db.port', '5433')     # app.ini rewritten at once
    store.delete('db.port')
    ```

Every mutation is written through to the loaded file by default. Pass
`autoflush=False` to batch changes and call `flush()` yourself.
"""

import logging
from threading import RLock
from typing import Iterator

from .consts import DEFAULT_DELIMITER, IDENTIFIER_SEP, StoreStatus
from .errors import (
    KeyNotFoundError, SectionNotFoundError,
    StoreEmptyError, StoreIOError
)
from .model import IniDocument, split_identifier, trim_text
from .parser import IniStoreParser

_log = logging.getLogger(__name__)


class ConfigStore:
    def __init__(
        self, *,
        encoding: str | None = None,
        delimiter: str = DEFAULT_DELIMITER,
        blank_lines: int = 1,
        strict: bool = False,
        autoflush: bool = True
    ) -> None:
        self._codec = encoding
        self._delimiter = delimiter
        self._blank_lines = blank_lines
        self.strict = strict
        self.autoflush = autoflush
        self._doc = IniDocument()
        self._path: str | None = None
        self._dirty = False
        # one lock per whole operation, including the file rewrite.
        self._lock = RLock()

    @classmethod
    def open(cls, path: str, **options) -> 'ConfigStore':
        """Construct a store and load `path` into it."""
        store = cls(**options)
        store.load(path)
        return store

    @property
    def path(self) -> str | None:
        """The file most recently loaded, where every write goes."""
        return self._path

    @property
    def loaded(self) -> bool:
        """Whether a file has been loaded; the store may be empty anyway."""
        return self._path is not None

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def document(self) -> dict[str, dict[str, str]]:
        """A sorted copy of the whole store."""
        with self._lock:
            return self._doc.to_dict()

    def _parser(self, path: str) -> IniStoreParser:
        return IniStoreParser(
            path, self._codec,
            delimiter=self._delimiter,
            blank_lines=self._blank_lines)

    def _ensure_loaded(self) -> None:
        if not self._doc:
            _log.error('No resource file has been loaded yet')
            raise StoreEmptyError('No resource file has been loaded yet')

    def _locate(self, identifier: str) -> tuple[str, str]:
        self._ensure_loaded()
        return split_identifier(
            trim_text(identifier), self.strict, stacklevel=4)

    def load(self, path: str) -> StoreStatus:
        """Parse `path` and merge it into the store.

        Loading again does not reset: pairs of the new file are put on top
        of what is already there, and the new path becomes the write target.
        """
        path = trim_text(path)
        with self._lock:
            try:
                # parse into a fresh document so a failure leaves us as is.
                doc = self._parser(path).read()
            except (OSError, UnicodeError) as e:
                _log.error('Unable to open file %s: %s', path, e)
                raise StoreIOError(
                    f'Unable to open file {path}',
                    StoreStatus.NOT_OPENED) from e
            self._path = path
            self._doc.merge(doc)
        _log.info('File %s successfully loaded', path)
        return StoreStatus.OK

    def get(self, identifier: str) -> str:
        with self._lock:
            section, key = self._locate(identifier)
            if section not in self._doc:
                _log.error('Section "%s" not found', section)
                raise SectionNotFoundError(f'Section "{section}" not found')
            pairs = self._doc[section]
            if key not in pairs:
                _log.error('Key "%s" not found in section "%s"', key, section)
                raise KeyNotFoundError(
                    f'Key "{key}" not found in section "{section}"')
            return pairs[key]

    def set(self, identifier: str, value: str) -> StoreStatus:
        """Write `value` as is (not trimmed), then persist.

        When persisting fails `StoreIOError` is raised, yet the new value
        stays in memory: the file and the store may differ from then on.
        """
        with self._lock:
            section, key = self._locate(identifier)
            self._doc.put(section, key, value)
            self._dirty = True
            return self._written_through()

    def delete(self, identifier: str) -> StoreStatus:
        """Remove a pair, drop its section if emptied, then persist."""
        with self._lock:
            section, key = self._locate(identifier)
            if section not in self._doc:
                _log.error('Section "%s" not found', section)
                raise SectionNotFoundError(f'Section "{section}" not found')
            if key not in self._doc[section]:
                _log.error('Key "%s" not found in section "%s"', key, section)
                raise KeyNotFoundError(
                    f'Key "{key}" not found in section "{section}"')
            self._doc.remove(section, key)
            self._dirty = True
            return self._written_through()

    def _written_through(self) -> StoreStatus:
        if not self.autoflush:
            return StoreStatus.OK
        return self.dump()

    def dump(self) -> StoreStatus:
        """Rewrite the loaded file with the whole store, sorted."""
        with self._lock:
            if self._path is None:
                _log.error('No resource file has been loaded yet')
                raise StoreEmptyError('No resource file has been loaded yet')
            try:
                self._parser(self._path).write(self._doc)
            except (OSError, UnicodeError) as e:
                _log.error('Unable to open file %s for writing: %s',
                           self._path, e)
                raise StoreIOError(
                    f'Unable to open file {self._path} for writing',
                    StoreStatus.DUMP_FAILED) from e
            self._dirty = False
        _log.info('File %s successfully dumped', self._path)
        return StoreStatus.OK

    def flush(self) -> StoreStatus:
        """Dump only if something changed since the last dump."""
        with self._lock:
            if not self._dirty:
                return StoreStatus.OK
            return self.dump()

    def clear(self) -> None:
        """Forget everything, back to the state before any load."""
        with self._lock:
            self._doc.clear()
            self._path = None
            self._dirty = False

    def sections(self) -> list[str]:
        with self._lock:
            return sorted(self._doc)

    def items(self, section: str) -> list[tuple[str, str]]:
        with self._lock:
            self._ensure_loaded()
            if section not in self._doc:
                raise SectionNotFoundError(f'Section "{section}" not found')
            return self._doc[section].sorted_pairs()

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str) or IDENTIFIER_SEP not in identifier:
            return False
        section, _, key = trim_text(identifier).partition(IDENTIFIER_SEP)
        with self._lock:
            return section in self._doc and key in self._doc[section]

    def __iter__(self) -> Iterator[str]:
        """Every identifier, sorted."""
        with self._lock:
            return iter([
                f'{section.name}.{key}'
                for section in self._doc.sorted_sections()
                for key, _ in section.sorted_pairs()
            ])

    def __len__(self) -> int:
        with self._lock:
            return sum(len(self._doc[i]) for i in self._doc)

    def __repr__(self) -> str:
        return f'<ConfigStore {self._path!r} sections={len(self._doc)}>'
