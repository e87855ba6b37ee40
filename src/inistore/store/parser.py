# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 21:48:27
# @Author : Kariko Lin

"""Reads and writes the plain config INI:

    ```ini
    ; comments only at line start
    [section]
    key = value
    ```

Writing is always sorted by section name, then by key, so dumping the
same document twice gives the same bytes. Comments are not kept.
"""

import logging
import os
from io import StringIO, TextIOBase
from os.path import abspath, dirname
from tempfile import NamedTemporaryFile

import chardet

from ..abstract import FileHandler
from .consts import (
    COMMENT_MARK, DEFAULT_DELIMITER, PAIRING,
    SECTION_CLOSE, SECTION_OPEN
)
from .model import IniDocument, trim_text

_log = logging.getLogger(__name__)

# surrogates stand for raw bytes no codec could decode.
WRITE_ERRORS = 'surrogateescape'


class IniStoreParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        delimiter: str = DEFAULT_DELIMITER,
        blank_lines: int = 1
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._delimiter = delimiter
        self._blank_lines = blank_lines

    @staticmethod
    def readstream(
        buf: TextIOBase, doc: IniDocument | None = None
    ) -> IniDocument:
        """读取解码好的字符串流，合并进`doc`（如有）。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        if doc is None:
            doc = IniDocument()
        section = ''
        lineno = 0
        while i := buf.readline():
            lineno += 1
            line = i.rstrip('\r\n')
            if not line or line[0] == COMMENT_MARK:
                continue
            if line[0] == SECTION_OPEN and line[-1] == SECTION_CLOSE:
                # only brackets are stripped here.
                section = line[1:-1]
                continue
            if PAIRING in line:
                key, val = line.split(PAIRING, 1)
                doc.put(section, trim_text(key), trim_text(val))
            else:
                _log.debug('Line %d skipped: %r', lineno, line)
        return doc

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < 0.8):
            codec = {'encoding': 'utf-8'}

        # fallbacks, the last one keeps undecodable bytes as they are.
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            try:
                buf = raw.decode('gbk')
            except UnicodeDecodeError:
                buf = raw.decode('utf-8', errors=WRITE_ERRORS)
        return StringIO(buf)

    def read(self, doc: IniDocument | None = None) -> IniDocument:
        """读取`IniStoreParser`实例指定的文件。

        May raise `OSError` when the file is unable to open.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong, fallback to `chardet`.
            with open(self.path, 'r', encoding=self._codec) as fp:
                text = StringIO(fp.read())
        except UnicodeDecodeError:
            _log.info('Unable to decode %s with %s, guessing encoding',
                      self.path, self._codec or 'default codec')
            text = self._decode_file(self.path)
        return self.readstream(text, doc)

    def writestream(self, instance: IniDocument, buf: TextIOBase) -> None:
        for section in instance.sorted_sections():
            buf.write(f'{SECTION_OPEN}{section.name}{SECTION_CLOSE}\n')
            for k, v in section.sorted_pairs():
                buf.write(f'{k}{self._delimiter}{v}\n')
            buf.write('\n' * self._blank_lines)

    def dumps(self, instance: IniDocument) -> str:
        buf = StringIO()
        self.writestream(instance, buf)
        return buf.getvalue()

    def write(self, instance: IniDocument) -> None:
        """保存到`self.path`。

        Text goes to a temporary file beside the target first, which then
        replaces the target. A failed write leaves the old file untouched.
        Bytes kept from an undecodable file are written back unchanged.
        May raise `OSError`, or `UnicodeEncodeError` when a value does not
        fit the encoding.
        """
        text = self.dumps(instance)
        target = abspath(self.path)
        with NamedTemporaryFile(
            'w', encoding=self._codec, errors=WRITE_ERRORS,
            dir=dirname(target),
            prefix='.', suffix='.tmp', delete=False
        ) as fp:
            tmpname = fp.name
            try:
                fp.write(text)
            except BaseException:
                fp.close()
                os.unlink(tmpname)
                raise
        try:
            if self.exists():
                # keep permission bits of the original file.
                os.chmod(tmpname, os.stat(target).st_mode & 0o7777)
            os.replace(tmpname, target)
        except OSError:
            os.unlink(tmpname)
            raise

    def __str__(self) -> str:
        return "INI store: " + super().__str__() + f"({self._codec})"
