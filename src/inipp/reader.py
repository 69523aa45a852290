# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2024/10/13 01:02:11

"""Entry points from files and strings to `IniFile`."""

import logging
from io import StringIO
from typing import TextIO

import chardet

from .abstract import FileHandler
from .model import IniFile

__all__ = ['IniReader', 'load', 'loads']

_log = logging.getLogger(__name__)


class IniReader(FileHandler[IniFile]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        return self._codec

    @staticmethod
    def _decode_file(
        filename: str, tried: str | None = None
    ) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        _log.warning('%s: not readable as %s, decoding as %s',
                     filename, tried or 'system default',
                     codec['encoding'])

        # latin-1 maps every byte, so this one cannot fail.
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(self) -> IniFile:
        """Parse the file this reader points at.

        With `encoding=None` `open()` uses the system default. If the
        text turns out not to be in that encoding, the raw bytes are
        handed to `chardet` instead.

        Lines end at line feeds only, as with `loads()`; a bare carriage
        return stays part of its line.
        """
        try:
            with open(self._fn, 'r', encoding=self._codec,
                      newline='\n') as fp:
                return IniFile(fp)
        except UnicodeDecodeError:
            return IniFile(self._decode_file(self._fn, self._codec))

    def __str__(self) -> str:
        return f'INI file: {self._fn} ({self._codec})'


def load(fp: TextIO) -> IniFile:
    return IniFile(fp)


def loads(text: str) -> IniFile:
    return IniFile(StringIO(text))
