# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:15:36

"""Read-only INI document and its section views.

    ```ini
    key = val       ; ini.get('key') / ini.header.get('key')

    [section]
    key233 = 666    ; ini.get('key233', section='section')
                    ; ini.section('section').typed_get('key233', 0)
    ```

A document is built once from its text and never changes afterwards,
so it may be shared freely between readers.
"""

from io import StringIO
from typing import Iterable, Iterator, NamedTuple, TextIO

from .convert import find_converter
from .errors import IniError, UnknownEntryError, UnknownSectionError
from .parser import parse

__all__ = ['IniFile', 'IniSection', 'Lookup']

_FALLBACK_ERRORS = (UnknownSectionError, UnknownEntryError)


class Lookup(NamedTuple):
    """Outcome of a strict lookup: either `value` or `error` is set."""
    value: str | None
    error: IniError | None = None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


class IniSection:
    """View over one section of an `IniFile`.

    Holds the document by plain reference and owns nothing; it is only
    valid as long as that document is. `name` is `None` for the default
    section.
    """

    def __init__(self, ini: 'IniFile', name: str | None) -> None:
        self._ini = ini
        self._name = name

    @property
    def name(self) -> str | None:
        return self._name

    def get(self, key: str) -> str:
        return self._ini.get(key, section=self._name)

    def default_get(self, key: str, fallback: str) -> str:
        return self._ini.default_get(key, fallback, section=self._name)

    def typed_get[T](self, key: str, fallback: T) -> T:
        return self._ini.typed_get(key, fallback, section=self._name)

    def to_dict(self) -> dict[str, str]:
        return self._ini._entries(self._name).copy()

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._ini._entries(self._name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ini._entries(self._name))

    def __len__(self) -> int:
        return len(self._ini._entries(self._name))

    def __str__(self) -> str:
        return '<default>' if self._name is None else f'[{self._name}]'

    def __repr__(self) -> str:
        return '%s { .cnt = %d }' % (self, len(self))


class IniFile:
    """A parsed INI document.

    `source` may be an open text file, any other iterable of lines,
    or the whole text as one `str`. Raises `IniSyntaxError` if any line
    is malformed; there is no partially built document.

    Every query takes an optional `section`; `None` means the default
    section, i.e. the entries before the first `[header]`.
    """

    def __init__(self, source: TextIO | Iterable[str] | str) -> None:
        if isinstance(source, str):
            source = StringIO(source)
        parsed = parse(source)
        self.__header = parsed['header']
        self.__sections = parsed['sections']

    def _entries(self, section: str | None) -> dict[str, str]:
        """Raw dict behind `section`, for the views. Do not modify."""
        if section is None:
            return self.__header
        return self.__sections[section]

    def lookup(self, key: str, section: str | None = None) -> Lookup:
        """Strict lookup which reports failure instead of raising it."""
        if section is None:
            if key not in self.__header:
                return Lookup(None, UnknownEntryError(key))
            return Lookup(self.__header[key])

        if section not in self.__sections:
            return Lookup(None, UnknownSectionError(section))
        entries = self.__sections[section]
        if key not in entries:
            return Lookup(None, UnknownEntryError(key, section))
        return Lookup(entries[key])

    def get(self, key: str, section: str | None = None) -> str:
        """Value of `key`.

        Raises:
            UnknownSectionError: `section` was never declared.
            UnknownEntryError: the section has no such key.
        """
        return self.lookup(key, section).unwrap()

    def default_get(
        self, key: str, fallback: str, section: str | None = None
    ) -> str:
        """Like `get()`, but `fallback` for a missing section or key."""
        value, error = self.lookup(key, section)
        if isinstance(error, _FALLBACK_ERRORS):
            return fallback
        if error is not None:
            raise error
        return value

    def typed_get[T](
        self, key: str, fallback: T, section: str | None = None
    ) -> T:
        """Value of `key` converted to the type of `fallback`.

        Supported types are `bool` (`true`, `false`, `1`, `0`), `int`,
        `float` and `str`. The whole value must convert, e.g. `12px`
        is no `int`. Otherwise `fallback` is returned; so is it for a
        `fallback` of any other type (`None`, lists, ...).
        """
        conv = find_converter(type(fallback))
        if conv is None:
            return fallback
        value, error = self.lookup(key, section)
        if isinstance(error, _FALLBACK_ERRORS):
            return fallback
        if error is not None:
            raise error
        ret = conv(value)
        return fallback if ret is None else ret

    def section(self, name: str) -> IniSection:
        if name not in self.__sections:
            raise UnknownSectionError(name)
        return IniSection(self, name)

    @property
    def header(self) -> IniSection:
        """The default section."""
        return IniSection(self, None)

    def sections(self) -> list[str]:
        """Section names, in the order they were first declared."""
        return list(self.__sections)

    def to_dict(self) -> dict[str | None, dict[str, str]]:
        """Copy of everything; the default section is keyed by `None`."""
        ret: dict[str | None, dict[str, str]] = {None: self.__header.copy()}
        for name, entries in self.__sections.items():
            ret[name] = entries.copy()
        return ret

    def __getitem__(self, name: str) -> IniSection:
        return self.section(name)

    def __contains__(self, name: object) -> bool:
        return name in self.__sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __len__(self) -> int:
        return len(self.__sections)

    def __repr__(self) -> str:
        return 'IniFile { .header = %d, .sections = %d }' % (
            len(self.__header), len(self.__sections))
