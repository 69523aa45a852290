# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:03:17

"""Exceptions raised while reading or querying an INI document."""


class IniError(Exception):
    """Base class of everything `inipp` raises on its own."""


class IniSyntaxError(IniError):
    """A header without closing bracket, or a line without `=`."""

    def __init__(self, msg: str, line: str, lineno: int) -> None:
        super().__init__(f'{msg} (line {lineno})')
        self.line = line
        self.lineno = lineno


class UnknownSectionError(IniError, KeyError):
    def __init__(self, section: str) -> None:
        super().__init__(f"Unknown section '{section}'.")
        self.section = section

    # KeyError would repr() the message otherwise.
    def __str__(self) -> str:
        return self.args[0]


class UnknownEntryError(IniError, KeyError):
    def __init__(self, key: str, section: str | None = None) -> None:
        if section is None:
            msg = f"Unknown entry '{key}'."
        else:
            msg = f"Unknown entry '{key}' in section '{section}'."
        super().__init__(msg)
        self.key = key
        self.section = section

    def __str__(self) -> str:
        return self.args[0]
