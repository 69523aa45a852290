# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 21:24:05

"""Line-by-line INI tokenizer.

Supported forms (comments may start anywhere with `#` or `;`):

    ```ini
    key = val       ; lands in the default section
    [section]
    key = a=b       # split at the first `=` only
    []              ; a section literally named ''
    [section]       ; reopened, keys merge into the first one
    ```

No quoting, no escapes, no continuation lines.
"""

import logging
from typing import Iterable, TypedDict

from .errors import IniSyntaxError
from .normalize import normalize, trim

__all__ = ['ParsedIni', 'parse']

_log = logging.getLogger(__name__)


class ParsedIni(TypedDict):
    header: dict[str, str]
    sections: dict[str, dict[str, str]]


def parse(lines: Iterable[str]) -> ParsedIni:
    """Read every line of `lines` and collect sections and entries.

    Raises `IniSyntaxError` on the first malformed line; nothing
    parsed so far is returned in that case.
    """
    ret = ParsedIni(header={}, sections={})
    this_sect = ret['header']
    lineno = 0
    for lineno, raw in enumerate(lines, 1):
        line = normalize(raw)
        if not line:
            continue

        if line[0] == '[':
            if line[-1] != ']':
                raise IniSyntaxError(
                    f"The section '{line}' is missing a closing bracket.",
                    line, lineno)
            name = trim(line[1:-1])
            if name in ret['sections']:
                _log.debug('section [%s] reopened at line %d', name, lineno)
            this_sect = ret['sections'].setdefault(name, {})
            continue

        key, sep, val = line.partition('=')
        if not sep:
            raise IniSyntaxError(
                f"The line '{line}' is invalid.", line, lineno)
        this_sect[trim(key)] = trim(val)

    _log.debug('parsed %d lines: %d default entries, %d sections',
               lineno, len(ret['header']), len(ret['sections']))
    return ret
