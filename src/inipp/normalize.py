# -*- encoding: utf-8 -*-
# @File   : normalize.py
# @Time   : 2024/10/12 21:10:42

"""Single line helpers.

Only ASCII whitespace is trimmed; `str.strip()` without arguments
would also eat Unicode spaces, which we don't want here.
"""

WHITESPACE = ' \t\n\r\f\v'
COMMENT_MARKS = '#;'


def trim(line: str, whitespace: str = WHITESPACE) -> str:
    return line.strip(whitespace)


def strip_comment(line: str, marks: str = COMMENT_MARKS) -> str:
    """Cut `line` at the earliest comment mark, if any.

    Same result as stripping each mark in turn, since every pass
    can only shorten the line.
    """
    cut = len(line)
    for mark in marks:
        pos = line.find(mark, 0, cut)
        if pos != -1:
            cut = pos
    return line[:cut]


def normalize(line: str) -> str:
    """trim -> strip comment -> trim, as the parser wants it."""
    return trim(strip_comment(trim(line)))
