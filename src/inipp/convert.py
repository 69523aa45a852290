# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/10/13 00:41:58

"""Text to value conversions used by `typed_get()`.

Each converter must accept the *whole* text or nothing. The builtin
`int()`/`float()` are too lenient for that (surrounding whitespace,
`1_000`, `inf`, ...), so the shape is checked with a regex first.
"""

from re import compile as regex
from typing import Callable

__all__ = [
    'convert', 'converter_for', 'find_converter',
    'to_bool', 'to_int', 'to_float'
]

_INT = regex(r'[+-]?[0-9]+')
_FLOAT = regex(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')

_BOOLS = {'true': True, 'false': False, '1': True, '0': False}


def to_bool(text: str) -> bool | None:
    return _BOOLS.get(text)


def to_int(text: str) -> int | None:
    if _INT.fullmatch(text) is None:
        return None
    return int(text)


def to_float(text: str) -> float | None:
    if _FLOAT.fullmatch(text) is None:
        return None
    return float(text)


def to_str(text: str) -> str:
    return text


# bool before int: bool is a subclass of int.
_CONVERTERS: list[tuple[type, Callable[[str], object]]] = [
    (bool, to_bool),
    (int, to_int),
    (float, to_float),
    (str, to_str),
]


def find_converter(target: type) -> Callable[[str], object] | None:
    for typ, conv in _CONVERTERS:
        if issubclass(target, typ):
            return conv
    return None


def converter_for(target: type) -> Callable[[str], object]:
    conv = find_converter(target)
    if conv is not None:
        return conv
    raise TypeError(f'No conversion to {target.__name__!r} available.')


def convert[T](text: str, target: type[T]) -> T | None:
    """Convert `text` to `target`, or `None` if it doesn't fit."""
    return converter_for(target)(text)  # type: ignore[return-value]
