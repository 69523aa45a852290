# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 20:48:09

import logging

from .errors import (
    IniError, IniSyntaxError, UnknownEntryError, UnknownSectionError
)
from .model import IniFile, IniSection
from .reader import IniReader, load, loads

__version__ = '1.0'

__all__ = [
    'IniFile', 'IniSection', 'IniReader', 'load', 'loads',
    'IniError', 'IniSyntaxError', 'UnknownEntryError', 'UnknownSectionError'
]

# library: leave handler setup to the application.
logging.getLogger(__name__).addHandler(logging.NullHandler())
