"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import cases
from . import words
from . import frames
from . import patterns
from . import entities
from . import errors

from .cases import (
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_strict_kebab_case,
    convert,
    try_convert,
    error_message
)
from .entities import CaseStyle, ErrorKind, Result
from .errors import CaseConversionError

__all__ = [
    'cases',
    'words',
    'frames',
    'patterns',
    'entities',
    'errors',
    'to_camel_case',
    'to_dot_case',
    'to_kebab_case',
    'to_strict_kebab_case',
    'convert',
    'try_convert',
    'error_message',
    'CaseStyle',
    'ErrorKind',
    'Result',
    'CaseConversionError'
]
