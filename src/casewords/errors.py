"""Exceptions raised when an input cannot be converted.

Every exception carries its `casewords.entities.ErrorKind` as `kind`, and its
string form is the kind's human-readable message.
"""

__docformat__ = 'google'

__all__ = [
    'CaseConversionError',
    'NotAStringError',
    'EmptyInputError',
    'InvalidCharactersError',
    'NumericOnlyError',
    'NoValidWordsError',
    'error_for'
]

from typing import Dict, Optional, Type
from casewords.entities import ErrorKind
from casewords.patterns import DEFAULT_ERROR_MESSAGE

class CaseConversionError(ValueError):
    """Base class for rejected input.

    The base class has no `kind`; raised directly it uses the message it is
    given, or a generic one.
    """
    kind: Optional[ErrorKind] = None

    def __init__(self, message: str = None):
        if message is None:
            message = DEFAULT_ERROR_MESSAGE if self.kind is None else self.kind.message
        super().__init__(message)

class NotAStringError(CaseConversionError, TypeError):
    kind = ErrorKind.NOT_A_STRING

class EmptyInputError(CaseConversionError):
    kind = ErrorKind.EMPTY_INPUT

class InvalidCharactersError(CaseConversionError):
    kind = ErrorKind.INVALID_CHARACTERS

class NumericOnlyError(CaseConversionError):
    kind = ErrorKind.NUMERIC_ONLY

class NoValidWordsError(CaseConversionError):
    kind = ErrorKind.NO_VALID_WORDS

ERRORS_BY_KIND: Dict[ErrorKind, Type[CaseConversionError]] = {
    cls.kind: cls for cls in (
        NotAStringError,
        EmptyInputError,
        InvalidCharactersError,
        NumericOnlyError,
        NoValidWordsError
    )
}
"""@private"""

def error_for(kind: ErrorKind) -> CaseConversionError:
    """
    Build the exception matching an error kind.

    Example:
        >>> error_for(ErrorKind.NUMERIC_ONLY)
        NumericOnlyError('Error: Input cannot be only numbers.')
    """
    return ERRORS_BY_KIND[kind]()
