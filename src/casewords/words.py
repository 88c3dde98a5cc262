"""Input validation and word splitting.

All validated formatters in `casewords.cases` share the same pipeline:
    1. `validate` checks the type, trims, and rejects empty input or
       characters outside letters, digits, spaces, hyphens and underscores.
    2. `tokenize` splits the trimmed string on runs of separators and rejects
       input that yields no words or only numeric words.

`split_words` runs both steps.
"""

__docformat__ = 'google'

__all__ = [
    'validate',
    'tokenize',
    'split_words',
    'is_numeric_word'
]

import logging
from typing import Any, List
from casewords.errors import (
    NotAStringError,
    EmptyInputError,
    InvalidCharactersError,
    NumericOnlyError,
    NoValidWordsError
)
from casewords.helpers import chain_operations
from casewords.patterns import (
    ALLOWED_PATTERN,
    SEPARATOR_PATTERN,
    NUMERIC_WORD_PATTERN,
    TRIM_CHARACTERS
)

logger = logging.getLogger(__name__)

def validate(value: Any) -> str:
    """
    Check that a value is a non-empty string of permitted characters.

    Args:
        value: Raw input of any type

    Returns:
        The input with leading and trailing whitespace removed

    Raises:
        NotAStringError: `value` is not a `str`
        EmptyInputError: Nothing is left after trimming
        InvalidCharactersError: A character other than a letter, digit, space, '-' or '_' is present

    Example:
        >>> validate('  abra kadabra ')
        'abra kadabra'
        >>> validate('112312#@@#')
        Traceback (most recent call last):
            ...
        casewords.errors.InvalidCharactersError: Error: Input contains invalid characters. ...
    """
    if not isinstance(value, str):
        logger.debug("Rejected %s input: not a string", type(value).__name__)
        raise NotAStringError()

    trimmed = value.strip(TRIM_CHARACTERS)
    if len(trimmed) == 0:
        logger.debug("Rejected input: empty after trimming")
        raise EmptyInputError()

    if ALLOWED_PATTERN.fullmatch(trimmed) is None:
        logger.debug("Rejected input %r: invalid characters", trimmed)
        raise InvalidCharactersError()

    return trimmed

def is_numeric_word(word: str) -> bool:
    return NUMERIC_WORD_PATTERN.fullmatch(word) is not None

def tokenize(text: str) -> List[str]:
    """
    Split a validated string into words on runs of whitespace, hyphens and underscores.

    Leading and trailing separators never produce empty words.

    Args:
        text: Output of `validate`

    Returns:
        Ordered list of non-empty words

    Raises:
        NoValidWordsError: `text` contains only separators
        NumericOnlyError: Every word is made of digits only

    Example:
        >>> tokenize('abra kadabra_123')
        ['abra', 'kadabra', '123']
        >>> tokenize('-leading--and__trailing-')
        ['leading', 'and', 'trailing']
    """
    words = [word for word in SEPARATOR_PATTERN.split(text) if word]

    # an empty list is vacuously all-numeric, so this check comes first
    if not words:
        logger.debug("Rejected input %r: no words", text)
        raise NoValidWordsError()

    if all(map(is_numeric_word, words)):
        logger.debug("Rejected input %r: numeric words only", text)
        raise NumericOnlyError()

    return words

def split_words(value: Any) -> List[str]:
    """
    Validate a raw value and split it into words.

    Args:
        value: Raw input of any type

    Returns:
        Ordered list of non-empty words

    Raises:
        CaseConversionError: Any of the errors raised by `validate` or `tokenize`

    Example:
        >>> split_words(' Hello World_Test ')
        ['Hello', 'World', 'Test']
    """
    return chain_operations(value, [validate, tokenize])
