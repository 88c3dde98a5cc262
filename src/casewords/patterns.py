"""Regex patterns and constants for validating and splitting identifiers.
"""

__docformat__ = 'google'

import re
from typing import Dict, List

# Base character sets for patterns
LETTERS = "A-Za-z"
"""@private"""

DIGITS = "0-9"
"""@private"""

SEPARATORS: List[str] = [" ", "_", "-"]
"""Characters that separate words in validated input.

Whitespace in general also splits words, but only the plain space survives
validation."""

## Validation
# Constants
TRIM_CHARACTERS: str = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
"""Whitespace and line terminators removed from both ends of input.

Narrower than `str.strip()`: the information separators '\\x1c'-'\\x1f' and
NEL '\\x85' are kept, so input that starts or ends with them is rejected as
invalid rather than trimmed.

Used in `casewords.words.validate`."""

# Building blocks
ALLOWED_CHARACTERS: str = f"[{LETTERS}{DIGITS}{''.join(map(re.escape, SEPARATORS))}]"
""" Uncompiled regex building block representing a single permitted character."""

# Patterns
ALLOWED_PATTERN: re.Pattern = re.compile(f"{ALLOWED_CHARACTERS}+")
"""Compiled regex matching a string made only of letters, digits and separators.

Must be applied with `fullmatch`.

Used in `casewords.words.validate`."""

## Tokenizing
# Building blocks
SEPARATOR_RUN: str = "[\\s_-]+"
""" Uncompiled regex building block representing one or more word separators."""

NUMERIC_WORD: str = f"[{DIGITS}]+"
""" Uncompiled regex building block representing a word made only of digits."""

# Patterns
SEPARATOR_PATTERN: re.Pattern = re.compile(SEPARATOR_RUN)
"""Compiled regex matching runs of whitespace, hyphens and underscores.

Used in `casewords.words.tokenize`."""

NUMERIC_WORD_PATTERN: re.Pattern = re.compile(NUMERIC_WORD)
"""Compiled regex matching a purely numeric word.

Must be applied with `fullmatch`.

Used in `casewords.words.is_numeric_word`."""

## Kebab formatting
# Building blocks
CASE_BOUNDARY: str = "([a-z0-9])([A-Z])"
CASE_BOUNDARY_FORMAT: str = r"\1-\2"
KEBAB_SEPARATOR_RUN: str = "[\\s_]+"

# Patterns
CASE_BOUNDARY_PATTERN: re.Pattern = re.compile(CASE_BOUNDARY)
"""Compiled regex matching a lowercase letter or digit followed by an uppercase letter.

Capture groups:
    * the lowercase letter or digit
    * the uppercase letter

Only one character of lookback is used, so runs of capitals such as 'HTTPServer'
are not split internally.

Used in `casewords.cases.to_kebab_case`."""

KEBAB_SEPARATOR_PATTERN: re.Pattern = re.compile(KEBAB_SEPARATOR_RUN)
"""Compiled regex matching runs of whitespace and underscores.

Hyphens are left alone so existing kebab-case input passes through unchanged.

Used in `casewords.cases.to_kebab_case`."""

## Joiners
DOT_JOINER: str = "."
KEBAB_JOINER: str = "-"
CAMEL_JOINER: str = ""

## Error messages
ERROR_MESSAGES: Dict[str, str] = {
    'NOT_A_STRING': 'Error: Input must be a string.',
    'EMPTY_INPUT': 'Error: Input string is empty.',
    'INVALID_CHARACTERS': (
        'Error: Input contains invalid characters. '
        'Only letters, numbers, spaces, "-", and "_" are allowed.'
    ),
    'NUMERIC_ONLY': 'Error: Input cannot be only numbers.',
    'NO_VALID_WORDS': 'Error: Input does not contain any valid words.',
}
"""Human-readable message for each error kind, keyed by `casewords.entities.ErrorKind` name.

Used in `casewords.entities.ErrorKind.message`."""

DEFAULT_ERROR_MESSAGE: str = 'Error: Input could not be converted.'
"""Message for a `casewords.errors.CaseConversionError` raised without a kind or message.

Used in `casewords.errors.CaseConversionError`."""
