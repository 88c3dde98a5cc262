"""Case formatters and conversion entry points.

The camelCase, dot.case and strict kebab-case formatters validate their input
with `casewords.words.split_words` and raise a
`casewords.errors.CaseConversionError` subclass when it is rejected.

`to_kebab_case` is a plain regex pipeline: it splits camelCase and PascalCase
boundaries and separator runs, and performs no validation beyond requiring a
string. Use `to_strict_kebab_case` (or `convert(..., strict=True)`) for the
validated behaviour.
"""

__docformat__ = 'google'

__all__ = [
    'to_camel_case',
    'to_dot_case',
    'to_kebab_case',
    'to_strict_kebab_case',
    'convert',
    'try_convert',
    'error_message'
]

import logging
from typing import Any, Callable, List, Union
from casewords.entities import CaseStyle, Result
from casewords.errors import CaseConversionError, NotAStringError
from casewords.helpers import chain_operations
from casewords.words import split_words
from casewords.patterns import (
    CASE_BOUNDARY_PATTERN,
    CASE_BOUNDARY_FORMAT,
    KEBAB_SEPARATOR_PATTERN,
    CAMEL_JOINER,
    DOT_JOINER,
    KEBAB_JOINER
)

logger = logging.getLogger(__name__)

def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()

def _camel_words(words: List[str]) -> List[str]:
    first, *rest = words
    return [first.lower(), *map(_capitalize, rest)]

def _lower_words(words: List[str]) -> List[str]:
    return list(map(str.lower, words))

def to_camel_case(value: Any) -> str:
    """
    Convert a string to camelCase.

    The first word is lowercased; each following word is capitalized with the
    rest of it lowercased. Words are only split on separators, so existing
    capitals inside a word are folded.

    Args:
        value: String of letters, digits, spaces, '-' and '_'

    Returns:
        camelCase string

    Raises:
        CaseConversionError: The input was rejected

    Example:
        >>> to_camel_case('abra-kadabra')
        'abraKadabra'
        >>> to_camel_case('abra kadabra_123')
        'abraKadabra123'
    """
    words = _camel_words(split_words(value))
    return CAMEL_JOINER.join(words)

def to_dot_case(value: Any) -> str:
    """
    Convert a string to dot.case.

    Args:
        value: String of letters, digits, spaces, '-' and '_'

    Returns:
        Lowercase words joined by '.'

    Raises:
        CaseConversionError: The input was rejected

    Example:
        >>> to_dot_case('abra kadabra_123')
        'abra.kadabra.123'
    """
    words = _lower_words(split_words(value))
    return DOT_JOINER.join(words)

def to_strict_kebab_case(value: Any) -> str:
    """
    Convert a string to kebab-case with the same validation as `to_camel_case`.

    Unlike `to_kebab_case`, camelCase boundaries are not split.

    Example:
        >>> to_strict_kebab_case(' Hello World_Test ')
        'hello-world-test'
    """
    words = _lower_words(split_words(value))
    return KEBAB_JOINER.join(words)

def _split_case_boundaries(text: str) -> str:
    return CASE_BOUNDARY_PATTERN.sub(CASE_BOUNDARY_FORMAT, text)

def _hyphenate_separators(text: str) -> str:
    return KEBAB_SEPARATOR_PATTERN.sub(KEBAB_JOINER, text)

def to_kebab_case(text: str) -> str:
    """
    Convert a string to kebab-case.

    Operations performed:
        1. Insert '-' between a lowercase letter or digit and a following uppercase letter
        2. Replace runs of whitespace and underscores with a single '-'
        3. Lowercase the result

    Empty, numeric-only and punctuated input is passed through the same steps
    without being rejected.

    Args:
        text: Any string

    Returns:
        kebab-case string

    Raises:
        NotAStringError: `text` is not a `str`

    Example:
        >>> to_kebab_case('myVariableName')
        'my-variable-name'
        >>> to_kebab_case('Hello World_Test')
        'hello-world-test'
    """
    if not isinstance(text, str):
        logger.debug("Rejected %s input: not a string", type(text).__name__)
        raise NotAStringError()

    kebab_operations = [
        _split_case_boundaries
        , _hyphenate_separators
        , str.lower
    ]
    return chain_operations(text, kebab_operations)

FORMATTERS = {
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.DOT: to_dot_case,
    CaseStyle.KEBAB: to_kebab_case,
}
"""@private"""

def _formatter(style: Union[CaseStyle, str], strict: bool) -> Callable[[Any], str]:
    style = CaseStyle(style)
    if style is CaseStyle.KEBAB and strict:
        return to_strict_kebab_case
    return FORMATTERS[style]

def convert(value: Any, style: Union[CaseStyle, str], strict: bool = False) -> str:
    """
    Convert a string to the requested case style.

    Args:
        value: Input to convert
        style: A `casewords.entities.CaseStyle` or its value, e.g. 'dot.case'
        strict: Validate kebab-case input like the other styles

    Returns:
        Converted string

    Raises:
        CaseConversionError: The input was rejected
        ValueError: `style` is not a known case style

    Example:
        >>> convert('abra kadabra', 'camelCase')
        'abraKadabra'
        >>> convert('abra kadabra', CaseStyle.DOT)
        'abra.kadabra'
    """
    return _formatter(style, strict)(value)

def try_convert(value: Any, style: Union[CaseStyle, str], strict: bool = False) -> Result:
    """
    Convert a string, returning a `casewords.entities.Result` instead of raising.

    Only rejected input is captured; an unknown `style` still raises `ValueError`.

    Example:
        >>> try_convert('abra-kadabra', 'camelCase').value
        'abraKadabra'
        >>> try_convert('123 456', 'dot.case').error
        <ErrorKind.NUMERIC_ONLY: 'NumericOnly'>
    """
    formatter = _formatter(style, strict)
    try:
        return Result.ok(formatter(value))
    except CaseConversionError as e:
        return Result.err(e.kind)

def error_message(value: Any, style: Union[CaseStyle, str], strict: bool = False) -> str:
    """
    Convert a string, returning the error message text on failure.

    Example:
        >>> error_message(123123, 'camelCase')
        'Error: Input must be a string.'
    """
    result = try_convert(value, style, strict)
    return result.value if result.is_ok else result.message

