"""Case conversion for pandas Series values and DataFrame column labels.

Both functions accept an `errors` argument modelled on `pandas.to_numeric`:
    * 'raise': the first rejected value propagates its `casewords.errors.CaseConversionError`
    * 'coerce': rejected values become missing (Series only)
    * 'ignore': rejected values are kept unchanged
"""

__docformat__ = 'google'

__all__ = [
    'convert_series',
    'rename_columns'
]

import logging
from collections import Counter
from typing import Union
import pandas as pd
from casewords.cases import convert, try_convert
from casewords.entities import CaseStyle

logger = logging.getLogger(__name__)

ERROR_MODES = ('raise', 'coerce', 'ignore')
"""@private"""

def _check_errors(errors: str, allowed=ERROR_MODES):
    if errors not in allowed:
        raise ValueError(f"errors must be one of {', '.join(allowed)}, got {errors!r}")

def convert_series(
        series: pd.Series,
        style: Union[CaseStyle, str],
        errors: str = 'raise',
        strict: bool = False
        ) -> pd.Series:
    """
    Convert every value of a Series to the requested case style.

    Args:
        series: Values to convert; non-string values are rejected like any other invalid input
        style: A `casewords.entities.CaseStyle` or its value
        errors: One of 'raise', 'coerce' or 'ignore'
        strict: Validate kebab-case input like the other styles

    Returns:
        New Series with the same index and name

    Raises:
        CaseConversionError: A value was rejected and `errors` is 'raise'
        ValueError: `errors` or `style` is not recognised

    Example:
        >>> convert_series(pd.Series(['abra kadabra', 'hocus_pocus']), 'dot.case').tolist()
        ['abra.kadabra', 'hocus.pocus']
        >>> convert_series(pd.Series(['ok value', '#']), 'camelCase', errors='coerce').tolist()
        ['okValue', None]
    """
    _check_errors(errors)
    style = CaseStyle(style)

    if errors == 'raise':
        return series.map(lambda value: convert(value, style, strict=strict))

    results = series.map(lambda value: try_convert(value, style, strict=strict))
    failed = results.map(lambda result: not result.is_ok).astype(bool)
    if failed.any():
        logger.debug("%d of %d values could not be converted to %s", failed.sum(), len(series), style.value)

    converted = results.map(lambda result: result.value).astype(object)
    if errors == 'ignore':
        converted = converted.mask(failed, series)
    return converted

def rename_columns(
        frame: pd.DataFrame,
        style: Union[CaseStyle, str],
        errors: str = 'raise',
        strict: bool = False
        ) -> pd.DataFrame:
    """
    Return a copy of a DataFrame with its column labels converted.

    Args:
        frame: DataFrame whose columns should be renamed
        style: A `casewords.entities.CaseStyle` or its value
        errors: 'raise' or 'ignore'
        strict: Validate kebab-case input like the other styles

    Returns:
        Renamed copy of `frame`

    Raises:
        CaseConversionError: A label was rejected and `errors` is 'raise'
        ValueError: Two labels convert to the same name, or `errors` is not recognised

    Example:
        >>> frame = pd.DataFrame(columns=['First Name', 'last_name'])
        >>> rename_columns(frame, 'camelCase').columns.tolist()
        ['firstName', 'lastName']
    """
    _check_errors(errors, allowed=('raise', 'ignore'))
    labels = convert_series(pd.Series(frame.columns, dtype=object), style, errors=errors, strict=strict)

    duplicates = [label for label, count in Counter(labels).items() if count > 1]
    if duplicates:
        raise ValueError(f"Column labels collide after conversion: {', '.join(map(str, duplicates))}")

    return frame.rename(columns=dict(zip(frame.columns, labels)))
