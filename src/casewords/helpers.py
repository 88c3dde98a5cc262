"""Small function-composition helpers shared by the conversion modules.
"""

__docformat__ = 'google'

__all__ = [
    'chain_operations'
]

from functools import reduce
from typing import Any, Callable, Iterable

def chain_operations(value: Any, operations: Iterable[Callable[[Any], Any]]) -> Any:
    """
    Apply a sequence of single-argument functions, feeding each result to the next.

    Args:
        value: Initial input
        operations: Functions applied left to right

    Returns:
        Output of the last operation, or `value` itself if there are none

    Example:
        >>> chain_operations(' Abc ', [str.strip, str.lower])
        'abc'
    """
    return reduce(lambda acc, operation: operation(acc), operations, value)
