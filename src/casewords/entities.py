from dataclasses import dataclass
from enum import Enum
from typing import Optional
from casewords.patterns import ERROR_MESSAGES

class CaseStyle(Enum):
    """
    Enumeration of target casings accepted by `casewords.cases.convert`.
    """
    CAMEL = "camelCase"
    DOT = "dot.case"
    KEBAB = "kebab-case"

class ErrorKind(Enum):
    """
    Enumeration of the ways an input can be rejected.

    Each kind maps to exactly one `casewords.errors.CaseConversionError` subclass.
    """
    NOT_A_STRING = "NotAString"
    EMPTY_INPUT = "EmptyInput"
    INVALID_CHARACTERS = "InvalidCharacters"
    NUMERIC_ONLY = "NumericOnly"
    NO_VALID_WORDS = "NoValidWords"

    @property
    def message(self) -> str:
        """Human-readable error text, as listed in `casewords.patterns.ERROR_MESSAGES`."""
        return ERROR_MESSAGES[self.name]

@dataclass(frozen=True)
class Result:
    """
    Outcome of a single conversion: either a converted string or an error kind.

    Build instances with `Result.ok` or `Result.err` rather than the constructor.

    Args:
        value: Converted string, set only on success
        error: Reason for failure, set only on failure

    Example:
        >>> Result.ok('abraKadabra').is_ok
        True
        >>> Result.err(ErrorKind.EMPTY_INPUT).message
        'Error: Input string is empty.'
    """
    value: Optional[str] = None
    error: Optional[ErrorKind] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("Result must hold exactly one of value or error")

    @classmethod
    def ok(cls, value: str) -> 'Result':
        return cls(value=value)

    @classmethod
    def err(cls, error: ErrorKind) -> 'Result':
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """Error text for a failed result, None on success."""
        if self.error is None:
            return None
        return self.error.message

    def unwrap(self) -> str:
        """
        Return the converted string, raising the matching exception on failure.

        Raises:
            CaseConversionError: The subclass matching `error`
        """
        if self.error is None:
            return self.value
        from casewords.errors import error_for
        raise error_for(self.error)
