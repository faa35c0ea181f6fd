"""Exceptions raised while configuring, parsing and combining sets.

Every exception defined here derives from SetsError. Where a builtin
exception already names the category of failure (a bad value), the
exception also derives from that builtin so that callers who do not know
about this package can still catch it.
"""

import enum
from typing import Optional


class SetsError(Exception):
    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f'{self.message} - Details: {self.details}'
        return self.message


class SetsConfigurationError(SetsError, ValueError):
    """Invalid terminators or converters in an extraction configuration."""


class ExpressionSyntaxError(SetsError, ValueError):
    """A set expression whose structure cannot be parsed.

    offset is the zero-based index into expression of the first character
    that could not be accepted.
    """

    def __init__(
        self,
        message: str,
        expression: str,
        offset: int,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details)
        self.expression = expression
        self.offset = offset

    def __repr__(self) -> str:
        return f'{type(self).__qualname__}({self.message!r}, {self.expression!r}, {self.offset!r})'


class MissingBrace(enum.Enum):
    OPENING = 'opening'
    CLOSING = 'closing'
    BOTH = 'opening and closing'


class MissingBraceError(ExpressionSyntaxError):
    def __init__(
        self,
        missing: MissingBrace,
        expression: str,
        offset: int,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(
            f'Missing {missing.value} brace', expression, offset, details
        )
        self.missing = missing


class ElementConversionError(SetsError, ValueError):
    def __init__(self, text: str, target_type: object) -> None:
        type_name = getattr(target_type, '__qualname__', repr(target_type))
        super().__init__(
            'Conversion failed due to invalid format',
            f"Failed to convert the string '{text}' to type of '{type_name}'",
        )
        self.text = text
        self.target_type = target_type
        # Filled in by the parser once it knows where text came from.
        self.expression: Optional[str] = None
        self.offset: Optional[int] = None


class SetsOperationError(SetsError):
    """An operation between sets whose preconditions do not hold."""
