"""RECUR-value exceptions for error handling."""

from typing import Optional


class RecurError(Exception):
    """Base exception for RECUR value errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(RecurError, TypeError):
    """Exception raised when a value of an unsupported shape is assigned."""


class MalformedRulePartError(RecurError, ValueError):
    """Exception raised when a rule part has no name/value separator."""

    def __init__(self, message: str, part: Optional[str] = None):
        super().__init__(message)
        self.part = part


class MalformedTimestampError(RecurError, ValueError):
    """Exception raised when an UNTIL value is not a packed date or date-time."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value
