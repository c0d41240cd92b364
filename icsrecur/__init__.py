"""icsrecur - iCalendar RECUR value parsing, conversion and validation."""

__version__ = "1.0.0"

from .recur import (
    Diagnostic,
    DiagnosticLevel,
    InvalidInputError,
    MalformedRulePartError,
    MalformedTimestampError,
    RecurError,
    RecurValue,
    RepairAction,
    ValidationOutcome,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "InvalidInputError",
    "MalformedRulePartError",
    "MalformedTimestampError",
    "RecurError",
    "RecurValue",
    "RepairAction",
    "ValidationOutcome",
    "__version__",
]
