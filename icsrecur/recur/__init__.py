"""RECUR value parsing, serialization and validation module."""

from .datetime_value import DateTimeValue
from .exceptions import (
    InvalidInputError,
    MalformedRulePartError,
    MalformedTimestampError,
    RecurError,
)
from .models import Diagnostic, DiagnosticLevel, RepairAction, ValidationOutcome
from .normalizer import normalize_parts
from .parser import string_to_parts
from .serializer import parts_to_json, parts_to_string
from .validator import validate_parts
from .value import RecurValue
from .xml_writer import XmlValueWriter

__all__ = [
    "DateTimeValue",
    "Diagnostic",
    "DiagnosticLevel",
    "InvalidInputError",
    "MalformedRulePartError",
    "MalformedTimestampError",
    "RecurError",
    "RecurValue",
    "RepairAction",
    "ValidationOutcome",
    "XmlValueWriter",
    "normalize_parts",
    "parts_to_json",
    "parts_to_string",
    "string_to_parts",
    "validate_parts",
]
