"""Serialization of rule parts to RRULE text and to jCal/xCal values."""

import logging
import re
from typing import Any, Union

from .datetime_value import DateTimeValue
from .exceptions import MalformedTimestampError
from .models import PartValue, Parts
from .parser import NAME_SEPARATOR, PART_SEPARATOR, VALUE_SEPARATOR

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parts_to_string(parts: Parts) -> str:
    """Render rule parts as a single RRULE line.

    Args:
        parts: Rule parts in the order they should be written

    Returns:
        Upper-case RRULE text, e.g. "FREQ=MONTHLY;BYDAY=1,2,3"
    """
    out = []
    for key, value in parts.items():
        rendered = VALUE_SEPARATOR.join(value) if isinstance(value, list) else value
        out.append(f"{key}{NAME_SEPARATOR}{rendered}")
    return PART_SEPARATOR.join(out).upper()


def coerce_count(value: PartValue) -> int:
    """Convert a COUNT value to an int using its leading digits.

    Values without leading digits become 0, a list uses its first element.
    """
    if isinstance(value, list):
        if len(value) > 1:
            logger.warning(f"COUNT has multiple values {value}, using the first one")
        value = value[0] if value else ""

    match = _LEADING_INT.match(value)
    if not match:
        logger.warning(f"COUNT value '{value}' is not numeric, using 0")
        return 0
    if match.end() != len(value):
        logger.warning(f"COUNT value '{value}' has trailing characters, using {match.group(1)}")
    return int(match.group(1))


def parts_to_json(parts: Parts, root: Any = None) -> list[dict[str, Union[PartValue, int]]]:
    """Convert rule parts to the jCal/xCal representation.

    Args:
        parts: Normalized rule parts
        root: Owning document, handed to the date-time value for UNTIL

    Returns:
        A list holding exactly one dict with lower-case keys

    Raises:
        MalformedTimestampError: If UNTIL is not a valid packed date or date-time
    """
    values: dict[str, Union[PartValue, int]] = {}
    for key, value in parts.items():
        if key == "UNTIL":
            date = DateTimeValue(root, None, value)
            json_values = date.get_json_value()
            if not json_values:
                raise MalformedTimestampError("UNTIL has no value", value=None)
            values[key.lower()] = json_values[0]
        elif key == "COUNT":
            values[key.lower()] = coerce_count(value)
        else:
            values[key.lower()] = value
    return [values]
