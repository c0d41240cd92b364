"""RRULE text parsing for RECUR values."""

import logging
import re

from .exceptions import MalformedRulePartError
from .models import PartValue, Parts

logger = logging.getLogger(__name__)

PART_SEPARATOR = ";"
NAME_SEPARATOR = "="
VALUE_SEPARATOR = ","

# Part names double as xCal element tags
RULE_PART_NAME = re.compile(r"[A-Z][A-Z0-9-]*")


def split_multi_value(value: str) -> PartValue:
    """Split a rule-part value into sub-values when it holds more than one.

    Args:
        value: Raw rule-part value (e.g. "MO,WE,FR")

    Returns:
        The value unchanged, or a list of sub-values if it contained a comma
    """
    if VALUE_SEPARATOR in value:
        return value.split(VALUE_SEPARATOR)
    return value


def string_to_parts(value: str) -> Parts:
    """Parse an RRULE value string into an ordered dict of rule parts.

    The string must already be unfolded; backslash escapes are not processed.

    Args:
        value: RRULE value (e.g. "FREQ=MONTHLY;BYDAY=1,2,3;BYHOUR=5")

    Returns:
        Dictionary mapping upper-case part names to a string or list of strings

    Raises:
        MalformedRulePartError: If a part has no "=" separator or an invalid name
    """
    value = value.upper()
    parts: Parts = {}

    for part in value.split(PART_SEPARATOR):
        # Skipping empty parts, e.g. from a trailing ";"
        if not part:
            continue

        if NAME_SEPARATOR not in part:
            raise MalformedRulePartError(
                f"Rule part '{part}' is missing a '{NAME_SEPARATOR}' separator", part=part
            )
        part_name, part_value = part.split(NAME_SEPARATOR, 1)
        if not RULE_PART_NAME.fullmatch(part_name):
            raise MalformedRulePartError(f"Rule part '{part}' has an invalid name", part=part)

        if part_name in parts:
            logger.debug(f"Duplicate rule part {part_name}, keeping the last occurrence")

        parts[part_name] = split_multi_value(part_value)

    return parts
