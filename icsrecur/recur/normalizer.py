"""Canonicalization of rule parts before they are stored."""

import logging
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any

from .exceptions import InvalidInputError
from .models import PartValue, Parts
from .parser import RULE_PART_NAME, split_multi_value, string_to_parts

logger = logging.getLogger(__name__)

UNTIL_STRIP_TABLE = str.maketrans("", "", ":-")


def _strip_until(value: PartValue) -> PartValue:
    if isinstance(value, list):
        return [item.translate(UNTIL_STRIP_TABLE) for item in value]
    return value.translate(UNTIL_STRIP_TABLE)


def normalize_part(name: str, value: Any) -> PartValue:
    """Normalize a single rule-part value according to its shape.

    Scalars are upper-cased, split on commas and, for UNTIL, stripped of ":"
    and "-". Sequences only have their elements upper-cased; they are never
    re-split and UNTIL elements are left as given.

    Args:
        name: Rule-part name in any case
        value: A string, an int, or a list/tuple of strings

    Returns:
        Normalized string or list of strings

    Raises:
        InvalidInputError: If the value has an unsupported type
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"Unsupported value for {name}: {value!r}")

    if isinstance(value, int):
        value = str(value)

    if isinstance(value, str):
        normalized = split_multi_value(value.upper())
        if name.lower() == "until":
            normalized = _strip_until(normalized)
        return normalized

    if isinstance(value, (list, tuple)):
        return [str(item).upper() for item in value]

    raise InvalidInputError(f"Unsupported value for {name}: {type(value).__name__}")


def normalize_parts(value: Any) -> Parts:
    """Turn text, a mapping or a generic key-value object into canonical parts.

    Args:
        value: RRULE text, a mapping of rule parts, or a SimpleNamespace

    Returns:
        New dict with upper-case keys and normalized values

    Raises:
        InvalidInputError: If the value is of any other type or a mapping key is
            not a valid rule-part name
        MalformedRulePartError: If text input contains a malformed part
    """
    # Objects decoded from json arrive as plain attribute bags
    if isinstance(value, SimpleNamespace):
        value = vars(value)

    if isinstance(value, str):
        value = string_to_parts(value)
    elif not isinstance(value, Mapping):
        raise InvalidInputError(
            "You must either pass a string, or a key=>value mapping, "
            f"got {type(value).__name__}"
        )

    parts: Parts = {}
    for name, part_value in value.items():
        if not isinstance(name, str):
            raise InvalidInputError(f"Rule part names must be strings, got {name!r}")
        if not RULE_PART_NAME.fullmatch(name.upper()):
            raise InvalidInputError(f"Invalid rule part name: {name!r}")
        parts[name.upper()] = normalize_part(name, part_value)

    logger.debug(f"Normalized {len(parts)} rule parts: {list(parts)}")
    return parts
