"""RECUR property value.

This object represents RECUR values, as used by RRULE and the deprecated
EXRULE. An RRULE may look something like this:

    RRULE:FREQ=MONTHLY;BYDAY=1,2,3;BYHOUR=5

The value is exposed as an ordered dict of rule parts through get_parts, and
may be replaced through set_parts or set_value.
"""

from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any

from ..utils.logging import get_logger
from .exceptions import InvalidInputError
from .models import Diagnostic, Parts, ValidationOutcome
from .normalizer import normalize_parts
from .serializer import parts_to_json, parts_to_string
from .validator import validate_parts
from .xml_writer import XmlValueWriter

logger = get_logger(__name__)

VALUE_TYPE = "RECUR"


class RecurValue:
    """Structured RECUR value with text, dict and jCal/xCal representations."""

    def __init__(self, value: Any = None, name: str = "RRULE", root: Any = None):
        """Initialize the value.

        Args:
            value: Optional initial RRULE text, mapping or SimpleNamespace
            name: Name of the owning property, used in diagnostics
            root: Owning document, passed on to the UNTIL date-time value
        """
        self.name = name
        self.root = root
        self._parts: Parts = {}
        if value is not None:
            self.set_value(value)

    def set_value(self, value: Any) -> None:
        """Replace the current value.

        Args:
            value: RRULE text, a mapping of rule parts (values may be strings
                or lists of strings) or a SimpleNamespace

        Raises:
            InvalidInputError: If value is of any other type
            MalformedRulePartError: If text contains a part without "="
        """
        self._parts = normalize_parts(value)

    def get_value(self) -> str:
        """Returns the value as a single RRULE string.

        Use get_parts for the multi-valued version.
        """
        return parts_to_string(self._parts)

    def set_parts(self, parts: Mapping[str, Any]) -> None:
        """Replace the value from a mapping of rule parts."""
        self.set_value(parts)

    def get_parts(self) -> Parts:
        """Returns a copy of the rule parts.

        Single values are strings, multiple values are lists of strings.
        """
        return {
            key: list(value) if isinstance(value, list) else value
            for key, value in self._parts.items()
        }

    def set_raw_mime_dir_value(self, value: str) -> None:
        """Set the value from an unfolded line of an iCalendar file."""
        self.set_value(value)

    def get_raw_mime_dir_value(self) -> str:
        """Returns the value as written to an iCalendar file."""
        return self.get_value()

    def get_value_type(self) -> str:
        """Returns the value type, corresponding to the VALUE= parameter."""
        return VALUE_TYPE

    def get_json_value(self) -> list[dict[str, Any]]:
        """Returns the value in the format used for jCal.

        Raises:
            MalformedTimestampError: If UNTIL is not a valid date or date-time
        """
        return parts_to_json(self._parts, self.root)

    def set_json_value(self, value: list[Any]) -> None:
        """Set the value from its jCal representation.

        Args:
            value: List whose first element is a dict or SimpleNamespace of
                lower-case rule parts, e.g. [{"freq": "DAILY", "count": 5}]

        Raises:
            InvalidInputError: If value is not a non-empty list
        """
        if not isinstance(value, (list, tuple)) or not value:
            raise InvalidInputError("A jCal RECUR value must be a non-empty list")
        if len(value) > 1:
            logger.warning(f"{self.name} jCal value has {len(value)} entries, using the first")

        # jCal writes UNTIL in extended form, normalization packs it again
        item = value[0]
        if not isinstance(item, (Mapping, SimpleNamespace)):
            raise InvalidInputError(
                f"A jCal RECUR entry must be an object, got {type(item).__name__}"
            )
        self.set_value(item)

    def xml_serialize_value(self, writer: XmlValueWriter) -> None:
        """Write the value as xCal elements.

        Raises:
            MalformedTimestampError: If UNTIL is not a valid date or date-time
        """
        value_type = self.get_value_type().lower()
        for value in self.get_json_value():
            writer.write_element(value_type, value)

    def validate_with_outcome(self, repair: bool = False) -> ValidationOutcome:
        """Validate the value and, when repairing, store the repaired parts.

        A FREQ-less value cannot be repaired locally; the outcome then asks the
        caller to remove the owning property from its parent.

        Args:
            repair: Attempt to repair detected problems

        Returns:
            ValidationOutcome describing the problems and the required action
        """
        outcome = validate_parts(self._parts, name=self.name, node=self, repair=repair)
        logger.verbose(  # type: ignore[attr-defined]
            f"Validated {self.name}: {len(outcome.diagnostics)} problem(s), "
            f"action={outcome.action.value}"
        )
        if repair and outcome.parts is not None:
            self.set_value(outcome.parts)
        return outcome

    def validate(self, repair: bool = False) -> list[Diagnostic]:
        """Validate the value for correctness.

        Every diagnostic has a level (1 repaired, 2 inconsequential, 3 severe),
        a human-readable message and a reference to this value.

        Args:
            repair: Attempt to repair detected problems

        Returns:
            List of detected problems
        """
        return self.validate_with_outcome(repair).diagnostics

    def __str__(self) -> str:
        return self.get_value()

    def __repr__(self) -> str:
        return f"RecurValue(name={self.name!r}, value={self.get_value()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecurValue):
            return NotImplemented
        return self._parts == other._parts

    __hash__ = None  # type: ignore[assignment]
