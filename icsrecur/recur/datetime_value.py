"""Packed iCalendar DATE / DATE-TIME values used for the UNTIL rule part."""

from datetime import datetime
import re
from typing import Any, Optional, Union

from .exceptions import MalformedTimestampError

DATE_FORMAT = "%Y%m%d"
DATE_TIME_FORMAT = "%Y%m%dT%H%M%S"
_PACKED_VALUE = re.compile(r"(\d{8})(?:T(\d{6})(Z)?)?")


class DateTimeValue:
    """A DATE or DATE-TIME value in the packed iCalendar form.

    Only the floating and UTC ("Z") variants are handled; TZID parameters are
    accepted for signature compatibility but ignored.
    """

    def __init__(
        self,
        root: Any = None,
        parameters: Optional[dict[str, str]] = None,
        value: Union[str, list[str], None] = None,
    ):
        """Initialize the value.

        Args:
            root: Owning document, unused beyond being kept for reference
            parameters: Property parameters (e.g. VALUE=DATE)
            value: Packed value(s) such as "20240101T000000Z"

        Raises:
            MalformedTimestampError: If a value cannot be interpreted
        """
        self.root = root
        self.parameters = parameters or {}
        raw_values = [] if value is None else value if isinstance(value, list) else [value]
        self.values = [self._parse(raw) for raw in raw_values]

    @staticmethod
    def _parse(raw: str) -> tuple[datetime, bool, bool]:
        """Parse a packed value into (datetime, is_date, is_utc)."""
        # strptime alone accepts single-digit fields
        match = _PACKED_VALUE.fullmatch(raw.upper())
        if not match:
            raise MalformedTimestampError(
                f"The supplied iCalendar datetime value is incorrect: {raw}", value=raw
            )
        date_part, time_part, utc_marker = match.groups()

        try:
            if time_part is None:
                return datetime.strptime(date_part, DATE_FORMAT), True, False
            return (
                datetime.strptime(f"{date_part}T{time_part}", DATE_TIME_FORMAT),
                False,
                utc_marker is not None,
            )
        except ValueError as e:
            raise MalformedTimestampError(
                f"The supplied iCalendar datetime value is incorrect: {raw}", value=raw
            ) from e

    def get_value_type(self) -> str:
        """Returns DATE or DATE-TIME depending on the first value."""
        if self.values and self.values[0][1]:
            return "DATE"
        return "DATE-TIME"

    def get_json_value(self) -> list[str]:
        """Returns the values formatted for jCal/xCal.

        Returns:
            List of "YYYY-MM-DD" or "YYYY-MM-DDTHH:MM:SS" strings, the latter
            suffixed with "Z" for UTC values
        """
        result = []
        for dt, is_date, is_utc in self.values:
            if is_date:
                result.append(dt.strftime("%Y-%m-%d"))
            else:
                result.append(dt.strftime("%Y-%m-%dT%H:%M:%S") + ("Z" if is_utc else ""))
        return result
