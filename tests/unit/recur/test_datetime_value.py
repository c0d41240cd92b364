"""Unit tests for packed DATE / DATE-TIME values."""

import pytest

from icsrecur.recur.datetime_value import DateTimeValue
from icsrecur.recur.exceptions import MalformedTimestampError


class TestDateTimeValue:
    """Test suite for DateTimeValue."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("20240101T000000Z", "2024-01-01T00:00:00Z"),
            ("20261231T235959", "2026-12-31T23:59:59"),
            ("20240229", "2024-02-29"),
            ("20240101t120000z", "2024-01-01T12:00:00Z"),
        ],
    )
    def test_json_value(self, raw: str, expected: str) -> None:
        assert DateTimeValue(None, None, raw).get_json_value() == [expected]

    def test_multiple_values(self) -> None:
        value = DateTimeValue(None, None, ["20240101", "20240102T080000Z"])

        assert value.get_json_value() == ["2024-01-01", "2024-01-02T08:00:00Z"]

    def test_value_type(self) -> None:
        assert DateTimeValue(None, None, "20240101").get_value_type() == "DATE"
        assert DateTimeValue(None, None, "20240101T000000Z").get_value_type() == "DATE-TIME"

    def test_no_value(self) -> None:
        value = DateTimeValue()

        assert value.get_json_value() == []
        assert value.get_value_type() == "DATE-TIME"

    def test_root_and_parameters_kept(self) -> None:
        root = object()
        value = DateTimeValue(root, {"VALUE": "DATE"}, "20240101")

        assert value.root is root
        assert value.parameters == {"VALUE": "DATE"}

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "TOMORROW",
            "20240230",
            "20240101Z",
            "20240101T250000Z",
            "2024-01-01T00:00:00Z",
            "2024111",
            "2024011",
            "20240101T1200",
            "20240101T12000",
            " 20240101",
            "20240101 ",
        ],
    )
    def test_malformed_values(self, raw: str) -> None:
        with pytest.raises(MalformedTimestampError) as exc_info:
            DateTimeValue(None, None, raw)

        assert exc_info.value.value == raw
