"""Unit tests for the icsrecur command-line interface."""

import json
from unittest.mock import patch

import pytest

from icsrecur.cli import EXIT_ERROR, EXIT_INVALID, EXIT_OK, EXIT_REMOVE, main, render_value
from icsrecur.cli.parser import create_parser
from icsrecur.recur import RecurValue


@pytest.fixture
def run_cli(isolated_settings, restore_icsrecur_logger):
    """Run main() against isolated settings."""

    def _run(*argv: str) -> int:
        with patch("icsrecur.cli.get_settings", return_value=isolated_settings):
            return main(list(argv))

    return _run


class TestCreateParser:
    """Tests for create_parser."""

    def test_defaults(self) -> None:
        args = create_parser().parse_args(["FREQ=DAILY"])

        assert args.rule == "FREQ=DAILY"
        assert args.format is None
        assert args.validate is False
        assert args.repair is None
        assert args.log_level is None

    def test_options(self) -> None:
        args = create_parser().parse_args(
            ["FREQ=DAILY", "-f", "json", "--repair", "--name", "exrule", "--log-level", "debug"]
        )

        assert args.format == "json"
        assert args.repair is True
        assert args.name == "exrule"
        assert args.log_level == "DEBUG"

    def test_no_repair(self) -> None:
        args = create_parser().parse_args(["FREQ=DAILY", "--no-repair"])

        assert args.repair is False

    def test_invalid_format(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["FREQ=DAILY", "--format", "csv"])


class TestRenderValue:
    """Tests for render_value."""

    def test_text(self) -> None:
        assert render_value(RecurValue("freq=daily"), "text") == "FREQ=DAILY"

    def test_json(self) -> None:
        rendered = render_value(RecurValue("FREQ=DAILY;COUNT=3"), "json")

        assert json.loads(rendered) == [{"freq": "DAILY", "count": 3}]

    def test_xml(self) -> None:
        rendered = render_value(RecurValue("FREQ=DAILY"), "xml")

        assert rendered == "<value><recur><freq>DAILY</freq></recur></value>"


class TestMain:
    """Tests for main()."""

    def test_prints_normalized_rule(self, run_cli, capsys) -> None:
        assert run_cli("freq=monthly;byday=1,2,3") == EXIT_OK

        assert capsys.readouterr().out.strip() == "FREQ=MONTHLY;BYDAY=1,2,3"

    def test_json_output(self, run_cli, capsys) -> None:
        assert run_cli("FREQ=DAILY;UNTIL=2024-01-01T00:00:00Z", "--format", "json") == EXIT_OK

        output = json.loads(capsys.readouterr().out)
        assert output == [{"freq": "DAILY", "until": "2024-01-01T00:00:00Z"}]

    def test_malformed_rule(self, run_cli, capsys) -> None:
        assert run_cli("FREQ=DAILY;BROKEN") == EXIT_ERROR

        assert "BROKEN" in capsys.readouterr().out

    def test_malformed_until_in_json(self, run_cli, capsys) -> None:
        assert run_cli("FREQ=DAILY;UNTIL=LATER", "--format", "json") == EXIT_ERROR

        assert "Error:" in capsys.readouterr().out

    def test_validate_reports_problems(self, run_cli, capsys) -> None:
        assert run_cli("FREQ=DAILY;COUNT=", "--validate") == EXIT_INVALID

        output = capsys.readouterr().out.splitlines()
        assert output == ["[REPAIRED] Invalid value for COUNT in RRULE", "FREQ=DAILY;COUNT="]

    def test_validate_clean_rule(self, run_cli, capsys) -> None:
        assert run_cli("FREQ=DAILY", "--validate") == EXIT_OK

        assert capsys.readouterr().out.strip() == "FREQ=DAILY"

    def test_repair_removes_empty_parts(self, run_cli, capsys) -> None:
        assert run_cli("FREQ=DAILY;COUNT=", "--repair") == EXIT_OK

        output = capsys.readouterr().out.splitlines()
        assert output == ["[SEVERE] Invalid value for COUNT in RRULE", "FREQ=DAILY"]

    def test_repair_requests_removal(self, run_cli, capsys) -> None:
        assert run_cli("BYDAY=MO", "--repair", "--name", "exrule") == EXIT_REMOVE

        output = capsys.readouterr().out.splitlines()
        assert output == [
            "[SEVERE] FREQ is required in EXRULE",
            "EXRULE must be removed from its component",
        ]

    def test_default_repair_from_settings(self, run_cli, isolated_settings, capsys) -> None:
        isolated_settings.default_repair = True

        assert run_cli("FREQ=DAILY;COUNT=") == EXIT_OK

        assert capsys.readouterr().out.splitlines()[-1] == "FREQ=DAILY"

    def test_no_repair_overrides_settings(self, run_cli, isolated_settings, capsys) -> None:
        isolated_settings.default_repair = True

        assert run_cli("FREQ=DAILY;COUNT=", "--no-repair") == EXIT_OK

        assert capsys.readouterr().out.splitlines() == ["FREQ=DAILY;COUNT="]

    def test_no_repair_with_validate_reports_only(self, run_cli, isolated_settings, capsys) -> None:
        isolated_settings.default_repair = True

        assert run_cli("FREQ=DAILY;COUNT=", "--validate", "--no-repair") == EXIT_INVALID

        assert capsys.readouterr().out.splitlines() == [
            "[REPAIRED] Invalid value for COUNT in RRULE",
            "FREQ=DAILY;COUNT=",
        ]
