"""
CLI tests: output format and exit codes.
"""
import json

import pytest

from shukujitsu.cli import ExitCode, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SHUKUJITSU_CONFIG", "SHUKUJITSU_LOG_LEVEL", "SHUKUJITSU_LOG_FORMAT",
                 "SHUKUJITSU_MAX_RANGE_DAYS"):
        monkeypatch.delenv(name, raising=False)


class TestName:
    def test_holiday(self, capsys):
        assert main(["name", "2024-01-01"]) == ExitCode.OK
        assert capsys.readouterr().out.strip() == "元日"

    def test_not_holiday(self, capsys):
        assert main(["name", "2024-01-02"]) == ExitCode.NOT_HOLIDAY
        assert capsys.readouterr().out.strip() == "-"

    def test_slash_format(self, capsys):
        assert main(["name", "2019/05/01"]) == ExitCode.OK
        assert capsys.readouterr().out.strip() == "天皇の即位の日"

    def test_json(self, capsys):
        assert main(["--json", "name", "2024-09-23"]) == ExitCode.OK
        data = json.loads(capsys.readouterr().out)
        assert data == {"date": "2024-09-23", "name": "秋分の日 振替休日"}

    def test_invalid_date(self, capsys):
        assert main(["name", "2024-02-30"]) == ExitCode.INPUT_INVALID
        assert "SJ_INVALID_DATE" in capsys.readouterr().err


class TestCheck:
    @pytest.mark.parametrize("day,status", [
        ("2024-09-16", "holiday"),
        ("2024-01-06", "non-working"),
        ("2024-01-04", "working"),
    ])
    def test_status(self, capsys, day, status):
        assert main(["--json", "check", day]) == ExitCode.OK
        assert json.loads(capsys.readouterr().out)["status"] == status

    def test_text_output(self, capsys):
        main(["check", "2024-09-16"])
        assert capsys.readouterr().out.strip() == "holiday\t敬老の日"


class TestListings:
    def test_month(self, capsys):
        assert main(["month", "2024", "9"]) == ExitCode.OK
        assert capsys.readouterr().out.splitlines() == [
            "2024-09-16\t敬老の日",
            "2024-09-22\t秋分の日",
            "2024-09-23\t秋分の日 振替休日",
        ]

    def test_month_out_of_range(self, capsys):
        assert main(["month", "2024", "13"]) == ExitCode.INPUT_INVALID
        assert "SJ_INVALID_RANGE" in capsys.readouterr().err

    def test_year_json(self, capsys):
        assert main(["--json", "year", "2024"]) == ExitCode.OK
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 21
        assert data[0] == {"date": "2024-01-01", "name": "元日"}

    def test_between(self, capsys):
        assert main(["between", "2024-04-27", "2024-05-06"]) == ExitCode.OK
        assert len(capsys.readouterr().out.splitlines()) == 5

    def test_between_exclusive(self, capsys):
        assert main(["between", "2024-04-27", "2024-05-06", "--exclusive"]) == ExitCode.OK
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[-1] == "2024-05-05\tこどもの日"

    def test_between_reversed(self):
        assert main(["between", "2024-05-06", "2024-04-27"]) == ExitCode.INPUT_INVALID

    def test_between_too_long(self, settings_file):
        path = settings_file("max_range_days: 30\n")
        assert main(["--config", str(path), "between", "2024-01-01", "2024-12-31"]) == ExitCode.INPUT_INVALID

    def test_rules(self, capsys):
        assert main(["--json", "rules"]) == ExitCode.OK
        rules = json.loads(capsys.readouterr().out)
        assert len(rules) == 23
        assert rules[0] == {"key": "new_years_day", "name": "元日"}


class TestMisc:
    def test_no_command(self, capsys):
        assert main([]) == ExitCode.INPUT_INVALID
        assert "usage" in capsys.readouterr().out

    def test_bad_config(self, settings_file, capsys):
        path = settings_file("log_format: xml\n")
        assert main(["--config", str(path), "name", "2024-01-01"]) == ExitCode.INPUT_INVALID
        assert "SJ_CONFIG_ERROR" in capsys.readouterr().err


class TestOptionPlacement:
    def test_json_after_subcommand(self, capsys):
        assert main(["name", "2024-01-01", "--json"]) == ExitCode.OK
        assert json.loads(capsys.readouterr().out) == {"date": "2024-01-01", "name": "元日"}

    def test_json_before_subcommand_kept(self, capsys):
        assert main(["--json", "month", "2024", "9"]) == ExitCode.OK
        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_plain_output_without_json(self, capsys):
        main(["month", "2024", "9"])
        assert capsys.readouterr().out.startswith("2024-09-16\t")

    def test_config_after_subcommand(self, settings_file):
        path = settings_file("max_range_days: 30\n")
        assert main(["between", "2024-01-01", "2024-12-31", "--config", str(path)]) == ExitCode.INPUT_INVALID
