"""Tests for the report and the command line entry point."""

import json
import logging

from main import main
from namefix.logging_config import setup_logging
from namefix.report import format_report


class TestReport:
    """Tests for format_report."""

    def test_format(self):
        """Test the report layout."""
        report = format_report(
            ["I met Jon and Smyth"],
            ["John Smith"],
            {"Smyth": "Smith", "Jon": "John"},
        )

        assert report == "\n".join([
            "We got text on input:",
            "I met Jon and Smyth",
            "",
            "And list of correct names:",
            "John Smith",
            "",
            "We've found possible names with mistakes:",
            "Jon - John",
            "Smyth - Smith",
        ])

    def test_no_matches(self):
        """Test the report when nothing was found."""
        report = format_report([], [], {})

        assert report.endswith("We've found possible names with mistakes:")


class TestLoggingSetup:
    """Tests for setup_logging."""

    def test_json_to_file(self, tmp_path):
        """Test JSON log lines written to a file."""
        log_file = tmp_path / "run.log"
        setup_logging(level="info", fmt="json", file=str(log_file))

        logging.getLogger("namefix.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert record["message"] == "hello"
        assert record["level"] == "INFO"
        assert record["name"] == "namefix.test"

    def test_formatter_uses_current_module(self):
        """Test that the JSON formatter builds on pythonjsonlogger.json."""
        from pythonjsonlogger.json import JsonFormatter as BaseJsonFormatter

        from namefix.logging_config import JsonFormatter

        assert issubclass(JsonFormatter, BaseJsonFormatter)

    def test_level_applied(self):
        """Test that the requested level reaches the root logger."""
        setup_logging(level="warning", fmt="text")

        assert logging.getLogger().level == logging.WARNING


class TestMain:
    """Tests for the CLI."""

    def test_run(self, input_files, capsys):
        """Test a full run printing the found matches."""
        names_path, phrases_path = input_files

        exit_code = main(["--names", str(names_path), "--phrases", str(phrases_path)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Yesterday I met Jon at the station." in out
        assert out.rstrip().endswith("We've found possible names with mistakes:\nJon - John")

    def test_missing_input(self, tmp_path, capsys):
        """Test that an unreadable input exits with code 1."""
        exit_code = main([
            "--names", str(tmp_path / "names.txt"),
            "--phrases", str(tmp_path / "phrases.txt"),
            "--log-level", "CRITICAL",
        ])

        assert exit_code == 1
        assert capsys.readouterr().out == ""
