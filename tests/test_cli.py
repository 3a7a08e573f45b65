"""
Command-line interface tests.
"""

from __future__ import annotations

import logging

import pytest

from sedol import config
from sedol.__main__ import main


class TestDispatch:
    """Test command dispatch."""

    def test_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "check-digit" in out
        assert "validate" in out

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["lookup"]) == 1
        assert "Unknown command: lookup" in capsys.readouterr().out


class TestCleanCommand:
    def test_clean(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["clean", " BD9-MZ-Z7?", "b15 kxq 8"]) == 0
        assert capsys.readouterr().out.splitlines() == ["BD9MZZ7", "B15KXQ8"]


class TestCheckDigitCommand:
    def test_appends_digit(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check-digit", "BD9MZZ", "B15KXQ"]) == 0
        assert capsys.readouterr().out.splitlines() == ["BD9MZZ7", "B15KXQ8"]

    def test_bad_body(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check-digit", "BD9MZI"]) == 1
        assert "BD9MZI: invalid character 'I' at position 6" in capsys.readouterr().out


class TestValidateCommand:
    def test_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["validate", "BD9MZZ7"]) == 0
        assert capsys.readouterr().out.strip() == "BD9MZZ7: valid"

    def test_invalid(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["validate", "BD9MZZ7", "BD9MZZ6"]) == 1
        assert capsys.readouterr().out.splitlines() == [
            "BD9MZZ7: valid",
            "BD9MZZ6: expected check digit '7', got '6'",
        ]

    def test_clean_option_reports_raw_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["validate", "--clean", "BD-9MZ-Z7", "BD-9MZ-Z6"]) == 1
        assert capsys.readouterr().out.splitlines() == [
            "BD-9MZ-Z7: valid",
            "BD-9MZ-Z6: expected check digit '7', got '6'",
        ]

    def test_strict_without_clean(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["validate", "bd9mzz7"]) == 1
        assert "invalid character 'b' at position 1" in capsys.readouterr().out

    def test_old_format_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["validate", "0D9MZZ8"]) == 0
        assert main(["validate", "--old-format", "0D9MZZ8"]) == 1

    def test_stats(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            main(["validate", "--stats", "BD9MZZ7", "BD9MZZ6", "XYZ"])
        assert "Total processed: 3" in caplog.text
        assert "Wrong length: 1" in caplog.text
        assert "Check digit mismatch: 1" in caplog.text


class TestNormalizeCommand:
    def test_normalize(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["normalize", "bd-9mz-z7"]) == 0
        assert capsys.readouterr().out.strip() == "BD9MZZ7"

    def test_invalid(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["normalize", "bd9-mzz6", "BD9"]) == 1
        assert capsys.readouterr().out.splitlines() == [
            "bd9-mzz6: expected check digit '7', got '6'",
            "BD9: invalid length 3, expected 7",
        ]

    def test_skip_checksum(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["normalize", "--skip-checksum", "BD9MZZ6"]) == 0
        assert capsys.readouterr().out.strip() == "BD9MZZ6"

    def test_flags_restored_after_run(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Options only apply to the run that set them."""
        assert main(["normalize", "--skip-checksum", "--old-format", "BD9MZZ6"]) == 0
        assert config.SKIP_CHECKSUM_VALIDATION is False
        assert config.ENFORCE_OLD_FORMAT is False

        assert main(["normalize", "BD9MZZ6", "0D9MZZ8"]) == 1
        assert capsys.readouterr().out.splitlines()[-2:] == [
            "BD9MZZ6: expected check digit '7', got '6'",
            "0D9MZZ8",
        ]

    def test_old_format_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["normalize", "--old-format", "0D9MZZ8"]) == 1
        assert "invalid format" in capsys.readouterr().out

    def test_stats(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            main(["normalize", "--stats", "--old-format", "0D9MZZ8", "BD9MZZ7"])
        assert "Mixed old format: 1" in caplog.text
        assert "Valid: 1" in caplog.text
