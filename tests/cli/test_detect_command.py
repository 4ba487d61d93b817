"""
Tests for detect command.
"""

import argparse
import json
import logging
from unittest.mock import patch

import pytest

from ccversion.cli.commands import detect
from ccversion.core.exceptions import CommandFailedError, UnknownCompilerError
from ccversion.toolchain.tool import CompilerFamily
from ccversion.version import Version


DETECTOR_TARGET = "ccversion.cli.commands.detect.CompilerVersionDetector"


def make_args(**kwargs) -> argparse.Namespace:
    """Build detect arguments with defaults."""
    defaults = {
        "config": None,
        "compiler": None,
        "family": None,
        "minimum": None,
        "format": "text",
    }
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test in an empty directory so no ccversion.yaml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_detector():
    """Patch the detector used by the command."""
    with patch(DETECTOR_TARGET) as detector_cls:
        yield detector_cls.return_value


class TestDetectCommand:
    """Test detect command functionality."""

    def test_detect_prints_version(self, mock_detector, capsys):
        """Test the rendered version is printed."""
        mock_detector.detect.return_value = Version.parse("11.2")

        result = detect.run(make_args(compiler="/usr/bin/g++"))

        assert result == 0
        assert capsys.readouterr().out.strip() == "11.2"
        tool = mock_detector.detect.call_args[0][0]
        assert tool.family is CompilerFamily.GNU

    def test_detect_explicit_family(self, mock_detector):
        """Test --family overrides name classification."""
        mock_detector.detect.return_value = Version.parse("15.0.0")

        detect.run(make_args(compiler="/usr/bin/cc", family="clang"))

        tool = mock_detector.detect.call_args[0][0]
        assert tool.family is CompilerFamily.CLANG

    def test_detect_msvc_without_compiler(self, mock_detector):
        """Test MSVC detection needs no compiler path."""
        mock_detector.detect.return_value = Version.parse("19.38.33133")

        assert detect.run(make_args(family="msvc")) == 0
        assert mock_detector.detect.call_args[0][0].is_like_msvc()

    def test_detect_without_compiler(self, mock_detector, caplog):
        """Test a missing compiler is a configuration error."""
        with caplog.at_level(logging.ERROR):
            result = detect.run(make_args())

        assert result == 2
        assert "No compiler configured" in caplog.text
        mock_detector.detect.assert_not_called()

    def test_minimum_satisfied(self, mock_detector):
        """Test exit code 0 when the version meets the minimum."""
        mock_detector.detect.return_value = Version.parse("11")

        assert detect.run(make_args(compiler="gcc", minimum="11.0.0")) == 0

    def test_minimum_not_satisfied(self, mock_detector, caplog, capsys):
        """Test exit code 1 when the version is below the minimum."""
        mock_detector.detect.return_value = Version.parse("9.4.0")

        with caplog.at_level(logging.ERROR):
            result = detect.run(make_args(compiler="gcc", minimum="11"))

        assert result == 1
        assert capsys.readouterr().out.strip() == "9.4.0"
        assert "older than required minimum 11" in caplog.text

    def test_invalid_minimum(self, mock_detector):
        """Test an invalid --minimum is a configuration error."""
        assert detect.run(make_args(compiler="gcc", minimum="eleven")) == 2

    def test_json_output(self, mock_detector, capsys):
        """Test JSON output fields."""
        mock_detector.detect.return_value = Version.parse("13.2")

        detect.run(make_args(compiler="g++", minimum="11", format="json"))
        data = json.loads(capsys.readouterr().out)

        assert data["compiler"] == "g++"
        assert data["family"] == "gnu"
        assert data["version"] == "13.2"
        assert (data["major"], data["minor"], data["patch"]) == (13, 2, None)
        assert data["minimum"] == "11"
        assert data["satisfied"] is True

    def test_json_output_without_minimum(self, mock_detector, capsys):
        """Test gating fields are omitted without a minimum."""
        mock_detector.detect.return_value = Version.parse("18.1.8")

        detect.run(make_args(compiler="clang++", format="json"))
        data = json.loads(capsys.readouterr().out)

        assert "minimum" not in data
        assert "satisfied" not in data

    def test_detection_failure(self, mock_detector, caplog):
        """Test detection errors yield exit code 1."""
        mock_detector.detect.side_effect = CommandFailedError(
            ["g++", "-dumpversion"], FileNotFoundError("g++")
        )

        with caplog.at_level(logging.ERROR):
            result = detect.run(make_args(compiler="g++"))

        assert result == 1
        assert "Failed to run g++ -dumpversion" in caplog.text

    def test_unknown_compiler(self, mock_detector):
        """Test an unclassifiable compiler yields exit code 1."""
        mock_detector.detect.side_effect = UnknownCompilerError()

        assert detect.run(make_args(compiler="tcc")) == 1


class TestDetectConfigFile:
    """Test detect command configuration handling."""

    def test_default_config_file(self, mock_detector, isolated_cwd):
        """Test ./ccversion.yaml is read when present."""
        (isolated_cwd / "ccversion.yaml").write_text(
            "compiler:\n  path: clang++-18\nminimum: '16'\n"
        )
        mock_detector.detect.return_value = Version.parse("15.0.7")

        result = detect.run(make_args())

        assert result == 1
        tool = mock_detector.detect.call_args[0][0]
        assert tool.family is CompilerFamily.CLANG
        assert str(tool.path) == "clang++-18"

    def test_arguments_override_config(self, mock_detector, isolated_cwd):
        """Test command-line values take precedence over the file."""
        (isolated_cwd / "ccversion.yaml").write_text("compiler: gcc\nminimum: 13\n")
        mock_detector.detect.return_value = Version.parse("12.3.0")

        result = detect.run(make_args(compiler="g++-12", minimum="12"))

        assert result == 0
        assert str(mock_detector.detect.call_args[0][0].path) == "g++-12"

    def test_explicit_config_missing(self, mock_detector, isolated_cwd):
        """Test a missing --config file is a configuration error."""
        result = detect.run(make_args(config=isolated_cwd / "nope.yaml", compiler="gcc"))

        assert result == 2
        mock_detector.detect.assert_not_called()

    def test_explicit_config_file(self, mock_detector, tmp_path):
        """Test --config points at another file."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("compiler:\n  family: msvc\n")
        mock_detector.detect.return_value = Version.parse("19.16.27027")

        assert detect.run(make_args(config=config_file)) == 0
        assert mock_detector.detect.call_args[0][0].is_like_msvc()
