"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from bytebench.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")
    with pytest.raises(LoggerNotConfiguredError):
        Logger.set_level("DEBUG")


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    log = Logger.get("test_config")
    log.debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[bytebench.test_config]" in content
    assert "Debug message" in content


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_logger_default_level_is_warning():
    """Test that the default configuration hides info messages."""
    output = StringIO()
    Logger.configure(output=output, timestamps=False)

    log = Logger.get("test_default")
    log.info("Progress")
    log.warning("Entry failed")
    assert "Progress" not in output.getvalue()
    assert "Entry failed" in output.getvalue()


def test_logger_file_output(tmp_path):
    """Test logging to a file path."""
    path = tmp_path / "bench.log"
    Logger.configure(level="INFO", output=path, timestamps=False)
    Logger.get("test_file").info("to file")
    for handler in Logger.get().handlers:
        handler.flush()
    assert "to file" in path.read_text()


def test_logger_custom_format():
    """Test that a format string overrides the default layout."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, format_string="%(message)s")
    Logger.get("test_format").info("bare")
    assert output.getvalue() == "bare\n"


def test_logger_invalid_output():
    """Test that unsupported outputs are rejected."""
    with pytest.raises(ValueError):
        Logger.configure(output=42)  # type: ignore[arg-type]


def test_registry_logs_omitted_backends():
    """Test that omitted backends are logged at DEBUG only."""
    from bytebench.backends.base import Backend
    from bytebench.engine.entry import EntryKind
    from bytebench.engine.registry import EntryRegistry

    class Absent(Backend):
        @property
        def name(self):
            return "absent"

        @property
        def kind(self):
            return EntryKind.HASH

        def build_entries(self):
            self.require("bytebench_absent_module")
            return []

    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)
    EntryRegistry(backends=[Absent()]).get_all_entries()
    assert "absent" not in output.getvalue()

    Logger.set_level("DEBUG")
    EntryRegistry(backends=[Absent()]).get_all_entries()
    assert "Omitting backend absent" in output.getvalue()
