"""Tests for command line logging setup."""

import logging
from collections.abc import Iterator

import pytest

from podspec_generator.logging_setup import setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Test that logging is configured for stderr."""

    def test_sets_level(self, restore_root_logger: logging.Logger) -> None:
        setup_logging("debug")
        assert restore_root_logger.level == logging.DEBUG

        setup_logging("WARNING")
        assert restore_root_logger.level == logging.WARNING

    def test_logs_to_stderr_only(
        self, restore_root_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that stdout stays free for podspec output."""
        setup_logging("INFO")

        logging.getLogger("podspec_generator.test").info("writing podspec")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "podspec_generator.test - INFO - writing podspec" in captured.err

    def test_replaces_existing_handlers(self, restore_root_logger: logging.Logger) -> None:
        setup_logging("INFO")
        setup_logging("INFO")

        assert len(restore_root_logger.handlers) == 1
