"""Unit tests for Roster logging configuration."""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from roster.logging import get_logger, mask_email, setup_logging


@pytest.fixture(autouse=True)
def reset_roster_logger():
    """Close handlers installed by a test so temp dirs can be removed."""
    yield
    logger = logging.getLogger("roster")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self) -> None:
        """Log directory is created if it doesn't exist."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir) / "nested" / "logs"
            setup_logging(log_dir=log_dir, console=False)

            assert log_dir.exists()

    def test_writes_to_log_file(self) -> None:
        """Log messages are written to the file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)
            logger.info("test message 123")

            content = (Path(tmpdir) / "roster.log").read_text()
            assert "test message 123" in content

    def test_log_format(self) -> None:
        """Log entries include level and logger name."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=False)
            logging.getLogger("roster.student_service.service").info("format test")

            content = (Path(tmpdir) / "roster.log").read_text()
            assert " | INFO" in content
            assert " | roster.student_service.service | format test" in content

    def test_log_level_configurable(self) -> None:
        """Log level filters messages appropriately."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, level="WARNING", console=False)
            logger = logging.getLogger("roster")
            logger.info("should not appear")
            logger.warning("should appear")

            content = (Path(tmpdir) / "roster.log").read_text()
            assert "should not appear" not in content
            assert "should appear" in content

    @patch.dict(os.environ, {"ROSTER_LOG_LEVEL": "DEBUG"})
    def test_log_level_from_env(self) -> None:
        """Log level can be set via environment variable."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)

            assert logger.level == logging.DEBUG

    def test_log_dir_from_env(self) -> None:
        """Log directory can be set via environment variable."""
        with (
            tempfile.TemporaryDirectory() as tmpdir,
            patch.dict(os.environ, {"ROSTER_LOG_DIR": tmpdir}),
        ):
            setup_logging(console=False)

            assert (Path(tmpdir) / "roster.log").exists()

    def test_no_duplicate_handlers_on_repeated_setup(self) -> None:
        """Repeated setup_logging calls don't add duplicate handlers."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=False)
            setup_logging(log_dir=tmpdir, console=False)

            assert len(logging.getLogger("roster").handlers) == 1

    def test_rotation_configured(self) -> None:
        """RotatingFileHandler is configured with correct max size."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, max_bytes=1024, backup_count=3, console=False)

            (file_handler,) = logging.getLogger("roster").handlers
            assert file_handler.maxBytes == 1024
            assert file_handler.backupCount == 3


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_prefixes_roster(self) -> None:
        """Logger name is prefixed with roster."""
        assert get_logger("student_store").name == "roster.student_store"

    def test_get_logger_no_double_prefix(self) -> None:
        """Already prefixed names are not double-prefixed."""
        assert get_logger("roster.student_service").name == "roster.student_service"

    def test_component_loggers_live_under_roster(self) -> None:
        """Store and service modules log through the roster namespace."""
        from roster.student_service import service
        from roster.student_store import store

        assert service.logger.name == "roster.student_service.service"
        assert store.logger.name == "roster.student_store.store"


@pytest.mark.unit
class TestMaskEmail:
    """Tests for mask_email function."""

    def test_masks_local_part(self) -> None:
        assert mask_email("jamila@gmail.com") == "j***@gmail.com"

    def test_no_at_sign_fully_masked(self) -> None:
        assert mask_email("not-an-email") == "***"
