"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from feedsmith.config.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_from_config(self) -> None:
        """The level name sets the root logger level."""
        setup_logging(level="WARNING")

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    def test_verbose_overrides_level(self) -> None:
        setup_logging(verbose=True, level="ERROR")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_transport_loggers_quiet_by_default(self) -> None:
        setup_logging()

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_log_file(self, tmp_path: Path) -> None:
        """Records are also written to the log file."""
        log_file = tmp_path / "logs" / "feedsmith.log"
        setup_logging(log_file=log_file)

        logging.getLogger("feedsmith.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello file" in log_file.read_text(encoding="utf-8")
