"""
Tests for logging setup and settings helpers.
"""

import logging

import pytest

from task_storage.core.config import Settings
from task_storage.core.logging_config import LOG_FORMAT, setup_logging
from task_storage.middleware.request_context import RequestIdLogFilter


@pytest.fixture
def bare_root_logger(monkeypatch):
    """
    Root logger with no handlers, restored after the test.

    Handlers are cleared lazily because pytest attaches its capture
    handler at the start of each test phase.
    """
    root = logging.getLogger()
    original_level = root.level

    def clear():
        monkeypatch.setattr(root, "handlers", [])
        return root

    yield clear
    for handler in root.handlers:
        handler.close()
    root.setLevel(original_level)


class TestSetupLogging:

    def test_console_handler_added(self, bare_root_logger):
        root = bare_root_logger()
        setup_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert handler.formatter._fmt == LOG_FORMAT
        assert any(isinstance(f, RequestIdLogFilter) for f in handler.filters)

    def test_file_handler_added(self, bare_root_logger, tmp_path):
        root = bare_root_logger()
        logfile = tmp_path / "app.log"

        setup_logging("INFO", str(logfile))
        logging.getLogger("task_storage.test").info("written to file")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 2
        contents = logfile.read_text(encoding="utf-8")
        assert "written to file" in contents
        assert "[-]" in contents

    def test_second_call_only_changes_level(self, bare_root_logger):
        root = bare_root_logger()
        setup_logging("INFO")
        setup_logging("WARNING")

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, bare_root_logger):
        root = bare_root_logger()
        setup_logging("chatty")

        assert root.level == logging.INFO


class TestSettings:

    def test_postgres_url_uses_asyncpg(self):
        settings = Settings(DATABASE_URL="postgresql://user:pw@db/tasks")

        assert settings.async_database_url == "postgresql+asyncpg://user:pw@db/tasks"
        assert settings.is_sqlite is False

    def test_sqlite_default(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.is_sqlite is True
