"""
ログ設定のテスト
"""

import logging

import pytest

from src.api.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """configure_logging のテスト"""

    def test_explicit_level(self):
        configure_logging("DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("HULK_LOG_LEVEL", "warning")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_default_level_is_info(self, monkeypatch):
        monkeypatch.delenv("HULK_LOG_LEVEL", raising=False)
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_repeated_calls_do_not_stack_handlers(self):
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(logging.getLogger().handlers) == 1
