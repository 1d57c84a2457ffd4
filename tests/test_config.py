"""
Tests for configuration and logging setup.
"""
import logging

from portfolio.config import DEFAULT_API_DELAY, Config
from portfolio.logger import setup_logger


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORTFOLIO_LOG_LEVEL", "debug")
    config = Config()
    assert config.api_delay == 0.0
    assert config.log_level == "DEBUG"
    assert config.log_file is None


def test_defaults(monkeypatch, tmp_path):
    for key in ("PORTFOLIO_API_DELAY", "PORTFOLIO_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    config = Config(env_file=str(tmp_path / "missing.env"))
    assert config.api_delay == DEFAULT_API_DELAY
    assert config.log_level == "INFO"


def test_env_file_is_loaded(monkeypatch, tmp_path):
    monkeypatch.delenv("PORTFOLIO_API_DELAY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PORTFOLIO_API_DELAY=1.5\n")
    assert Config(env_file=str(env_file)).api_delay == 1.5


def test_setup_logger_resets_handlers(tmp_path):
    log_file = tmp_path / "logs" / "site.log"
    logger = setup_logger("portfolio.test", str(log_file), logging.DEBUG)
    assert len(logger.handlers) == 2
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()

    logger = setup_logger("portfolio.test")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
