"""
Tests for settings and logging setup
"""
import logging
from contextlib import contextmanager

from secureapp_api.app.core.config import Settings
from secureapp_api.app.core.logging_config import resolve_level, setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PROJECT_NAME", "API_VERSION", "APP_ENV", "NODE_ENV", "HOST", "PORT", "LOG_LEVEL", "LOG_FILE"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.project_name == "SecureApp Customer API"
        assert settings.api_version == "3.0.0"
        assert settings.environment == "development"
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080

    def test_node_env_fallback(self, monkeypatch):
        monkeypatch.delenv("APP_ENV", raising=False)
        monkeypatch.setenv("NODE_ENV", "production")
        assert Settings().environment == "production"

    def test_app_env_wins(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "staging")
        monkeypatch.setenv("NODE_ENV", "production")
        assert Settings().environment == "staging"


@contextmanager
def isolated_root_logger():
    """Detach root handlers (pytest's included) while the block runs"""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


class TestSetupLogging:
    def test_configures_console_handler(self):
        with isolated_root_logger() as root:
            setup_logging("debug")
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        with isolated_root_logger() as root:
            setup_logging("chatty")
            assert root.level == logging.INFO

    def test_file_handler(self, tmp_path):
        logfile = tmp_path / "api.log"
        with isolated_root_logger() as root:
            setup_logging("INFO", str(logfile))
            assert len(root.handlers) == 2
            logging.getLogger("secureapp_api.test").info("hello")
            for handler in root.handlers:
                handler.flush()
        assert "hello" in logfile.read_text(encoding="utf-8")

    def test_configures_once(self):
        with isolated_root_logger() as root:
            setup_logging("INFO")
            setup_logging("DEBUG")
            assert len(root.handlers) == 1
            assert root.level == logging.INFO

    def test_resolve_level(self):
        assert resolve_level("warning") == logging.WARNING
        assert resolve_level("Debug") == logging.DEBUG
        assert resolve_level("chatty") == logging.INFO
