"""Settings parsing and logging configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from neura_os.config import Environment, LogLevel, Settings


def test_defaults(settings):
    assert settings.PORT == 4000
    assert settings.OPENAI_MODEL == "gpt-4o-mini"
    assert settings.ENVIRONMENT == Environment.DEVELOPMENT
    assert settings.LOG_LEVEL == LogLevel.INFO
    assert settings.llm_enabled is False
    assert settings.allowed_origins == ["*"]


def test_blank_api_key_means_no_llm():
    settings = Settings(_env_file=None, OPENAI_API_KEY="   ")
    assert settings.OPENAI_API_KEY is None
    assert settings.llm_enabled is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.llm_enabled is True
    assert settings.PORT == 8080
    assert settings.LOG_LEVEL == LogLevel.DEBUG


@pytest.mark.parametrize("port", [0, 70000])
def test_port_out_of_range(port):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, PORT=port)


def test_allowed_origins_list():
    settings = Settings(_env_file=None, CORS_ORIGIN="http://a.test, http://b.test,")
    assert settings.allowed_origins == ["http://a.test", "http://b.test"]


def test_logging_config_console_only(settings):
    config = settings.get_logging_config()
    assert list(config["handlers"]) == ["console"]
    assert config["loggers"][""]["level"] == "INFO"
    assert config["loggers"]["openai"]["level"] == "WARNING"


def test_logging_config_with_file(tmp_path):
    settings = Settings(_env_file=None, LOG_TO_FILE=True, LOG_DIR=tmp_path, ENVIRONMENT="production")
    config = settings.get_logging_config()

    file_handler = config["handlers"]["file"]
    assert file_handler["class"] == "logging.handlers.RotatingFileHandler"
    assert Path(file_handler["filename"]) == tmp_path / "neura_production.log"
    assert "file" in config["loggers"][""]["handlers"]
    assert settings.is_production()


def test_to_dict_hides_secret():
    data = Settings(_env_file=None, OPENAI_API_KEY="sk-secret").to_dict()
    assert "sk-secret" not in repr(data)
    assert data["ai"]["enabled"] is True
