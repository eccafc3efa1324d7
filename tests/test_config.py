"""Unit tests for configuration loading."""
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import pytest
from config import AppConfig, get_config, load_env

CONFIG_VARS = (
    "GEMINI_API_KEY", "GROQ_API_KEY", "LLM_PROVIDER", "LLM_MODEL", "LLM_TEMPERATURE",
    "APP_ENV", "CONTEXT_WINDOW", "MAX_MEMORY_MESSAGES", "USE_REASONING", "LOG_LEVEL", "PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration variables from the environment."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    """Test suite for get_config and load_env."""

    def test_missing_api_key(self):
        """Test that startup fails without an API key."""
        with pytest.raises(ValueError, match="GEMINI_API_KEY environment variable is not set"):
            get_config()

    def test_defaults(self, monkeypatch):
        """Test defaults when only the API key is set."""
        monkeypatch.setenv("GEMINI_API_KEY", "test_key")

        config = get_config()

        assert isinstance(config, AppConfig)
        assert config.api_key == "test_key"
        assert config.provider == "gemini"
        assert config.model == "gemini-2.5-flash"
        assert config.environment == "development"
        assert config.temperature == 0.7
        assert config.context_window == 10
        assert config.max_memory_messages == 0
        assert config.use_reasoning is False
        assert config.log_level == "INFO"
        assert config.port == 8000

    def test_overrides(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("GEMINI_API_KEY", "test_key")
        monkeypatch.setenv("LLM_MODEL", "gemini-2.5-pro")
        monkeypatch.setenv("LLM_TEMPERATURE", "0.2")
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("CONTEXT_WINDOW", "4")
        monkeypatch.setenv("MAX_MEMORY_MESSAGES", "50")
        monkeypatch.setenv("USE_REASONING", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = get_config()

        assert config.model == "gemini-2.5-pro"
        assert config.temperature == 0.2
        assert config.environment == "production"
        assert config.context_window == 4
        assert config.max_memory_messages == 50
        assert config.use_reasoning is True
        assert config.log_level == "DEBUG"

    def test_groq_provider(self, monkeypatch):
        """Test that the Groq provider reads its own key."""
        monkeypatch.setenv("LLM_PROVIDER", "groq")
        monkeypatch.setenv("GEMINI_API_KEY", "gemini_key")

        with pytest.raises(ValueError, match="GROQ_API_KEY"):
            get_config()

        monkeypatch.setenv("GROQ_API_KEY", "groq_key")
        config = get_config()
        assert config.provider == "groq"
        assert config.api_key == "groq_key"

    def test_unknown_provider(self, monkeypatch):
        """Test that unknown providers are rejected."""
        monkeypatch.setenv("LLM_PROVIDER", "other")
        with pytest.raises(ValueError, match="Unsupported LLM_PROVIDER"):
            get_config()

    def test_load_env_file(self, tmp_path):
        """Test loading the API key from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=from_file\n")

        try:
            load_env(str(env_file))
            config = get_config()
        finally:
            os.environ.pop("GEMINI_API_KEY", None)

        assert config.api_key == "from_file"
