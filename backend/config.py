"""Configuration management for the Reasoning Chat service."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Provider defaults
DEFAULT_PROVIDER = "gemini"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.7

# Memory defaults
DEFAULT_CONTEXT_WINDOW = 10
DEFAULT_MAX_MEMORY_MESSAGES = 0  # 0 = unbounded

# Environment variable holding the API key for each provider
API_KEY_VARS = {
    "gemini": "GEMINI_API_KEY",
    "groq": "GROQ_API_KEY",
}


@dataclass
class AppConfig:
    """Application settings resolved from the environment."""
    api_key: str
    provider: str = DEFAULT_PROVIDER
    model: str = DEFAULT_MODEL
    environment: str = "development"
    temperature: float = DEFAULT_TEMPERATURE
    context_window: int = DEFAULT_CONTEXT_WINDOW
    max_memory_messages: int = DEFAULT_MAX_MEMORY_MESSAGES
    use_reasoning: bool = False
    log_level: str = "INFO"
    port: int = 8000


def load_env(path: Optional[str] = None) -> None:
    """Load environment variables from a .env file (defaults to ./.env)."""
    env_path = Path(path) if path else Path.cwd() / ".env"
    load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_config() -> AppConfig:
    """
    Build the application configuration from environment variables.

    Returns:
        AppConfig with the API key for the selected provider

    Raises:
        ValueError: If the provider is unknown or its API key is not set
    """
    provider = os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER).lower()
    if provider not in API_KEY_VARS:
        raise ValueError(
            f"Unsupported LLM_PROVIDER '{provider}'. Expected one of: {', '.join(sorted(API_KEY_VARS))}"
        )

    key_var = API_KEY_VARS[provider]
    api_key = os.getenv(key_var)
    if not api_key:
        raise ValueError(
            f"{key_var} environment variable is not set. Please create a .env file with your API key."
        )

    return AppConfig(
        api_key=api_key,
        provider=provider,
        model=os.getenv("LLM_MODEL", DEFAULT_MODEL),
        environment=os.getenv("APP_ENV", "development"),
        temperature=float(os.getenv("LLM_TEMPERATURE", str(DEFAULT_TEMPERATURE))),
        context_window=int(os.getenv("CONTEXT_WINDOW", str(DEFAULT_CONTEXT_WINDOW))),
        max_memory_messages=int(os.getenv("MAX_MEMORY_MESSAGES", str(DEFAULT_MAX_MEMORY_MESSAGES))),
        use_reasoning=_env_flag("USE_REASONING"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=int(os.getenv("PORT", "8000")),
    )
