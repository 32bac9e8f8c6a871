from dotenv import load_dotenv
import logging
import os

load_dotenv()  # take environment variables from .env

DEFAULT_LOG_DIR = "logs"


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def get_log_level() -> int:
    """Log level from TRANSFORMS_LOG_LEVEL, INFO when unset or unknown."""
    name = (env_get("TRANSFORMS_LOG_LEVEL", "INFO") or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_log_dir() -> str:
    return env_get("TRANSFORMS_LOG_DIR", DEFAULT_LOG_DIR) or DEFAULT_LOG_DIR
