"""Configuration from environment."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 4073
DEFAULT_MAX_BODY_BYTES = 500 * 1024
DEFAULT_DEAD_AFTER_MONTHS = 24


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


def get_app_name() -> str:
    return os.environ.get("APP_NAME", "FeatureFence Playground API").strip()


def get_app_version() -> str:
    """Reported by /api/status. Default: dev."""
    return os.environ.get("APP_VERSION", "").strip() or "dev"


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    return _int_env("PORT", DEFAULT_PORT)


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level() -> str:
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    return level if level in _LOG_LEVELS else "INFO"


def get_max_body_bytes() -> int:
    """Largest accepted request body, in bytes. Default: 500 KB."""
    value = _int_env("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES)
    return value if value > 0 else DEFAULT_MAX_BODY_BYTES


def get_dead_after_months() -> int:
    """Staleness window for the 'dead' target query."""
    value = _int_env("FEATUREFENCE_DEAD_AFTER_MONTHS", DEFAULT_DEAD_AFTER_MONTHS)
    return value if value > 0 else DEFAULT_DEAD_AFTER_MONTHS


def get_data_dir() -> Optional[str]:
    """Directory with runtimes.json and features.json. Default: bundled data."""
    return os.environ.get("FEATUREFENCE_DATA_DIR", "").strip() or None
