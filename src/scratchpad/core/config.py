"""Configuration management for Scratchpad."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Scratchpad Data Directory (defaults to ~/.scratchpad)
SCRATCHPAD_DATA_DIR = Path(
    get_env("SCRATCHPAD_DATA_DIR", os.path.expanduser("~/.scratchpad"))
    or os.path.expanduser("~/.scratchpad")
).expanduser()

# One <id>.md file per note
NOTES_DIR = SCRATCHPAD_DATA_DIR / "notes"

# The whole folder tree, as a single JSON document
FOLDERS_FILE = SCRATCHPAD_DATA_DIR / "folders.json"

# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO")

# API Server settings
SCRATCHPAD_API_KEY = get_env("SCRATCHPAD_API_KEY")
SCRATCHPAD_HOST = get_env("SCRATCHPAD_HOST", "127.0.0.1")
SCRATCHPAD_PORT = get_env_int("SCRATCHPAD_PORT", 8430)
SCRATCHPAD_CORS_ORIGINS = [
    origin.strip()
    for origin in (
        get_env("SCRATCHPAD_CORS_ORIGINS", "http://localhost:1420,tauri://localhost")
        or "http://localhost:1420,tauri://localhost"
    ).split(",")
    if origin.strip()
]


def setup_logging() -> logging.Logger:
    """Configure and return logger."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, (LOG_LEVEL or "INFO").upper(), logging.INFO),
    )
    return logging.getLogger(__name__)
