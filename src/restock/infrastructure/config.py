"""Runtime settings, read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Per-user so the location does not depend on where the package is installed.
_DATA_DIR = Path.home() / ".restock"


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    def __init__(self) -> None:
        self.api_url: str = os.getenv("RESTOCK_API_URL", "http://localhost:8080").rstrip("/")
        self.timeout: int = _int_env("RESTOCK_TIMEOUT", 10)
        self.credentials_file: Path = Path(
            os.getenv("RESTOCK_CREDENTIALS_FILE", str(_DATA_DIR / "credentials.json"))
        )
        self.log_level: str = os.getenv("RESTOCK_LOG_LEVEL", "WARNING").upper()


def load_settings() -> Settings:
    return Settings()
