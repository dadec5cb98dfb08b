"""Runtime configuration sourced from the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

_POSTGRES_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")

IN_MEMORY_SQLITE_URL = "sqlite+pysqlite:///:memory:"


@dataclass(frozen=True)
class DatabaseSettings:
    url: str
    echo: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        return self.is_sqlite and ":memory:" in self.url


def _normalize_bool(value: Optional[str], default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest."""
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _get_database_url() -> str:
    # Test override wins, then an explicit DATABASE_URL, then the Postgres components.
    explicit_test_db = os.getenv("SAFEHOUSE_TEST_DB")
    if explicit_test_db:
        return explicit_test_db

    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    values = {name: os.getenv(name) for name in _POSTGRES_VARS}
    missing = [name for name, value in values.items() if not value]
    if not missing:
        return (
            f"postgresql://{values['POSTGRES_USER']}:{values['POSTGRES_PASSWORD']}"
            f"@{values['POSTGRES_HOST']}:{values['POSTGRES_PORT']}/{values['POSTGRES_DB']}"
        )

    if _is_pytest_runtime():
        return IN_MEMORY_SQLITE_URL
    raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")


@lru_cache(maxsize=None)
def get_database_settings() -> DatabaseSettings:
    """Return the cached database settings."""
    return DatabaseSettings(
        url=_get_database_url(),
        echo=_normalize_bool(os.getenv("SAFEHOUSE_SQL_ECHO")),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_database_settings.cache_clear()
