"""
Runtime settings for the rate service, read from the environment / .env.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8002


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    sql_echo: bool = False

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with every non-None override applied (CLI flags win over env)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_settings(database_url: Optional[str] = None) -> Settings:
    """Read settings from the environment; an explicit database_url wins over DATABASE_URL."""
    load_dotenv(find_dotenv(usecwd=True), override=False)

    database_url = database_url or os.getenv("DATABASE_URL")
    if not database_url:
        raise RuntimeError("DATABASE_URL not set in .env")

    return Settings(
        database_url=database_url,
        host=os.getenv("HOST", DEFAULT_HOST),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_dir=os.getenv("LOG_DIR") or None,
        sql_echo=_as_bool(os.getenv("SQL_ECHO")),
    )
