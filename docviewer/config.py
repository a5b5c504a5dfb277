"""
Runtime settings, read from environment variables.

  PORT           listen port (default 3000)
  HOST           listen address (default 127.0.0.1)
  DOCS_DIR       markdown collection root (default ./docs)
  DOCVIEWER_ENV  "production" turns the file watcher off
  LOG_LEVEL      root log level (default INFO)
  CORS_ORIGINS   comma-separated origins allowed to call /api (default none)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PORT = 3000
DEFAULT_HOST = "127.0.0.1"
DEFAULT_DOCS_DIR = "docs"
PRODUCTION = "production"


@dataclass
class Settings:
    docs_dir: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.docs_dir = Path(self.docs_dir).expanduser().absolute()

    @property
    def watch_enabled(self) -> bool:
        return self.environment.lower() != PRODUCTION

    @property
    def base_url(self) -> str:
        host = "localhost" if self.host in ("127.0.0.1", "0.0.0.0") else self.host
        return f"http://{host}:{self.port}"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        raw_port = env.get("PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}")
        log_level = env.get("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")
        return cls(
            docs_dir=Path(env.get("DOCS_DIR", DEFAULT_DOCS_DIR)),
            host=env.get("HOST", DEFAULT_HOST),
            port=port,
            environment=env.get("DOCVIEWER_ENV", "development"),
            log_level=log_level,
            cors_origins=[o.strip() for o in env.get("CORS_ORIGINS", "").split(",") if o.strip()],
        )
