"""
Gemini relay configuration.

Priority chain: most capable model first, lightest preview model last.
The fallback invoker tries each model in order until one succeeds.

Everything else comes from the environment (optionally via .env):
  GEMINI_API_KEY   required
  PORT             default 3000
  HOST             default 0.0.0.0
  CORS_ORIGINS     comma separated, default *
  LOG_LEVEL        default INFO
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from errors import ConfigError

# Priority chain: first entry is tried first
FALLBACK_MODELS = (
    "gemini-flash-latest",
    "gemini-flash-lite-latest",
    "gemini-2.5-flash-lite-preview-09-2025",
)

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


class Settings(BaseModel):
    api_key: str
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    models: tuple[str, ...] = Field(default=FALLBACK_MODELS, min_length=1)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Raises ConfigError if GEMINI_API_KEY is missing, PORT is not an int
        or LOG_LEVEL is not a logging level name.
        """
        env = os.environ if environ is None else environ

        api_key = (env.get("GEMINI_API_KEY") or "").strip()
        if not api_key:
            raise ConfigError("GEMINI_API_KEY is not set in environment variables.")

        raw_port = env.get("PORT") or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"PORT must be an integer, got {raw_port!r}") from None

        origins = [o.strip() for o in (env.get("CORS_ORIGINS") or "*").split(",") if o.strip()]

        log_level = (env.get("LOG_LEVEL") or "INFO").strip().upper()
        # getLevelName maps known names to their int level, unknown ones to a str
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

        return cls(
            api_key=api_key,
            port=port,
            host=env.get("HOST") or DEFAULT_HOST,
            cors_origins=origins or ["*"],
            log_level=log_level,
        )
