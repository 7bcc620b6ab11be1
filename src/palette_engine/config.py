"""Engine settings loaded from PALETTE_* environment variables."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import PositiveFloat, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ENV_PREFIX = "PALETTE_"
_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    log_level: str = "WARNING"
    similarity_threshold: PositiveFloat = 25.0
    strict_threshold: PositiveFloat = 15.0
    seed: Optional[int] = None
    export_name: str = "palette"

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_ignore_empty=True, frozen=True)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"must be one of {sorted(_LEVELS)}, got {level!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _from_mapping(environ: Mapping[str, str]) -> dict:
    values = {}
    for key, raw in environ.items():
        if key.upper().startswith(ENV_PREFIX) and raw.strip():
            values[key[len(ENV_PREFIX):].lower()] = raw.strip()
    return {k: v for k, v in values.items() if k in Settings.model_fields}


def _bad_fields(exc: ValidationError) -> list:
    return [str(err["loc"][0]) for err in exc.errors() if err["loc"]]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from os.environ, or from ``environ`` when given.

    Raises ValueError naming each offending variable.
    """
    try:
        if environ is None:
            return Settings()
        return Settings(**_from_mapping(environ))
    except ValidationError as exc:
        problems = "; ".join(
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}"
            for err in exc.errors() if err["loc"]
        )
        raise ValueError(f"Invalid configuration: {problems}") from None


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings for the engine.

    Bad variables are logged and replaced by their defaults so palette
    operations keep working; the CLI validates strictly via load_settings.
    """
    try:
        return Settings()
    except ValidationError as exc:
        bad = _bad_fields(exc)
        logger.warning("Ignoring invalid settings %s: %s", bad, exc)
        return Settings(**{name: Settings.model_fields[name].default for name in bad})
