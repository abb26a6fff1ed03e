"""Runtime settings for the vecviz server, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from loguru import logger

from .types import InvalidArgument


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Server settings.

    Environment
    -----------
    VECVIZ_HOST               : bind address (default 0.0.0.0)
    VECVIZ_PORT               : bind port (default 8080)
    VECVIZ_DEFAULT_LIMIT      : items per response when limit is absent/invalid
    VECVIZ_DEFAULT_DIMENSIONS : vector length when dimensions is absent/invalid
    VECVIZ_MAX_LIMIT          : upper bound on limit
    VECVIZ_MAX_DIMENSIONS     : upper bound on dimensions
    VECVIZ_LOG_LEVEL          : loguru level name (default INFO)
    """

    host: str = "0.0.0.0"
    port: int = 8080
    default_limit: int = 500
    default_dimensions: int = 100
    max_limit: int = 10_000
    max_dimensions: int = 4096
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for name in ("port", "default_limit", "default_dimensions", "max_limit", "max_dimensions"):
            if getattr(self, name) <= 0:
                raise InvalidArgument(f"{name} must be positive, got {getattr(self, name)}")
        if self.default_limit > self.max_limit:
            raise InvalidArgument("default_limit must not exceed max_limit")
        if self.default_dimensions > self.max_dimensions:
            raise InvalidArgument("default_dimensions must not exceed max_dimensions")
        try:
            logger.level(self.log_level)
        except ValueError:
            raise InvalidArgument(f"log_level {self.log_level!r} is not a known loguru level") from None

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            host=os.getenv("VECVIZ_HOST", defaults.host),
            port=_env_int("VECVIZ_PORT", defaults.port),
            default_limit=_env_int("VECVIZ_DEFAULT_LIMIT", defaults.default_limit),
            default_dimensions=_env_int("VECVIZ_DEFAULT_DIMENSIONS", defaults.default_dimensions),
            max_limit=_env_int("VECVIZ_MAX_LIMIT", defaults.max_limit),
            max_dimensions=_env_int("VECVIZ_MAX_DIMENSIONS", defaults.max_dimensions),
            log_level=os.getenv("VECVIZ_LOG_LEVEL", defaults.log_level).upper(),
        )
