"""Environment-based configuration."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv


def load_env_files(
    env_path: str | os.PathLike[str] | None = None,
    local_path: str | os.PathLike[str] = ".env.local",
) -> None:
    """Load `.env`, then let `.env.local` override it and the process environment."""

    load_dotenv(dotenv_path=env_path)
    p = pathlib.Path(local_path)
    if p.exists():
        load_dotenv(dotenv_path=p, override=True)


# Class attributes below read the environment at import time.
load_env_files()

DEFAULT_DRAW_URL = "https://www.swisslos.ch/en/swisslotto/information/winning-numbers/winning-numbers.html"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; swisslotto-draws)"
DEFAULT_TIMEOUT_SECONDS = 15.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Results page fetcher
    SWISS_LOTTO_DRAW_URL: str = os.getenv("SWISS_LOTTO_DRAW_URL", DEFAULT_DRAW_URL)
    HTTP_USER_AGENT: str = os.getenv("HTTP_USER_AGENT", DEFAULT_USER_AGENT)
    HTTP_TIMEOUT_SECONDS: float = _env_float("HTTP_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
    HTTP_RETRIES: int = _env_int("HTTP_RETRIES", 0)
    HTTP_BACKOFF_FACTOR: float = _env_float("HTTP_BACKOFF_FACTOR", 0.3)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Configuration used by the test suite."""

    DEBUG: bool = False
    TESTING: bool = True


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
