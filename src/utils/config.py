"""Runtime settings read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    app_env: str = "production"
    log_level: str = "INFO"
    log_dir: Path = Path(".")
    log_file: str = "brand-tokens.log"
    error_log_file: str = "brand-tokens-error.log"
    log_to_file: bool = True

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.log_file

    @property
    def error_log_path(self) -> Path:
        return self.log_dir / self.error_log_file


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build Settings from environment variables.

    ``LOG_LEVEL`` wins when set; otherwise production logs at INFO and
    every other APP_ENV at DEBUG.
    """
    load_dotenv(dotenv_path=env_file)

    app_env = os.getenv("APP_ENV", "production")
    default_level = "INFO" if app_env == "production" else "DEBUG"
    return Settings(
        app_env=app_env,
        log_level=os.getenv("LOG_LEVEL", default_level).upper(),
        log_dir=Path(os.getenv("LOG_DIR", ".")),
        log_file=os.getenv("LOG_FILE", "brand-tokens.log"),
        error_log_file=os.getenv("ERROR_LOG_FILE", "brand-tokens-error.log"),
        log_to_file=_env_flag(os.getenv("LOG_TO_FILE"), True),
    )
