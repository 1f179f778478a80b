# emailcheck/config.py
import logging
import os
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "emailcheck"

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.environ.get("LOG_FORMAT", "%(asctime)s %(levelname)s %(message)s")

    # emit a DEBUG record naming the rule an address failed on
    LOG_REJECTIONS: bool = os.environ.get("LOG_REJECTIONS", "False").lower() in ("1", "true", "yes")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Opt-in logging setup for applications embedding the package.

    Importing emailcheck never touches the root logger; call this once at
    startup to get basicConfig output at settings.LOG_LEVEL (or `level`).
    Unknown level names fall back to INFO.
    """
    name = (level or settings.LOG_LEVEL).upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        numeric = logging.INFO

    logging.basicConfig(level=numeric, format=settings.LOG_FORMAT)
    log = logging.getLogger(__package__)
    log.setLevel(numeric)
    log.info("%s logging configured level=%s", settings.APP_NAME, logging.getLevelName(numeric))
    return log
