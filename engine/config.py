# engine/config.py
import logging
import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"


class Settings(BaseModel):
    log_level: str = Field("INFO", description="Root logging level name.")
    allowed_origins: List[str] = Field(
        default_factory=lambda: ["*"], description="Origins allowed by CORS."
    )


def load_settings() -> Settings:
    """Reads application settings from the environment (and a .env file if present)."""
    origins = os.getenv("ALLOWED_ORIGINS", "*")
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        allowed_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
    )


def configure_logging(settings: Settings):
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown LOG_LEVEL: {settings.log_level}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
