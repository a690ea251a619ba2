# datasize/config.py
import logging
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env
# A bad DATASIZE_* value fails Settings() below, so importing datasize raises ValidationError.
load_dotenv()

RoundingMode = Literal[
    "ROUND_HALF_EVEN",
    "ROUND_HALF_UP",
    "ROUND_HALF_DOWN",
    "ROUND_UP",
    "ROUND_DOWN",
    "ROUND_CEILING",
    "ROUND_FLOOR",
    "ROUND_05UP",
]


class Settings(BaseSettings):
    # Formatting
    DATASIZE_PRECISION: int = Field(default=2, ge=0, le=6)
    DATASIZE_ROUNDING: RoundingMode = "ROUND_HALF_EVEN"

    # Logging
    DATASIZE_LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for scripts embedding the converter."""
    logging.basicConfig(
        level=level or settings.DATASIZE_LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
