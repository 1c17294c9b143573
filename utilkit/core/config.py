import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def getenv(key: str, fallback: str) -> str:
    """Return the environment variable ``key``, or ``fallback`` if it is unset or empty.

    Only the empty string counts as empty; whitespace is returned as-is.
    """
    value = os.environ.get(key, "")
    if not value:
        logger.debug(f"{key} is not set, using fallback")
        return fallback
    return value


@dataclass(frozen=True)
class Config:
    """Library configuration loaded from environment variables."""

    LOG_LEVEL: str = getenv("UTILKIT_LOG_LEVEL", "WARNING")
    ENVIRONMENT: str = getenv("ENVIRONMENT", "production")

    @classmethod
    def is_development(cls) -> bool:
        return cls.ENVIRONMENT == "development"

    @classmethod
    def validate(cls) -> None:
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            raise ValueError(f"UTILKIT_LOG_LEVEL has an unknown level: {cls.LOG_LEVEL}")


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
        ]
    )
