"""Environment configuration management."""

import os
import sys
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field

from bumpmonitoring.utils.rich_console import is_truthy, resolve_log_level

load_dotenv()

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class EnvironmentConfig(BaseModel):
    """Settings read from the process environment and an optional .env file."""

    BUMPMONITORING_DEBUG: bool = Field(False, description="Enable debug logging")
    BUMPMONITORING_LOG_LEVEL: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @property
    def log_level(self) -> str:
        """Effective loguru level; debug mode always wins."""
        if self.BUMPMONITORING_DEBUG:
            return "DEBUG"
        return self.BUMPMONITORING_LOG_LEVEL

    def configure_logging(self) -> None:
        """Route loguru output to stderr at the configured level.

        The sink looks ``sys.stderr`` up on every message so that a swapped
        stream (test runners, CliRunner) is honored.
        """
        logger.remove()
        logger.add(
            lambda message: sys.stderr.write(message),
            level=self.log_level,
            format=LOG_FORMAT,
            colorize=sys.stderr.isatty(),
        )

    @classmethod
    def load(cls) -> "EnvironmentConfig":
        """Load environment configuration from environment variables and configure logging."""
        config = cls(
            BUMPMONITORING_DEBUG=is_truthy(os.getenv("BUMPMONITORING_DEBUG")),
            BUMPMONITORING_LOG_LEVEL=resolve_log_level(os.getenv("BUMPMONITORING_LOG_LEVEL")),
        )
        config.configure_logging()
        return config


# Global environment configuration instance
_env_config: Optional[EnvironmentConfig] = None


def get_env_config() -> EnvironmentConfig:
    """Get the environment configuration singleton."""
    global _env_config
    if _env_config is None:
        _env_config = EnvironmentConfig.load()
    return _env_config


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return get_env_config().BUMPMONITORING_DEBUG
