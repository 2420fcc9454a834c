"""
Runtime configuration.

Settings are read from the process environment after loading an optional
``.env`` file with python-dotenv.

Environment Variables:
    - EVM_CONFIRM_LOCALE: UI language (default "en")
    - EVM_CONFIRM_LOG_LEVEL: logging level name or number (default "INFO")
    - EVM_CONFIRM_CHAIN: CAIP-2 chain identifier (default "eip155:1")
"""

import logging
import os
from typing import Mapping, Optional

import dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .adapters.evm.constants import get_chain_config
from .engine.exceptions import ConfigurationError
from .utils.logging import coerce_level

ENV_LOCALE = "EVM_CONFIRM_LOCALE"
ENV_LOG_LEVEL = "EVM_CONFIRM_LOG_LEVEL"
ENV_CHAIN = "EVM_CONFIRM_CHAIN"


class Settings(BaseModel):
    """Typed runtime settings."""

    locale: str = Field(default="en", description="UI language tag")
    log_level: int = Field(default=logging.INFO, description="Root logging level")
    chain_id: str = Field(default="eip155:1", description="CAIP-2 chain identifier")

    @field_validator("log_level", mode="before")
    @classmethod
    def _level(cls, value) -> int:
        level = coerce_level(value, fallback=-1)
        if level < 0:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("chain_id")
    @classmethod
    def _supported_chain(cls, value: str) -> str:
        config = get_chain_config(value)
        if config is None:
            raise ValueError(f"Unsupported chain: {value}")
        return config.caip2


def load_settings(env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        env: Mapping to read instead of ``os.environ`` (no ``.env`` loading then).
        dotenv_path: Explicit ``.env`` file; by default python-dotenv searches upwards.

    Raises:
        ConfigurationError: If a value is invalid.
    """
    if env is None:
        dotenv.load_dotenv(dotenv_path=dotenv_path)
        env = os.environ

    raw = {
        "locale": env.get(ENV_LOCALE),
        "log_level": env.get(ENV_LOG_LEVEL),
        "chain_id": env.get(ENV_CHAIN),
    }
    try:
        return Settings(**{key: value for key, value in raw.items() if value})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
