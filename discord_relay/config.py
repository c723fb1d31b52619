'''
This module loads the process configuration.
'''

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8088
DEFAULT_NOTIFY_TIMEOUT = 10.0


class ConfigError(Exception):
    '''
    Raised when required configuration is missing or invalid
    '''
    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class Config(BaseModel):
    '''
    Config holds the two Discord channel webhooks and server settings.
    It is read once at startup and never changes afterwards.
    '''
    model_config = ConfigDict(frozen=True)

    dev_webhook_url: str
    test_webhook_url: str
    port: int = Field(DEFAULT_PORT, gt=0, lt=65536)
    notify_timeout: float = Field(DEFAULT_NOTIFY_TIMEOUT, gt=0)
    log_level: str = "INFO"


def _number(name: str, default, cast):
    value = os.getenv(name)
    if not value:
        return default
    try:
        return cast(value)
    except ValueError as error:
        raise ConfigError(f"{name} must be a number, got {value!r}") from error


def _log_level() -> str:
    level = (os.getenv("LOG_LEVEL") or "INFO").upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"LOG_LEVEL must be a logging level name, got {level!r}")
    return level


def load_config(env_file: str | None = None) -> Config:
    '''
    Given params:

    env_file: str | None, path of a .env file to load first,
    defaults to the nearest .env from the working directory up,

    return the Config built from environment variables.
    Raise ConfigError if a Discord webhook URL is not set
    or a setting has an invalid value.
    '''
    if not load_dotenv(env_file or find_dotenv(usecwd=True)):
        logger.warning("No .env file loaded, using process environment only")

    dev_webhook_url = os.getenv("DISCORD_DEV_WEBHOOK_URL")
    test_webhook_url = os.getenv("DISCORD_TEST_WEBHOOK_URL")
    if not dev_webhook_url or not test_webhook_url:
        raise ConfigError("Discord webhook URLs not set in environment variables")

    try:
        return Config(
            dev_webhook_url=dev_webhook_url,
            test_webhook_url=test_webhook_url,
            port=_number("PORT", DEFAULT_PORT, int),
            notify_timeout=_number("NOTIFY_TIMEOUT", DEFAULT_NOTIFY_TIMEOUT, float),
            log_level=_log_level(),
        )
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration: {error}") from error
