"""
config.py - Runtime settings for the chatbot.

Values come from the process environment, optionally seeded from a .env file.
Variables already set in the environment always win over the file.

    CHATBOT_NAME       display name of the bot (default: Bot)
    CHATBOT_LOG_LEVEL  logging level name (default: WARNING)
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from core import DEFAULT_BOT_NAME

NAME_VAR = "CHATBOT_NAME"
LOG_LEVEL_VAR = "CHATBOT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    bot_name: str = DEFAULT_BOT_NAME
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LEVELS:
        raise ConfigError(f"Unknown log level: {raw!r}")
    return level


def load_settings(env_file: Optional[str] = None) -> Settings:
    if env_file:
        load_dotenv(env_file)
    else:
        # start the .env search in the working directory
        load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        bot_name=os.environ.get(NAME_VAR, DEFAULT_BOT_NAME),
        log_level=parse_log_level(os.environ.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL)),
    )
