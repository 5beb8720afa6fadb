"""
Runtime configuration for lite-shell.

Settings come from defaults, then environment variables, then command-line
flags (applied by the CLI on top of from_env()).

Environment variables:
    LITE_SHELL_PROMPT      Prompt string (default: '$ ')
    LITE_SHELL_LOG_LEVEL   Logging level name (default: WARNING)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigError

DEFAULT_PROMPT = "$ "
DEFAULT_LOG_LEVEL = "WARNING"

PROMPT_VAR = "LITE_SHELL_PROMPT"
LOG_LEVEL_VAR = "LITE_SHELL_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_log_level(value: str, key: str = LOG_LEVEL_VAR) -> str:
    """Normalize a level name, raising ConfigError if it is not one we know."""
    level = value.strip().upper()
    if level not in _LEVELS:
        raise ConfigError(key, value)
    return level


@dataclass
class ShellConfig:
    """Shell settings."""

    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """
        Build a config from environment variables.

        Args:
            env: Mapping to read (default: os.environ)

        Raises:
            ConfigError: If LITE_SHELL_LOG_LEVEL is not a level name
        """
        if env is None:
            env = os.environ

        config = cls()
        if PROMPT_VAR in env:
            config.prompt = env[PROMPT_VAR]
        if env.get(LOG_LEVEL_VAR):
            config.log_level = parse_log_level(env[LOG_LEVEL_VAR])
        return config


def configure_logging(level: str = DEFAULT_LOG_LEVEL):
    """Send log records to stderr at the given level."""
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)
