"""ipnorm context for passing settings between commands."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import click

LOG_ENV_VAR = "IPNORM_LOG"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    log_level: str


def _normalize_level(value: str) -> str:
    """Upper-case a level name, rejecting names logging does not know.

    Raises:
        click.BadParameter: If the level is not a standard logging level
    """
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise click.BadParameter(
            f"Unknown log level: {value}. "
            f"Use DEBUG, INFO, WARNING, ERROR or CRITICAL"
        )
    return level


def resolve_settings(log_level_option: Optional[str] = None) -> Settings:
    """Resolve settings.

    Resolution order:
    1. --log-level CLI flag (explicit override)
    2. $IPNORM_LOG environment variable
    3. WARNING

    Reads fresh from environment each time.

    Args:
        log_level_option: Value of --log-level option if provided

    Returns:
        Settings with the effective log level
    """
    if log_level_option:
        return Settings(log_level=_normalize_level(log_level_option))

    env_level = os.environ.get(LOG_ENV_VAR)
    if env_level:
        return Settings(log_level=_normalize_level(env_level))

    return Settings(log_level=DEFAULT_LOG_LEVEL)


class IpnormContext:
    def __init__(self):
        self.settings = resolve_settings()


pass_context = click.make_pass_decorator(IpnormContext, ensure=True)
