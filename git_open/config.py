"""Load runtime settings from environment variables."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from typing import Mapping

from .exceptions import ConfigError


BROWSER_ENV = "GIT_OPEN_BROWSER"
NO_OPEN_ENV = "GIT_OPEN_NO_OPEN"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Application configuration."""

    browser_command: list[str] = field(default_factory=list)
    no_open: bool = False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    try:
        browser_command = shlex.split(env.get(BROWSER_ENV, ""))
    except ValueError as exc:
        raise ConfigError(f"Invalid {BROWSER_ENV} value: {exc}") from exc
    return Settings(
        browser_command=browser_command,
        no_open=env.get(NO_OPEN_ENV, "").strip().lower() in _TRUTHY,
    )
