"""Open URLs with the platform's default browser."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Sequence

from .exceptions import BrowserLaunchError, UnsupportedPlatformError


log = logging.getLogger(__name__)

# Keyed by sys.platform prefix; the URL is appended to the command.
OPEN_COMMANDS: dict[str, tuple[str, ...]] = {
    "linux": ("xdg-open",),
    "darwin": ("open",),
    "win32": ("rundll32", "url.dll,FileProtocolHandler"),
}


def open_command(
    url: str,
    *,
    platform: str | None = None,
    override: Sequence[str] | None = None,
) -> list[str]:
    """Return the argv that opens ``url``."""

    if override:
        return [*override, url]
    platform = platform or sys.platform
    for prefix, command in OPEN_COMMANDS.items():
        if platform.startswith(prefix):
            return [*command, url]
    raise UnsupportedPlatformError(platform)


def launch(
    url: str,
    *,
    platform: str | None = None,
    override: Sequence[str] | None = None,
) -> None:
    """Spawn the open command without waiting for it to exit."""

    cmd = open_command(url, platform=platform, override=override)
    log.debug("Launching browser: %s", " ".join(cmd))
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        raise BrowserLaunchError(cmd, exc.strerror or str(exc)) from exc
