"""Parse origin remote URLs into hosting coordinates."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from .exceptions import InvalidRemoteURLError, UnsupportedRemoteFormatError
from .models import RepoInfo


SUPPORTED_SCHEME = "ssh"
_PATH_PATTERN = re.compile(r"^/(?P<project>[^/]+)/(?P<repo>[^/.]+)(?:\.git)?$")


def parse_remote(remote: str) -> RepoInfo:
    """Split ``ssh://[user@]host[:port]/<project>/<repo>[.git]``.

    The port is optional and always discarded. The host is lowercased by
    ``urlsplit``.
    """

    try:
        parsed = urlsplit(remote.strip())
        host = parsed.hostname
        _ = parsed.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise InvalidRemoteURLError(f"Invalid remote URL {remote!r}: {exc}") from exc
    if not parsed.scheme or not parsed.netloc or not host:
        raise InvalidRemoteURLError(f"Invalid remote URL {remote!r}: missing host")
    if parsed.scheme != SUPPORTED_SCHEME:
        raise UnsupportedRemoteFormatError(
            f"Unsupported remote URL scheme {parsed.scheme!r}; expected ssh://host/<project>/<repo>.git"
        )
    match = _PATH_PATTERN.match(parsed.path)
    if match is None or parsed.query or parsed.fragment:
        raise UnsupportedRemoteFormatError(f"Unsupported remote URL format: {remote}")
    return RepoInfo(host=host, project=match.group("project"), repo_name=match.group("repo"))
