"""Classify a link target as URL, relative path or malformed."""

import re
from urllib.parse import urlsplit

from ._constants import SPECIAL_SCHEMES
from .Classification import Classification, Malformed, RelativePath, UrlTarget

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
FORBIDDEN_HOST_CHARS = frozenset(" \t\r\n#%/<>?@[\\]^|")


def classify_target(target: str) -> Classification:
    """Classify a link target using URL grammar.

    A target without a scheme is a relative reference and therefore a path,
    unless its authority (``//host:port``) is itself invalid.
    """
    candidate = target.strip()

    if not SCHEME_PATTERN.match(candidate):
        if candidate.startswith("//"):
            problem = _authority_problem(candidate)
            if problem:
                return Malformed(problem)
        return RelativePath(target)

    candidate = _with_authority(candidate)
    problem = _authority_problem(candidate)
    if problem:
        return Malformed(problem)
    parts = urlsplit(candidate)
    if parts.scheme.lower() in SPECIAL_SCHEMES and not parts.hostname:
        return Malformed("empty host")
    return UrlTarget(candidate)


def _with_authority(url: str) -> str:
    """Read what follows a special scheme as the authority, however many slashes precede it.

    ``http:foo`` and ``http:///foo`` both name ``http://foo``.
    """
    scheme, rest = url.split(":", 1)
    if scheme.lower() not in SPECIAL_SCHEMES:
        return url
    authority = rest.lstrip("/\\")
    return f"{scheme}://{authority}"


def _authority_problem(url: str) -> str | None:
    try:
        parts = urlsplit(url)
        _ = parts.port
    except ValueError as exc:
        message = str(exc)
        if "IPv6" in message:
            return "invalid IPv6 address"
        if "Port" in message or "port" in message:
            return "invalid port number"
        return message

    host = parts.hostname
    if host and "[" not in parts.netloc and any(char in FORBIDDEN_HOST_CHARS for char in host):
        return "invalid domain character"
    return None
