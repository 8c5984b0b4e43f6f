"""Canonical URL used as a deduplication key."""

from urllib.parse import urlsplit, urlunsplit

from ._constants import SPECIAL_SCHEMES


def canonical_url(url: str) -> str:
    """Return ``url`` with its fragment cleared.

    Scheme and host are lowercased and an empty path on a special scheme
    becomes ``/``, so spellings of the same resource share one key.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    netloc = parts.netloc if "@" in parts.netloc else parts.netloc.lower()
    path = parts.path
    if not path and scheme in SPECIAL_SCHEMES and netloc:
        path = "/"
    return urlunsplit((scheme, netloc, path, parts.query, ""))
