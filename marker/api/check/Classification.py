"""Classifier result models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UrlTarget:
    """An absolute URL."""

    url: str


@dataclass(frozen=True)
class RelativePath:
    """A filesystem path (possibly with a fragment)."""

    path: str


@dataclass(frozen=True)
class Malformed:
    """A target that fails URL grammar and is not a path."""

    message: str


Classification = UrlTarget | RelativePath | Malformed
