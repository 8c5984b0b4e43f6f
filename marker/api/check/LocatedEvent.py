"""Scanner event models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """A link with a resolvable destination."""

    target: str
    text: str


@dataclass(frozen=True)
class BrokenReference:
    """A reference-style link whose label is not defined in the document."""

    target: str
    text: str


LinkEvent = Link | BrokenReference


@dataclass(frozen=True)
class LocatedEvent:
    """A scanner event tagged with its 1-based source line."""

    event: LinkEvent
    line: int
