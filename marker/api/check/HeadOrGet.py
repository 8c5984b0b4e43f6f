"""URL checker capability."""

from collections.abc import Callable

# Takes a URL and returns the final HTTP status code; raises TransportError
HeadOrGet = Callable[[str], int]
