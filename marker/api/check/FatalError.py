"""Fatal pre-scan failure."""


class FatalError(Exception):
    """The run cannot produce a meaningful report (walk or read failure)."""
