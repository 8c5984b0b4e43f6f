"""Transport failure raised by URL checkers."""


class TransportError(Exception):
    """A request could not be completed (connection, timeout, TLS)."""
