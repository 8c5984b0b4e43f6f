"""Configuration domain."""

from .HttpConfig import HttpConfig
from .LogConfig import LogConfig
from .MarkerConfig import MarkerConfig

__all__ = ["HttpConfig", "LogConfig", "MarkerConfig"]
