import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_marker_home import get_marker_home

# Prevent multiple configurations
_STATE = {"configured": False}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    marker_home: Path | None = None,
    level: int | str = logging.WARNING,
    verbose: bool = False,
) -> None:
    """Configure unified marker logging.

    Args:
        marker_home: Path to marker home directory. If None, derived from environment.
        level: Level of the ``marker`` logger.
        verbose: Also echo log records to stderr.
    """
    root_logger = logging.getLogger("marker")
    root_logger.setLevel(level)

    if _STATE["configured"]:
        if verbose and not any(getattr(h, "_marker_stderr", False) for h in root_logger.handlers):
            root_logger.addHandler(_stderr_handler())
        return

    if marker_home is None:
        marker_home = get_marker_home()

    formatter = logging.Formatter(LOG_FORMAT)

    try:
        marker_home.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            marker_home / "marker.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    except OSError:
        # Read-only home: the report on stdout is still complete
        root_logger.addHandler(logging.NullHandler())
    else:
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if verbose:
        root_logger.addHandler(_stderr_handler())

    _STATE["configured"] = True


def _stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._marker_stderr = True  # type: ignore[attr-defined]
    return handler
