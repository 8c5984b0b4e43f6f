import os
from pathlib import Path


def get_marker_home() -> Path:
    """Get marker home directory based on MARKER_HOME or default to ~/.marker."""
    marker_home_env = os.environ.get("MARKER_HOME")
    if marker_home_env:
        return Path(marker_home_env).expanduser().resolve()
    return Path.home() / ".marker"
