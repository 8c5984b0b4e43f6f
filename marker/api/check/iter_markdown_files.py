"""Walk a directory for markdown files."""

import os
from collections.abc import Iterator
from pathlib import Path

from ._constants import MARKDOWN_SUFFIX
from .FatalError import FatalError
from .is_excluded import is_excluded


def _raise_walk_error(error: OSError) -> None:
    raise FatalError(f"Failed to walk directory: {error}") from error


def iter_markdown_files(root: Path, exclude: list[str] | None = None) -> Iterator[Path]:
    """Yield every ``.md`` file under ``root`` in sorted order.

    Raises:
        FatalError: If root is not a directory or the walk fails
    """
    exclude = exclude or []
    if not root.is_dir():
        raise FatalError(f"Failed to walk directory: {root} is not a directory")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        current = Path(dirpath)
        dirnames[:] = sorted(name for name in dirnames if not is_excluded(current / name, exclude, root))
        for filename in sorted(filenames):
            path = current / filename
            if path.suffix != MARKDOWN_SUFFIX or not path.is_file():
                continue
            if is_excluded(path, exclude, root):
                continue
            yield path
