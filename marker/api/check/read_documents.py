"""Read markdown files into memory."""

from collections.abc import Iterable
from pathlib import Path

from .FatalError import FatalError


def read_documents(paths: Iterable[Path]) -> dict[Path, str]:
    """Read each file as UTF-8, preserving order.

    Raises:
        FatalError: On the first file that cannot be opened or decoded
    """
    documents: dict[Path, str] = {}
    for path in paths:
        try:
            documents[path] = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FatalError(f"Failed to read file ({path}): {exc}") from exc
    return documents
