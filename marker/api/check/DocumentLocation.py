"""Document location model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, order=True)
class DocumentLocation:
    """A file and 1-based line."""

    path: Path
    line: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"
