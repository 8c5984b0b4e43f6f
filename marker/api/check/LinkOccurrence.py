"""Link occurrence model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path

from .DocumentError import DocumentError
from .DocumentLocation import DocumentLocation
from .LinkError import LinkError


@dataclass(frozen=True)
class LinkOccurrence:
    """One appearance of a link target at a specific file and line."""

    target: str
    text: str
    line: int
    file_path: Path

    def new_error(self, error: LinkError) -> DocumentError:
        return DocumentError(
            location=DocumentLocation(path=self.file_path, line=self.line),
            error=error,
            text=self.text,
            target=self.target,
        )
