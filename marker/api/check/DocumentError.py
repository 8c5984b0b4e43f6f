"""Located document error model (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .DocumentLocation import DocumentLocation
from .LinkError import LinkError


@dataclass(frozen=True)
class DocumentError:
    """A link error attributed to one occurrence."""

    location: DocumentLocation
    error: LinkError
    text: str
    target: str

    def __str__(self) -> str:
        line = f"{self.error.title:22} ({self.text} -> {self.target}) at {self.location}"
        detail = self.error.detail
        if detail is not None:
            return f"{line} : {detail}"
        return line

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``CheckOutput`` error record."""
        return {
            "path": str(self.location.path),
            "line": self.location.line,
            "kind": self.error.kind.value,
            "title": self.error.title,
            "text": self.text,
            "target": self.target,
            "detail": self.error.detail,
            "message": str(self),
        }
