"""Aggregate link errors into the final report."""

from collections.abc import Iterable

from .DocumentError import DocumentError


class ErrorReport:
    """Collects ``DocumentError`` values from every stage in any order.

    Rendering is deterministic: errors are ordered by file then line, ties
    keeping the order they were added in.
    """

    def __init__(self, errors: Iterable[DocumentError] = ()):
        self._errors: list[DocumentError] = list(errors)

    def add(self, error: DocumentError) -> None:
        self._errors.append(error)

    def extend(self, errors: Iterable[DocumentError]) -> None:
        self._errors.extend(errors)

    @property
    def errors(self) -> list[DocumentError]:
        return sorted(self._errors, key=lambda error: (str(error.location.path), error.location.line))

    @property
    def failed(self) -> bool:
        return bool(self._errors)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def render(self) -> list[str]:
        return [str(error) for error in self.errors]

    def __len__(self) -> int:
        return len(self._errors)
