"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    ``fatal`` marks a failure that happened before any validation result
    could be produced (bad configuration, unreadable input).
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
    fatal: bool = False

    @property
    def exit_code(self) -> int:
        if self.fatal:
            return 2
        return 0 if self.success else 1
