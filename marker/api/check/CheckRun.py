"""Check run summary model (UNO: single model)."""

from dataclasses import dataclass, field

from .ErrorReport import ErrorReport


@dataclass
class CheckRun:
    """Counters and report of one pipeline run."""

    files_checked: int = 0
    links_checked: int = 0
    urls_checked: int = 0
    report: ErrorReport = field(default_factory=ErrorReport)
