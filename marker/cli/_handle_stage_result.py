"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import TypeVar

from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _handle_stage_result(
    func: F,
    result_printer: Callable[[dict], None] | None = None,
    output_format: str = "json",
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout, through result_printer when given)

    The process exits with ``StageResult.exit_code``.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        result = func(*args, **kwargs)

        # Stage 1: Announce
        display.status(result.announce)

        # Stage 2: Progress
        for progress_percent, message in result.progress_callback(result):
            display.info(f"[dim]Progress: {message} ({progress_percent:.0%})[/dim]")

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")
        if not result.output:
            raise ValueError("progress_callback must set result.output to a non-empty dict")

        # Stage 3: Result
        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

        # Stage 4: Output
        if result_printer:
            result_printer(result.output)
        else:
            display.json_output(result.output, format=output_format)

        sys.exit(result.exit_code)

    return wrapper  # type: ignore[return-value]
