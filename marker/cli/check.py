"""Check command registration."""

from enum import Enum

import typer

from marker.api.check.cmd_check import cmd_check
from marker.cli._handle_stage_result import _handle_stage_result
from marker.cli.display.CLIDisplay import CLIDisplay


class OutputFormat(str, Enum):
    text = "text"
    json = "json"
    yaml = "yaml"


def _print_report(output: dict) -> None:
    CLIDisplay().lines_output([error["message"] for error in output["link_errors"]])


def check(app: typer.Typer) -> None:
    """Register the check command on the main app."""

    @app.command(name="check")
    def check_cmd(
        root: str | None = typer.Option(
            None, "--root", "-r", help="The path to the root of the documentation to be checked"
        ),
        skip_http: bool = typer.Option(False, "--skip-http", help="Skip validation of HTTP[S] URLs"),
        exclude: list[str] | None = typer.Option(
            None, "--exclude", "-e", help="Path or glob to leave out of the check (repeatable)"
        ),
        allow_absolute_paths: bool = typer.Option(
            False, "--allow-absolute-paths", help="Resolve absolute paths against the root"
        ),
        timeout: float | None = typer.Option(None, "--timeout", min=0.1, help="Seconds per HTTP request"),
        workers: int | None = typer.Option(None, "--workers", min=1, help="Concurrent HTTP checks"),
        output_format: OutputFormat = typer.Option(OutputFormat.text, "--format", "-f", help="Output format"),
        verbose: bool = typer.Option(False, "--verbose", "-V", help="Log to stderr"),
    ) -> None:
        """Check every link in the markdown files under the root."""
        printer = _print_report if output_format is OutputFormat.text else None
        _handle_stage_result(cmd_check, result_printer=printer, output_format=output_format.value)(
            root=root,
            skip_http=skip_http or None,
            exclude=exclude,
            allow_absolute_paths=allow_absolute_paths or None,
            timeout=timeout,
            workers=workers,
            verbose=verbose,
        )
