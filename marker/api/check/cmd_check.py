"""Check API command."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.configure_logging import configure_logging
from ..config.MarkerConfig import MarkerConfig
from ..StageResult import StageResult
from .CheckOutput import CheckOutput
from .FatalError import FatalError
from .HeadOrGet import HeadOrGet
from .run_check import run_check


def cmd_check(
    root: str | None = None,
    skip_http: bool | None = None,
    exclude: list[str] | None = None,
    allow_absolute_paths: bool | None = None,
    timeout: float | None = None,
    workers: int | None = None,
    head_or_get: HeadOrGet | None = None,
    verbose: bool = False,
) -> StageResult:
    """Check every link of the markdown files under ``root``.

    Options left as None fall back to the configuration file, then to the
    defaults.
    """
    announce_root = root or "."

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = MarkerConfig.load().with_overrides(
                root=Path(root) if root is not None else None,
                skip_http=skip_http,
                exclude=exclude or None,
                allow_absolute_paths=allow_absolute_paths,
                http_timeout=timeout,
                http_max_workers=workers,
            )
        except ValueError as e:
            _fail(result_obj, announce_root, f"Invalid configuration: {e}")
            return
        configure_logging(level="DEBUG" if verbose else config.log.level, verbose=verbose)

        yield (0.3, f"Scanning {config.root}...")
        try:
            run = run_check(config, head_or_get)
        except FatalError as e:
            _fail(result_obj, str(config.root), str(e))
            return

        yield (1.0, "Complete")
        errors = run.report.errors
        result_obj.output = CheckOutput(
            root=str(config.root),
            files_checked=run.files_checked,
            links_checked=run.links_checked,
            urls_checked=run.urls_checked,
            link_errors=[error.to_dict() for error in errors],
        ).model_dump(mode="python")
        result_obj.success = not run.report.failed
        if result_obj.success:
            result_obj.result = f"Checked {run.links_checked} link(s) in {run.files_checked} file(s)"
        else:
            result_obj.result = f"Found {len(errors)} broken link(s) in {run.files_checked} file(s)"

    return StageResult(announce=f"Checking links in {announce_root}...", progress_callback=do_work)


def _fail(result_obj: StageResult, root: str, message: str) -> None:
    result_obj.output = CheckOutput(root=root, errors=[message]).model_dump(mode="python")
    result_obj.result = message
    result_obj.success = False
    result_obj.fatal = True
