"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .MarkerConfig import MarkerConfig


def cmd_show() -> StageResult:
    """Show the effective configuration (file values over defaults)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = MarkerConfig.get_config_path()
        try:
            config = MarkerConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "content": {},
                "config_path": str(config_path),
            }
            result_obj.success = False
            result_obj.fatal = True
            return

        yield (1.0, "Complete")
        warnings = [] if config_path.exists() else [f"No configuration file at {config_path}, using defaults"]
        result_obj.result = "Retrieved configuration"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "content": config.to_dict(),
            "config_path": str(config_path),
        }
        result_obj.success = True

    return StageResult(announce="Loading configuration...", progress_callback=do_work)
