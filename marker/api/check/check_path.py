"""Validate a local link target."""

from pathlib import Path

from .LinkError import LinkError
from .LinkErrorKind import LinkErrorKind


def check_path(target: str, file_path: Path, root: Path, allow_absolute: bool = False) -> LinkError | None:
    """Check that a path target exists on disk.

    Args:
        target: Link target, possibly with a ``#fragment``
        file_path: Markdown file holding the link
        root: Project root used for absolute targets
        allow_absolute: Resolve absolute targets against ``root`` instead of rejecting them

    Returns:
        None if the target exists, otherwise the error to report
    """
    path = Path(target.split("#", 1)[0])

    if path.anchor:
        if not allow_absolute:
            return LinkError(LinkErrorKind.PATH_ABSOLUTE)
        resolved = root.joinpath(*path.parts[1:])
    else:
        resolved = file_path.parent / path

    if not resolved.exists():
        return LinkError(LinkErrorKind.PATH_NON_EXISTENT)
    return None
