"""Exclusion matching for the directory walk."""

import fnmatch
from pathlib import Path


def is_excluded(path: Path, exclude: list[str], root: Path) -> bool:
    """Check if ``path`` is covered by an exclusion entry.

    An entry excludes a path equal to it or below it (relative entries are
    taken from ``root``), or matching it as a glob against the posix path or
    the file name.
    """
    if not exclude:
        return False
    path_abs = path.absolute()
    path_str = path.as_posix()
    for entry in exclude:
        if not entry:
            continue
        entry_path = Path(entry).expanduser()
        if not entry_path.is_absolute():
            entry_path = root / entry_path
        entry_abs = entry_path.absolute()
        if path_abs == entry_abs or entry_abs in path_abs.parents:
            return True
        if fnmatch.fnmatchcase(path_str, entry) or fnmatch.fnmatchcase(path.name, entry):
            return True
    return False
