"""Route link occurrences to the URL checker or the path validator."""

import logging
from pathlib import Path

from .canonical_url import canonical_url
from .check_path import check_path
from .Classification import Malformed, RelativePath, UrlTarget
from .classify_target import classify_target
from .DocumentError import DocumentError
from .LinkError import LinkError
from .LinkOccurrence import LinkOccurrence

logger = logging.getLogger(__name__)


def classify_occurrences(
    links: list[LinkOccurrence],
    root: Path,
    skip_http: bool = False,
    allow_absolute: bool = False,
) -> tuple[dict[str, list[LinkOccurrence]], list[DocumentError]]:
    """Classify every link and validate the local ones.

    Returns:
        (groups, errors): URL occurrences grouped by canonical URL in first-seen
        order, and the path/malformed errors found along the way
    """
    groups: dict[str, list[LinkOccurrence]] = {}
    errors: list[DocumentError] = []

    for link in links:
        classification = classify_target(link.target)
        if isinstance(classification, UrlTarget):
            if skip_http:
                continue
            groups.setdefault(canonical_url(classification.url), []).append(link)
        elif isinstance(classification, RelativePath):
            error = check_path(classification.path, link.file_path, root, allow_absolute)
            if error is not None:
                errors.append(link.new_error(error))
        elif isinstance(classification, Malformed):
            errors.append(link.new_error(LinkError.url_malformed(classification.message)))

    logger.debug("Classified %d link(s): %d distinct URL(s)", len(links), len(groups))
    return groups, errors
