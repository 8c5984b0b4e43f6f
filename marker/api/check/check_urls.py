"""Check every distinct URL once and attribute the outcome to each occurrence."""

import logging
from concurrent.futures import ThreadPoolExecutor

from .check_url import check_url
from .DocumentError import DocumentError
from .HeadOrGet import HeadOrGet
from .LinkOccurrence import LinkOccurrence

logger = logging.getLogger(__name__)


def check_urls(
    groups: dict[str, list[LinkOccurrence]],
    head_or_get: HeadOrGet,
    max_workers: int = 8,
) -> list[DocumentError]:
    """Check each canonical URL on a bounded pool.

    A failing URL yields one error per occurrence in its group. Errors come
    back in group order whatever order the checks complete in.
    """
    if not groups:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {url: executor.submit(check_url, url, head_or_get) for url in groups}

    errors: list[DocumentError] = []
    for url, future in futures.items():
        error = future.result()
        if error is None:
            continue
        errors.extend(occurrence.new_error(error) for occurrence in groups[url])

    logger.info("Checked %d distinct URL(s)", len(groups))
    return errors
