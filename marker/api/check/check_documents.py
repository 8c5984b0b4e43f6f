"""Run the link checking pipeline over in-memory documents."""

import logging
from collections.abc import Mapping
from pathlib import Path

from ._tokenizer import AbstractTokenizer
from .check_urls import check_urls
from .CheckRun import CheckRun
from .classify_occurrences import classify_occurrences
from .collect_occurrences import collect_occurrences
from .ErrorReport import ErrorReport
from .HeadOrGet import HeadOrGet

logger = logging.getLogger(__name__)


def check_documents(
    documents: Mapping[Path, str],
    root: Path,
    head_or_get: HeadOrGet,
    skip_http: bool = False,
    allow_absolute_paths: bool = False,
    max_workers: int = 8,
    tokenizer: AbstractTokenizer | None = None,
) -> CheckRun:
    """Scan, classify and validate every link of ``documents``.

    Args:
        documents: File path to markdown text
        root: Project root for absolute paths
        head_or_get: URL checker, only called for distinct HTTP(S) URLs
        skip_http: Accept every URL without checking it
        allow_absolute_paths: Resolve absolute paths against ``root``
        max_workers: Concurrent URL checks
        tokenizer: Markdown tokenizer (default markdown-it-py)
    """
    links, reference_errors = collect_occurrences(documents, tokenizer)
    groups, path_errors = classify_occurrences(links, root, skip_http, allow_absolute_paths)
    url_errors = check_urls(groups, head_or_get, max_workers)

    report = ErrorReport(reference_errors)
    report.extend(path_errors)
    report.extend(url_errors)

    logger.info(
        "Checked %d file(s), %d link(s), %d URL(s): %d error(s)",
        len(documents),
        len(links),
        len(groups),
        len(report),
    )
    return CheckRun(
        files_checked=len(documents),
        links_checked=len(links),
        urls_checked=len(groups),
        report=report,
    )
