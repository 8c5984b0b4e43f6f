"""Collect link occurrences from scanned documents."""

import logging
from collections.abc import Mapping
from pathlib import Path

from ._tokenizer import AbstractTokenizer, MarkdownItTokenizer
from .Document import Document
from .DocumentError import DocumentError
from .LinkError import LinkError
from .LinkErrorKind import LinkErrorKind
from .LinkOccurrence import LinkOccurrence
from .LocatedEvent import BrokenReference

logger = logging.getLogger(__name__)


def collect_occurrences(
    documents: Mapping[Path, str],
    tokenizer: AbstractTokenizer | None = None,
) -> tuple[list[LinkOccurrence], list[DocumentError]]:
    """Scan every document.

    Args:
        documents: File path to markdown text, in the order to report them
        tokenizer: Tokenizer shared by every document (default markdown-it-py)

    Returns:
        (links, errors): resolvable link occurrences, and one
        ``REFERENCE_BROKEN`` error per unresolved reference label
    """
    tokenizer = tokenizer or MarkdownItTokenizer()
    links: list[LinkOccurrence] = []
    errors: list[DocumentError] = []

    for file_path, contents in documents.items():
        found = 0
        for located in Document(contents, tokenizer):
            occurrence = LinkOccurrence(
                target=located.event.target,
                text=located.event.text,
                line=located.line,
                file_path=file_path,
            )
            if isinstance(located.event, BrokenReference):
                errors.append(occurrence.new_error(LinkError(LinkErrorKind.REFERENCE_BROKEN)))
            else:
                links.append(occurrence)
                found += 1
        logger.debug("Scanned %s: %d link(s)", file_path, found)

    return links, errors
