"""Run the link checker over a directory tree."""

from ..config.MarkerConfig import MarkerConfig
from .check_documents import check_documents
from .CheckRun import CheckRun
from .HeadOrGet import HeadOrGet
from .HttpClient import HttpClient
from .iter_markdown_files import iter_markdown_files
from .read_documents import read_documents


def run_check(config: MarkerConfig, head_or_get: HeadOrGet | None = None) -> CheckRun:
    """Walk ``config.root``, read every markdown file and check its links.

    Raises:
        FatalError: If the walk or a read fails
    """
    if head_or_get is None:
        head_or_get = HttpClient(timeout=config.http.timeout, user_agent=config.http.get_user_agent())

    documents = read_documents(iter_markdown_files(config.root, config.exclude))
    return check_documents(
        documents,
        root=config.root,
        head_or_get=head_or_get,
        skip_http=config.skip_http,
        allow_absolute_paths=config.allow_absolute_paths,
        max_workers=config.http.max_workers,
    )
