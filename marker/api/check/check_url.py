"""Check one distinct URL."""

import logging
from http import HTTPStatus
from urllib.parse import urlsplit

from ._constants import HTTP_SCHEMES
from .HeadOrGet import HeadOrGet
from .LinkError import LinkError
from .TransportError import TransportError

logger = logging.getLogger(__name__)


def check_url(url: str, head_or_get: HeadOrGet) -> LinkError | None:
    """Return None if ``url`` answers 200 OK, otherwise the error to report.

    Non-HTTP(S) schemes are always valid and never touch the network.
    """
    if urlsplit(url).scheme not in HTTP_SCHEMES:
        return None

    try:
        status = head_or_get(url)
    except TransportError as exc:
        logger.debug("%s failed: %s", url, exc)
        return LinkError.http_error(str(exc))

    logger.debug("%s answered %d", url, status)
    if status != HTTPStatus.OK:
        return LinkError.http_status(status)
    return None
