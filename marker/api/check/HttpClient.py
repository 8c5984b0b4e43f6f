"""requests-backed URL checker."""

import logging
from http import HTTPStatus

import requests  # type: ignore

from .TransportError import TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    """Check URLs with HEAD, falling back to GET when HEAD is not allowed.

    Redirects are followed. Instances are callable so they can be passed
    wherever a ``HeadOrGet`` is expected.
    """

    def __init__(self, timeout: float = 10.0, user_agent: str = "marker"):
        self.timeout = timeout
        self.user_agent = user_agent

    def head_or_get(self, url: str) -> int:
        headers = {"User-Agent": self.user_agent}
        try:
            response = requests.head(url, headers=headers, timeout=self.timeout, allow_redirects=True)
            if response.status_code == HTTPStatus.METHOD_NOT_ALLOWED:
                logger.debug("HEAD not allowed for %s, retrying with GET", url)
                response = requests.get(url, headers=headers, timeout=self.timeout, allow_redirects=True, stream=True)
                response.close()
        except (requests.RequestException, ValueError) as exc:
            raise TransportError(str(exc)) from exc
        return response.status_code

    def __call__(self, url: str) -> int:
        return self.head_or_get(url)
