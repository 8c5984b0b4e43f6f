"""Link error model and its rendering table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from http import HTTPStatus

from .LinkErrorKind import LinkErrorKind


def _status_detail(error: LinkError) -> str:
    try:
        return f"{error.status} {HTTPStatus(error.status).phrase}"
    except ValueError:
        return f"{error.status} <unknown status code>"


def _message_detail(error: LinkError) -> str:
    return error.message


# kind -> (title, detail formatter)
_RENDERERS: dict[LinkErrorKind, tuple[str, Callable[[LinkError], str] | None]] = {
    LinkErrorKind.PATH_ABSOLUTE: ("Found absolute path", None),
    LinkErrorKind.PATH_NON_EXISTENT: ("Found broken path", None),
    LinkErrorKind.HTTP_STATUS: ("Found broken url", _status_detail),
    LinkErrorKind.HTTP_ERROR: ("HTTP failure", _message_detail),
    LinkErrorKind.URL_MALFORMED: ("Found malformed URL", _message_detail),
    LinkErrorKind.REFERENCE_BROKEN: ("Found broken reference", None),
}


@dataclass(frozen=True)
class LinkError:
    """Why a single link target failed validation.

    ``status`` is set for ``HTTP_STATUS``; ``message`` for ``HTTP_ERROR`` and
    ``URL_MALFORMED``.
    """

    kind: LinkErrorKind
    status: int | None = None
    message: str = ""

    @classmethod
    def http_status(cls, status: int) -> LinkError:
        return cls(LinkErrorKind.HTTP_STATUS, status=status)

    @classmethod
    def http_error(cls, message: str) -> LinkError:
        return cls(LinkErrorKind.HTTP_ERROR, message=message)

    @classmethod
    def url_malformed(cls, message: str) -> LinkError:
        return cls(LinkErrorKind.URL_MALFORMED, message=message)

    @property
    def title(self) -> str:
        return _RENDERERS[self.kind][0]

    @property
    def detail(self) -> str | None:
        formatter = _RENDERERS[self.kind][1]
        return formatter(self) if formatter else None
