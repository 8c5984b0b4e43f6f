"""Kinds of link validation failure."""

from enum import Enum


class LinkErrorKind(Enum):
    PATH_ABSOLUTE = "path_absolute"
    PATH_NON_EXISTENT = "path_non_existent"
    HTTP_STATUS = "http_status"
    HTTP_ERROR = "http_error"
    URL_MALFORMED = "url_malformed"
    REFERENCE_BROKEN = "reference_broken"
