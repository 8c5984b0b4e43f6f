"""Link check API domain."""

from .check_documents import check_documents
from .CheckOutput import CheckOutput
from .CheckRun import CheckRun
from .Document import Document
from .DocumentError import DocumentError
from .ErrorReport import ErrorReport
from .FatalError import FatalError
from .HttpClient import HttpClient
from .LinkError import LinkError
from .LinkErrorKind import LinkErrorKind
from .LocatedEvent import BrokenReference, Link, LocatedEvent
from .TransportError import TransportError

__all__ = [
    "BrokenReference",
    "CheckOutput",
    "CheckRun",
    "Document",
    "DocumentError",
    "ErrorReport",
    "FatalError",
    "HttpClient",
    "Link",
    "LinkError",
    "LinkErrorKind",
    "LocatedEvent",
    "TransportError",
    "check_documents",
]
