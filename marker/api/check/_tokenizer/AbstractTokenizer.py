"""Abstract tokenizer interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .TokenEvent import TokenEvent


class AbstractTokenizer(ABC):
    """Turns markdown text into a forward stream of ``TokenEvent``.

    Implementations must emit events in source order, pair every
    ``LINK_START``/``CODE_BLOCK_START`` with its end event, and emit
    ``REFERENCE_BROKEN`` for link labels that have no definition in the text.
    """

    @abstractmethod
    def tokenize(self, text: str) -> Iterator[TokenEvent]:
        """Tokenize text and yield events."""
        pass
