"""Token event model (UNO: single model)."""

from dataclasses import dataclass

from .TokenKind import TokenKind


@dataclass(frozen=True)
class TokenEvent:
    """One start/end/text mark from a markdown tokenizer.

    ``offset`` is the character offset in the source text where the construct
    starts. For ``LINK_END`` it is the offset of the matching link start.
    """

    kind: TokenKind
    offset: int
    target: str = ""
    text: str = ""
    autolink: bool = False
