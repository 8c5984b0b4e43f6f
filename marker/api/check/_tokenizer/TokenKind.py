"""Kinds of token emitted by a tokenizer."""

from enum import Enum


class TokenKind(Enum):
    """What a ``TokenEvent`` marks in the document."""

    TEXT = "text"
    CODE_BLOCK_START = "code_block_start"
    CODE_BLOCK_END = "code_block_end"
    LINK_START = "link_start"
    LINK_END = "link_end"
    REFERENCE_BROKEN = "reference_broken"
