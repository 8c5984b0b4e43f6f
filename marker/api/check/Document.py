"""Markdown document scanner."""

from __future__ import annotations

from bisect import bisect_left

from ._tokenizer import AbstractTokenizer, MarkdownItTokenizer, TokenEvent, TokenKind
from .LocatedEvent import BrokenReference, Link, LinkEvent, LocatedEvent


class Document:
    """Iterate over the links and broken references of one markdown text.

    A single forward pass: once exhausted the iterator stays exhausted.
    """

    def __init__(self, contents: str, tokenizer: AbstractTokenizer | None = None):
        tokenizer = tokenizer or MarkdownItTokenizer()
        self._tokens = iter(tokenizer.tokenize(contents))
        self._newlines = [i for i, char in enumerate(contents) if char == "\n"]

        self._code_block = False
        self._last_text: str | None = None

    def __iter__(self) -> Document:
        return self

    def __next__(self) -> LocatedEvent:
        for token in self._tokens:
            if token.kind is TokenKind.TEXT:
                if not self._code_block:
                    self._last_text = token.text
            elif token.kind is TokenKind.CODE_BLOCK_START:
                self._code_block = True
            elif token.kind is TokenKind.CODE_BLOCK_END:
                self._code_block = False
            elif token.kind is TokenKind.LINK_END and not token.autolink:
                return self._located(Link(target=token.target, text=self._last_text or ""), token)
            elif token.kind is TokenKind.REFERENCE_BROKEN:
                return self._located(BrokenReference(target="", text=token.text), token)
        raise StopIteration

    def _located(self, event: LinkEvent, token: TokenEvent) -> LocatedEvent:
        # Newlines strictly before the construct, plus one
        return LocatedEvent(event=event, line=bisect_left(self._newlines, token.offset) + 1)
