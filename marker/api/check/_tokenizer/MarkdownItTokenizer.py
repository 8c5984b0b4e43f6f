"""Tokenizer backed by markdown-it-py."""

from __future__ import annotations

from collections.abc import Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from ._constants import META_OFFSET, REFERENCE_BROKEN_TOKEN
from ._inline_with_list_items import _inline_with_list_items
from ._located_link import _located_link
from ._reference_broken import _reference_broken
from .AbstractTokenizer import AbstractTokenizer
from .TokenEvent import TokenEvent
from .TokenKind import TokenKind

_CODE_BLOCKS = ("fence", "code_block")
_AUTOLINK_MARKUP = ("autolink", "linkify")


def _accept_link(url: str) -> bool:
    return True


def _raw_link(url: str) -> str:
    return url


class MarkdownItTokenizer(AbstractTokenizer):
    """CommonMark tokenizer with tables, strikethrough, footnotes and task lists.

    Link destinations are reported exactly as written (after CommonMark
    unescaping), without percent-encoding and without rejecting any scheme.
    """

    def __init__(self, md: MarkdownIt | None = None):
        self.md = md or self.create_parser()

    @staticmethod
    def create_parser() -> MarkdownIt:
        md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
        md.use(footnote_plugin).use(tasklists_plugin)
        md.validateLink = _accept_link  # type: ignore[method-assign]
        md.normalizeLink = _raw_link  # type: ignore[method-assign]
        md.core.ruler.at("inline", _inline_with_list_items)
        md.inline.ruler.at("link", _located_link)
        md.inline.ruler.push(REFERENCE_BROKEN_TOKEN, _reference_broken)
        return md

    def tokenize(self, text: str) -> Iterator[TokenEvent]:
        line_starts = [0]
        line_starts.extend(i + 1 for i, char in enumerate(text) if char == "\n")
        env: dict = {}

        # Footnote bodies are moved to the end of the token stream; ordering
        # blocks by source line keeps the events in document order.
        blocks: list[tuple[int, list[TokenEvent]]] = []
        line = 0
        for token in self.md.parse(text, env):
            if token.map:
                line = token.map[0]
            if token.type in _CODE_BLOCKS:
                blocks.append((line, list(self._code_events(token, line_starts[line]))))
            elif token.type == "inline":
                blocks.append((line, list(self._inline_events(token, line, line_starts, len(text)))))

        blocks.sort(key=lambda block: block[0])
        for _, events in blocks:
            yield from events

    @staticmethod
    def _code_events(token: Token, offset: int) -> Iterator[TokenEvent]:
        yield TokenEvent(TokenKind.CODE_BLOCK_START, offset)
        yield TokenEvent(TokenKind.TEXT, offset, text=token.content)
        yield TokenEvent(TokenKind.CODE_BLOCK_END, offset)

    @staticmethod
    def _inline_events(token: Token, line: int, line_starts: list[int], length: int) -> Iterator[TokenEvent]:
        content = token.content

        def locate(position: int) -> int:
            """Map an offset inside the inline content to an offset in the source."""
            row = content.count("\n", 0, position)
            column = position - (content.rfind("\n", 0, position) + 1)
            index = min(line + row, len(line_starts) - 1)
            line_end = line_starts[index + 1] - 1 if index + 1 < len(line_starts) else length
            return min(line_starts[index] + column, line_end)

        block_offset = locate(0)
        open_links: list[TokenEvent] = []
        for child in token.children or []:
            if child.type == "text":
                yield TokenEvent(TokenKind.TEXT, block_offset, text=child.content)
            elif child.type == "image":
                # Alt text of an image-only label is the link text
                for alt in child.children or []:
                    if alt.type == "text":
                        yield TokenEvent(TokenKind.TEXT, block_offset, text=alt.content)
            elif child.type == "link_open":
                position = child.meta.get(META_OFFSET)
                start = TokenEvent(
                    TokenKind.LINK_START,
                    block_offset if position is None else locate(position),
                    target=str(child.attrGet("href") or ""),
                    autolink=child.markup in _AUTOLINK_MARKUP,
                )
                open_links.append(start)
                yield start
            elif child.type == "link_close" and open_links:
                start = open_links.pop()
                yield TokenEvent(TokenKind.LINK_END, start.offset, target=start.target, autolink=start.autolink)
            elif child.type == REFERENCE_BROKEN_TOKEN:
                yield TokenEvent(
                    TokenKind.REFERENCE_BROKEN,
                    locate(child.meta.get(META_OFFSET, 0)),
                    text=child.content,
                )
