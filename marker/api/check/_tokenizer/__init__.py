"""Markdown tokenizers backing the document scanner."""

from .AbstractTokenizer import AbstractTokenizer
from .MarkdownItTokenizer import MarkdownItTokenizer
from .TokenEvent import TokenEvent
from .TokenKind import TokenKind

__all__ = ["AbstractTokenizer", "MarkdownItTokenizer", "TokenEvent", "TokenKind"]
