"""Unit tests for marker.api.check.Document (the markdown scanner)."""

import pytest

from marker.api.check._tokenizer import AbstractTokenizer, TokenEvent, TokenKind
from marker.api.check.Document import Document
from marker.api.check.LocatedEvent import BrokenReference, Link, LocatedEvent

pytestmark = pytest.mark.check


def scan(text):
    return list(Document(text))


class TestDocumentBasics:
    def test_empty_document(self):
        assert scan("") == []

    def test_single_inline_link(self):
        assert scan("[text](target)") == [LocatedEvent(Link("target", "text"), 1)]

    def test_two_links_on_two_lines(self):
        assert scan("[text 1](target1)\n[text 2](target2)") == [
            LocatedEvent(Link("target1", "text 1"), 1),
            LocatedEvent(Link("target2", "text 2"), 2),
        ]

    def test_full_reference_links_with_trailing_definitions(self):
        text = "[t 1][ref 1]\nText [t 2][ref 2]\n\n[ref 1]: 1\n[ref 2]: 2"
        assert scan(text) == [
            LocatedEvent(Link("1", "t 1"), 1),
            LocatedEvent(Link("2", "t 2"), 2),
        ]

    def test_unresolved_reference(self):
        assert scan("This is a [broken reference].") == [
            LocatedEvent(BrokenReference("", "broken reference"), 1),
        ]

    def test_task_list_yields_nothing(self):
        assert scan("- [ ] Item 1\n- [ ] Item 2") == []

    def test_checked_task_list_yields_nothing(self):
        assert scan("- [x] Done\n- [X] Also done\n- [ ] Open") == []

    def test_iterator_stays_exhausted(self):
        doc = Document("[a](b)")
        assert next(doc) == LocatedEvent(Link("b", "a"), 1)
        with pytest.raises(StopIteration):
            next(doc)
        with pytest.raises(StopIteration):
            next(doc)


class TestDocumentReferences:
    def test_shortcut_reference_is_case_insensitive(self):
        assert scan("[Foo]\n\n[foo]: /url") == [LocatedEvent(Link("/url", "Foo"), 1)]

    def test_collapsed_reference(self):
        assert scan("[foo][]\n\n[foo]: /url") == [LocatedEvent(Link("/url", "foo"), 1)]

    def test_definition_before_use(self):
        assert scan("[foo]: /url\n\nSee [foo].") == [LocatedEvent(Link("/url", "foo"), 3)]

    def test_full_reference_with_missing_label(self):
        assert scan("[text][missing]") == [LocatedEvent(BrokenReference("", "missing"), 1)]

    def test_missing_label_among_defined_ones(self):
        text = "[a][one] and [b][two]\n\n[one]: https://example.com"
        assert scan(text) == [
            LocatedEvent(Link("https://example.com", "a"), 1),
            LocatedEvent(BrokenReference("", "two"), 1),
        ]

    def test_broken_reference_line(self):
        assert scan("intro\n\nmore text\nwith [nothing] here") == [
            LocatedEvent(BrokenReference("", "nothing"), 4),
        ]

    def test_whitespace_label_is_not_a_reference(self):
        assert scan("Some [ ] brackets") == []

    def test_escaped_brackets_are_not_a_reference(self):
        assert scan(r"Not \[a reference\]") == []

    def test_footnotes_are_not_references(self):
        assert scan("Text[^1]\n\n[^1]: The note") == []

    def test_undefined_footnote_is_not_a_reference(self):
        assert scan("Text[^nope]") == []


class TestDocumentLinks:
    def test_nested_brackets_in_link_text(self):
        assert scan("[a [b] c](url)") == [LocatedEvent(Link("url", "a [b] c"), 1)]

    def test_autolink_is_not_an_occurrence(self):
        assert scan("<https://example.com>") == []

    def test_image_is_not_an_occurrence(self):
        assert scan("![alt](image.png)") == []

    def test_link_around_image_uses_alt_text(self):
        assert scan("[![alt](image.png)](target)") == [LocatedEvent(Link("target", "alt"), 1)]

    def test_badge_link_after_paragraph_uses_alt_text(self):
        text = "Intro paragraph\n\n[![badge](https://img.shields.io/x.svg)](https://ci)"
        assert scan(text) == [LocatedEvent(Link("https://ci", "badge"), 3)]

    def test_link_with_empty_label_keeps_previous_text(self):
        assert scan("Before\n\n[](target)") == [LocatedEvent(Link("target", "Before"), 3)]

    def test_link_text_is_last_text_inside_link(self):
        assert scan("[some *emphasised* words](target)") == [LocatedEvent(Link("target", " words"), 1)]

    def test_destination_is_reported_raw(self):
        assert scan("[a](javascript:void(0)) [b](foo%20bar.md)") == [
            LocatedEvent(Link("javascript:void(0)", "a"), 1),
            LocatedEvent(Link("foo%20bar.md", "b"), 1),
        ]

    def test_links_in_list_items(self):
        assert scan("- one\n- [two](2.md)\n- [three](3.md)") == [
            LocatedEvent(Link("2.md", "two"), 2),
            LocatedEvent(Link("3.md", "three"), 3),
        ]

    def test_link_in_blockquote(self):
        assert scan("> quote\n> [a](b)") == [LocatedEvent(Link("b", "a"), 2)]

    def test_link_in_table(self):
        text = "| a | b |\n|---|---|\n| [x](y) | z |"
        assert scan(text) == [LocatedEvent(Link("y", "x"), 3)]

    def test_link_in_heading(self):
        assert scan("# Title\n\n## [Section](s.md)") == [LocatedEvent(Link("s.md", "Section"), 3)]

    def test_lines_are_non_decreasing(self):
        text = "[a](1)\n\n[b](2) [c](3)\n\n> [d](4)\n\n- [e](5)"
        lines = [event.line for event in scan(text)]
        assert lines == sorted(lines)
        assert lines == [1, 3, 3, 5, 7]


class TestDocumentCode:
    def test_link_in_fenced_code_is_ignored(self):
        assert scan("```\n[a](b)\n[broken]\n```") == []

    def test_link_in_indented_code_is_ignored(self):
        assert scan("    [a](b)\n    [broken]") == []

    def test_link_in_code_span_is_ignored(self):
        assert scan("`[a](b)` and `[broken]`") == []

    def test_code_block_text_is_not_link_text(self):
        assert scan("```\ncode\n```\n[](target)") == [LocatedEvent(Link("target", ""), 4)]

    def test_link_after_code_block(self):
        assert scan("```\n[not a link]\n```\n[a](b)") == [LocatedEvent(Link("b", "a"), 4)]


class ScriptedTokenizer(AbstractTokenizer):
    def __init__(self, events):
        self.events = events

    def tokenize(self, text):
        return iter(self.events)


class TestDocumentWithInjectedTokenizer:
    def test_code_block_text_never_becomes_link_text(self):
        events = [
            TokenEvent(TokenKind.TEXT, 0, text="hello"),
            TokenEvent(TokenKind.CODE_BLOCK_START, 2),
            TokenEvent(TokenKind.TEXT, 2, text="code"),
            TokenEvent(TokenKind.CODE_BLOCK_END, 2),
            TokenEvent(TokenKind.LINK_START, 4, target="t"),
            TokenEvent(TokenKind.LINK_END, 4, target="t"),
        ]
        doc = Document("a\nb\nc", tokenizer=ScriptedTokenizer(events))
        assert list(doc) == [LocatedEvent(Link("t", "hello"), 3)]

    def test_link_without_text_has_empty_text(self):
        events = [TokenEvent(TokenKind.LINK_END, 0, target="t")]
        assert list(Document("x", tokenizer=ScriptedTokenizer(events))) == [LocatedEvent(Link("t", ""), 1)]

    def test_autolink_end_is_skipped(self):
        events = [TokenEvent(TokenKind.LINK_END, 0, target="http://x", autolink=True)]
        assert list(Document("x", tokenizer=ScriptedTokenizer(events))) == []

    def test_reference_broken_event(self):
        events = [TokenEvent(TokenKind.REFERENCE_BROKEN, 3, text="label")]
        doc = Document("ab\n[label]", tokenizer=ScriptedTokenizer(events))
        assert list(doc) == [LocatedEvent(BrokenReference("", "label"), 2)]

    def test_offset_on_newline_belongs_to_its_line(self):
        events = [TokenEvent(TokenKind.LINK_END, 2, target="t")]
        assert list(Document("ab\ncd", tokenizer=ScriptedTokenizer(events)))[0].line == 1
