"""Inline rule flagging reference links whose label is never defined (private)."""

from markdown_it.common.utils import normalizeReference
from markdown_it.helpers import parseLinkLabel
from markdown_it.rules_inline import StateInline

from ._constants import ENV_LIST_ITEM_START, META_OFFSET, REFERENCE_BROKEN_TOKEN, TASK_MARKERS


def _reference_broken(state: StateInline, silent: bool) -> bool:
    """Consume ``[label]``, ``[text][]`` or ``[text][label]`` with no matching definition.

    Runs after every other inline rule, so the link rule has already declined
    the construct. Silent runs (label scanning of an enclosing link) always
    decline so nesting is decided by the stock rules alone.
    """
    if silent or state.linkLevel > 0:
        return False

    src = state.src
    start = state.pos
    if src[start] != "[":
        return False
    if start > 0 and src[start - 1] == "!":
        return False

    label_end = parseLinkLabel(state, start)
    if label_end < 0:
        return False

    text = src[start + 1 : label_end]
    # Footnotes and empty labels are never link references
    if not text.strip() or text.startswith("^"):
        return False
    if _is_task_marker(state, text, label_end):
        return False

    label = text
    end = label_end + 1
    if end < state.posMax and src[end] == "[":
        second_end = parseLinkLabel(state, end)
        if second_end >= 0:
            second = src[end + 1 : second_end]
            if second.strip():
                label = second
            end = second_end + 1

    references = state.env.get("references", {})
    if normalizeReference(label) in references:
        return False

    token = state.push(REFERENCE_BROKEN_TOKEN, "", 0)
    token.content = label
    token.meta[META_OFFSET] = start
    state.pos = end
    return True


def _is_task_marker(state: StateInline, text: str, label_end: int) -> bool:
    if state.pos != 0 or not state.env.get(ENV_LIST_ITEM_START):
        return False
    if text not in TASK_MARKERS:
        return False
    return label_end + 1 < len(state.src) and state.src[label_end + 1] in " \t"
