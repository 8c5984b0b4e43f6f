"""Core inline rule that tells inline rules when they open a list item (private)."""

from markdown_it.rules_core import StateCore

from ._constants import ENV_LIST_ITEM_START


def _inline_with_list_items(state: StateCore) -> None:
    """Parse inlines, flagging the first paragraph of each list item in the env."""
    tokens = state.tokens
    for i, token in enumerate(tokens):
        if token.type != "inline":
            continue
        if token.children is None:
            token.children = []
        state.env[ENV_LIST_ITEM_START] = (
            i >= 2 and tokens[i - 1].type == "paragraph_open" and tokens[i - 2].type == "list_item_open"
        )
        state.md.inline.parse(token.content, state.md, state.env, token.children)
    state.env.pop(ENV_LIST_ITEM_START, None)
