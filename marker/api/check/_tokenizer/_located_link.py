"""Link rule that records where each link starts (private)."""

from markdown_it.rules_inline import StateInline
from markdown_it.rules_inline import link as link_rule

from ._constants import META_OFFSET


def _located_link(state: StateInline, silent: bool) -> bool:
    """Run the stock link rule and stamp the resulting link_open with its offset."""
    start = state.pos
    first_new = len(state.tokens)
    if not link_rule(state, silent):
        return False
    if not silent:
        for token in state.tokens[first_new:]:
            if token.type == "link_open":
                token.meta[META_OFFSET] = start
                break
    return True
