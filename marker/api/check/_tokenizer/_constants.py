"""Tokenizer constants."""

# Token meta key holding the offset of a construct inside its inline content
META_OFFSET = "marker_offset"

# Environment key set while parsing the first inline of a list item
ENV_LIST_ITEM_START = "marker_list_item_start"

# Labels that mark a task-list item when they open a list item
TASK_MARKERS = (" ", "x", "X")

REFERENCE_BROKEN_TOKEN = "reference_broken"
