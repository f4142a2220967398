"""Reference data — the fixed lists the traversal and checks rely on.

These are configuration constants of the traversal, not extension points.
"""

from formtree.models import MessageType, ValueState

# ──────────────────────────────────────────────────────────────────────
# CONTAINMENT RELATIONSHIPS (visited in this order)
# ──────────────────────────────────────────────────────────────────────

POSSIBLE_AGGREGATIONS: tuple[str, ...] = (
    "items",
    "content",
    "form",
    "formContainers",
    "formElements",
    "fields",
    "sections",
    "subSections",
    "_grid",
    "cells",
    "_page",
)

# ──────────────────────────────────────────────────────────────────────
# VALUE PROPERTIES (priority order, first bound one wins)
# ──────────────────────────────────────────────────────────────────────

VALIDATE_PROPERTIES: tuple[str, ...] = ("value", "selectedKey", "text")

SELECTED_KEY_PROPERTY = "selectedKey"
EDITABLE_PROPERTY = "editable"

# ──────────────────────────────────────────────────────────────────────
# VALUE STATE → MESSAGE TYPE
# ──────────────────────────────────────────────────────────────────────

VALUE_STATE_MESSAGE_TYPES: dict[ValueState, MessageType] = {
    ValueState.ERROR: MessageType.ERROR,
    ValueState.WARNING: MessageType.WARNING,
    ValueState.INFORMATION: MessageType.INFORMATION,
    ValueState.SUCCESS: MessageType.SUCCESS,
    ValueState.NONE: MessageType.NONE,
}


def message_type_for(value_state) -> MessageType:
    """Map a node value state to a message severity (unknown → Error)."""
    try:
        return VALUE_STATE_MESSAGE_TYPES.get(ValueState(value_state), MessageType.ERROR)
    except ValueError:
        return MessageType.ERROR
