"""Message registry — in-memory store of user-facing validation messages.

Validators submit the messages they produce and retract exactly those messages
before their next pass. Any other producer may share the same registry.
"""

from typing import Iterable

import structlog

from formtree.models import ValidationMessage

logger = structlog.get_logger()


class MessageRegistry:
    """Ordered collection of messages, queryable by target.

    Removal is by identity: two messages with equal content but different
    origins are distinct entries.
    """

    def __init__(self):
        self._messages: list[ValidationMessage] = []

    def add_messages(self, *messages: ValidationMessage) -> None:
        """Append messages to the registry."""
        self._messages.extend(messages)
        logger.debug("messages_added", count=len(messages), total=len(self._messages))

    def remove_messages(self, messages: Iterable[ValidationMessage]) -> None:
        """Remove the given message objects; unknown ones are ignored."""
        doomed = {id(m) for m in messages}
        if not doomed:
            return
        before = len(self._messages)
        self._messages = [m for m in self._messages if id(m) not in doomed]
        logger.debug("messages_removed", count=before - len(self._messages), total=len(self._messages))

    def remove_all_messages(self) -> None:
        """Drop every message, whoever added it."""
        self._messages.clear()

    def get_messages(self) -> list[ValidationMessage]:
        """Snapshot of all current messages in insertion order."""
        return list(self._messages)

    def get_messages_for_target(self, target: str) -> list[ValidationMessage]:
        """Current messages whose target key equals `target`."""
        return [m for m in self._messages if m.target == target]

    def __len__(self) -> int:
        return len(self._messages)


# Module-level singleton
message_registry = MessageRegistry()
