"""Tests for the message registry and message model."""

import pytest

from formtree.messages import MessageRegistry
from formtree.models import MessageType, ValidationMessage, ValueState
from formtree.reference_data import message_type_for


def make_message(text: str = "Bad", node_id: str = "field", prop: str = "value") -> ValidationMessage:
    return ValidationMessage(message=text, target_node_id=node_id, target_property=prop)


class TestMessageRegistry:
    """Test adding, querying and retracting messages."""

    def test_add_and_query_by_target(self, registry: MessageRegistry) -> None:
        a = make_message(node_id="a")
        b = make_message(node_id="b")

        registry.add_messages(a, b)

        assert registry.get_messages() == [a, b]
        assert registry.get_messages_for_target("a/value") == [a]
        assert registry.get_messages_for_target("c/value") == []

    def test_remove_is_by_identity(self, registry: MessageRegistry) -> None:
        """Equal-looking messages from another producer are not removed."""
        mine = make_message()
        theirs = mine.model_copy()
        registry.add_messages(mine, theirs)

        registry.remove_messages([mine])

        assert len(registry) == 1
        assert registry.get_messages()[0] is theirs

    def test_remove_unknown_is_ignored(self, registry: MessageRegistry) -> None:
        registry.add_messages(make_message())

        registry.remove_messages([make_message()])
        registry.remove_messages([])

        assert len(registry) == 1

    def test_remove_all(self, registry: MessageRegistry) -> None:
        registry.add_messages(make_message(), make_message())

        registry.remove_all_messages()

        assert registry.get_messages() == []

    def test_snapshot_is_detached(self, registry: MessageRegistry) -> None:
        registry.add_messages(make_message())

        registry.get_messages().clear()

        assert len(registry) == 1


class TestValidationMessage:
    def test_target_key(self) -> None:
        assert make_message(node_id="name", prop="selectedKey").target == "name/selectedKey"
        assert ValidationMessage(message="x", target_node_id="name").target == "name/null"

    def test_defaults(self) -> None:
        message = make_message()

        assert message.type == MessageType.ERROR
        assert message.additional_text is None
        assert message.message_id != make_message().message_id

    def test_serializes_target(self) -> None:
        assert make_message(node_id="n").model_dump()["target"] == "n/value"


class TestMessageTypeMapping:
    @pytest.mark.parametrize(
        "state,expected",
        [
            (ValueState.ERROR, MessageType.ERROR),
            (ValueState.WARNING, MessageType.WARNING),
            (ValueState.INFORMATION, MessageType.INFORMATION),
            (ValueState.SUCCESS, MessageType.SUCCESS),
            (ValueState.NONE, MessageType.NONE),
            ("Warning", MessageType.WARNING),
        ],
    )
    def test_known_states(self, state, expected) -> None:
        assert message_type_for(state) == expected

    @pytest.mark.parametrize("state", [None, "Critical", 3])
    def test_unknown_state_is_error(self, state) -> None:
        assert message_type_for(state) == MessageType.ERROR
