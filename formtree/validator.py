"""Tree Validator — recursive required/constraint validation of a form tree.

Walks a root node and its children through a fixed set of containment
relationships, checks every visible field it recognizes, marks invalid fields
with an error value state and reports them to a message registry.

Usage:
    validator = TreeValidator()
    if not validator.validate(page):
        # Invalid fields are marked, messages are in the registry
"""

import time
from typing import Callable, Optional

import structlog

from formtree.config import Settings, get_settings
from formtree.errors import ConstraintError, ConversionError
from formtree.messages import MessageRegistry, message_registry
from formtree.models import MessageType, ValidationMessage, ValidationSummary, ValueState
from formtree.nodes.base import Node
from formtree.reference_data import (
    POSSIBLE_AGGREGATIONS,
    SELECTED_KEY_PROPERTY,
    VALIDATE_PROPERTIES,
    message_type_for,
)

logger = structlog.get_logger()


def _is_empty(value) -> bool:
    if value is None:
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False


class ValidationPass:
    """State of a single validation pass, threaded through the recursion."""

    def __init__(self):
        self.valid = True
        self.messages: list[ValidationMessage] = []
        self.nodes_visited = 0
        self.invalid_nodes: list[str] = []


class TreeValidator:
    """Validates a node tree and reports invalid fields.

    One validator owns the messages it emits: each call to validate() first
    retracts the messages of the previous call, so a validator should be used
    for one tree at a time.
    """

    def __init__(
        self,
        registry: Optional[MessageRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize with the shared registry or an injected one.

        Args:
            registry: Message sink. If None, uses the module-level registry.
            settings: Message texts. If None, uses the cached settings.
        """
        self.registry = registry if registry is not None else message_registry
        self.settings = settings or get_settings()
        self.last_summary: Optional[ValidationSummary] = None
        self._is_valid = True
        self._validation_performed = False
        self._validation_messages: list[ValidationMessage] = []
        # Value state texts this validator wrote, by node id
        self._authored_texts: dict[str, str] = {}

    # ── Public API ──

    def is_valid(self) -> bool:
        """True only once validate() has run and found no invalid node."""
        return self._validation_performed and self._is_valid

    @property
    def validation_messages(self) -> tuple[ValidationMessage, ...]:
        """Messages emitted by the most recent pass."""
        return tuple(self._validation_messages)

    def validate(self, root: Optional[Node]) -> bool:
        """Validate `root` and everything reachable from it.

        Args:
            root: Top of the tree. None is accepted and validates trivially.

        Returns:
            is_valid() after the pass
        """
        start_time = time.perf_counter()

        retracted = len(self._validation_messages)
        if self._validation_messages:
            self.registry.remove_messages(self._validation_messages)
            self._validation_messages = []

        run = ValidationPass()
        if root is not None:
            self._validate(root, run)

        self._is_valid = run.valid
        self._validation_messages = run.messages
        self._validation_performed = True

        duration = (time.perf_counter() - start_time) * 1000
        self.last_summary = ValidationSummary(
            valid=self.is_valid(),
            nodes_visited=run.nodes_visited,
            invalid_nodes=run.invalid_nodes,
            messages_emitted=len(run.messages),
            messages_retracted=retracted,
            duration_ms=round(duration, 2),
        )

        logger.info(
            "validation_complete",
            root=root.get_id() if root is not None else None,
            valid=self.last_summary.valid,
            nodes_visited=run.nodes_visited,
            invalid_nodes=len(run.invalid_nodes),
            messages_emitted=len(run.messages),
            messages_retracted=retracted,
            duration_ms=self.last_summary.duration_ms,
        )

        return self.is_valid()

    def clear_error_state(self, root: Optional[Node]) -> None:
        """Reset the value state of every node reachable from `root`.

        Visibility is not consulted and messages are left alone.
        """
        if root is None:
            return

        if root.supports_value_state():
            root.set_value_state(ValueState.NONE)

        self._recursive_call(root, self.clear_error_state)

    # ── Traversal ──

    def _validate(self, node: Node, run: ValidationPass) -> None:
        """Check one node, then descend if none of the checks applied."""
        if not (isinstance(node, Node) and node.is_validatable_kind() and node.is_visible()):
            return

        run.nodes_visited += 1
        is_validated = True
        is_valid = True

        enabled = node.is_enabled() is True
        typed_property = self._typed_property(node)

        if node.is_required() is True and enabled:
            # Control required
            is_valid = self._validate_required(node)
        elif typed_property is not None and enabled:
            # Control constraints
            is_valid = self._validate_constraint(node, typed_property)
        elif node.get_value_state() == ValueState.ERROR:
            # Error state set by custom validation elsewhere
            is_valid = False
            self._set_value_state(node, ValueState.ERROR, self.settings.DEFAULT_ERROR_MESSAGE)
        else:
            is_validated = False

        if not is_valid:
            run.valid = False
            run.invalid_nodes.append(node.get_id())
            self._add_message(node, run)

        # A node no check applied to may hold fields of its own
        if not is_validated:
            self._recursive_call(node, lambda child: self._validate(child, run))

    def _recursive_call(self, node: Node, visit: Callable[[Node], None]) -> None:
        """Apply `visit` to every child under the whitelisted aggregations."""
        for name in POSSIBLE_AGGREGATIONS:
            children = node.get_aggregation(name)
            if not children:
                continue

            if isinstance(children, (list, tuple)):
                for child in children:
                    visit(child)
            else:
                visit(children)

    # ── Checks ──

    def _validate_required(self, node: Node) -> bool:
        """Check that the first bound value property is filled.

        A required node with none of the value properties bound cannot be
        judged and passes. The first failing property decides the error text.
        """
        is_valid = True
        failure = None

        for name in VALIDATE_PROPERTIES:
            if node.get_binding(name) is None:
                continue

            value = node.get_property(name)
            if _is_empty(value):
                failure = failure or self.settings.MANDATORY_FIELD_MESSAGE
                is_valid = False
            elif node.has_picker() and _is_empty(node.get_property(SELECTED_KEY_PROPERTY)):
                failure = failure or self.settings.CHOOSE_ENTRY_MESSAGE
                is_valid = False
            else:
                self._clear_value_state(node)
                is_valid = True
                break

        if not is_valid:
            self._set_value_state(node, ValueState.ERROR, failure)

        return is_valid

    def _validate_constraint(self, node: Node, name: str) -> bool:
        """Parse and check the bound value through its value type."""
        if not node.is_editable():
            return True

        binding = node.get_binding(name)
        value_type = binding.get_type()
        try:
            internal_value = value_type.parse_value(node.get_property(name), binding.internal_type)
            value_type.validate_value(internal_value)
        except (ConversionError, ConstraintError) as e:
            logger.debug(
                "constraint_failed",
                node=node.get_id(),
                property=name,
                value_type=value_type.name,
                error=e.message,
            )
            self._set_value_state(node, ValueState.ERROR, e.message)
            return False

        self._clear_value_state(node)
        return True

    def _typed_property(self, node: Node) -> Optional[str]:
        """First value property whose binding carries a value type."""
        for name in VALIDATE_PROPERTIES:
            binding = node.get_binding(name)
            if binding is not None and binding.get_type() is not None:
                return name
        return None

    def _relevant_binding_property(self, node: Node) -> Optional[str]:
        """First value property with an active binding."""
        for name in VALIDATE_PROPERTIES:
            if node.get_binding(name) is not None:
                return name
        return None

    # ── Value state ──

    def _set_value_state(self, node: Node, state: ValueState, text: str) -> None:
        """Set the value state; set the text unless the app supplied its own."""
        if node.supports_value_state():
            node.set_value_state(state)

        if node.supports_value_state_text():
            node_id = node.get_id()
            current = node.get_value_state_text()
            if not current or current == self._authored_texts.get(node_id):
                node.set_value_state_text(text)
                self._authored_texts[node_id] = text

    def _clear_value_state(self, node: Node) -> None:
        if node.supports_value_state():
            node.set_value_state(ValueState.NONE)

        authored = self._authored_texts.pop(node.get_id(), None)
        if (
            authored is not None
            and node.supports_value_state_text()
            and node.get_value_state_text() == authored
        ):
            node.set_value_state_text("")

    # ── Messages ──

    def _add_message(self, node: Node, run: ValidationPass, message: Optional[str] = None) -> None:
        """Submit a message for an invalid node unless an identical one exists."""
        node_id = node.get_id()
        binding_property = self._relevant_binding_property(node)

        text = node.get_value_state_text() if node.supports_value_state_text() else None
        text = text or message or self.settings.DEFAULT_ERROR_MESSAGE

        message_type = MessageType.ERROR
        if node.supports_value_state():
            message_type = message_type_for(node.get_value_state())

        candidate = ValidationMessage(
            message=text,
            type=message_type,
            additional_text=self._resolve_label(node),
            target_node_id=node_id,
            target_property=binding_property,
        )

        existing = self.registry.get_messages_for_target(candidate.target)
        if any(m.message == text and m.type == message_type for m in existing):
            logger.debug("message_suppressed", target=candidate.target, message=text)
            return

        self.registry.add_messages(candidate)
        run.messages.append(candidate)

        logger.debug(
            "node_invalid",
            target=candidate.target,
            message=text,
            type=message_type.value,
        )

    def _resolve_label(self, node: Node) -> Optional[str]:
        """Label text of the form element holding a label-bearing control."""
        if not node.is_label_bearing():
            return None

        parent = node.get_parent()
        label = parent.get_label() if parent is not None else None
        if label is None:
            return self.settings.NO_LABEL_FOUND_TEXT
        return label.get_text() or self.settings.NO_LABEL_FOUND_TEXT
