"""formtree — recursive validation of UI form trees.

Usage:
    from formtree import TreeValidator, message_registry

    validator = TreeValidator()
    if not validator.validate(page):
        for message in message_registry.get_messages():
            ...
"""

from formtree.binding import PropertyBinding
from formtree.errors import ConstraintError, ConversionError, FormTreeError
from formtree.messages import MessageRegistry, message_registry
from formtree.models import MessageType, ValidationMessage, ValidationSummary, ValueState
from formtree.nodes import Node
from formtree.validator import TreeValidator

__all__ = [
    "TreeValidator",
    "MessageRegistry",
    "message_registry",
    "Node",
    "PropertyBinding",
    "ValidationMessage",
    "ValidationSummary",
    "ValueState",
    "MessageType",
    "FormTreeError",
    "ConversionError",
    "ConstraintError",
]
