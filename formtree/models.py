"""Validation models — value states, message types and the message record.

A ValidationMessage lives for exactly one validation pass: the validator that
emitted it retracts it before the next pass begins.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Property part of a target key when no value property is bound
UNBOUND_PROPERTY = "null"


class ValueState(str, Enum):
    """Visual validity indicator of a node."""

    NONE = "None"
    ERROR = "Error"
    WARNING = "Warning"
    SUCCESS = "Success"
    INFORMATION = "Information"


class MessageType(str, Enum):
    """Severity of a message in the registry."""

    NONE = "None"
    ERROR = "Error"
    WARNING = "Warning"
    SUCCESS = "Success"
    INFORMATION = "Information"


class ValidationMessage(BaseModel):
    """A single user-facing message produced for an invalid node."""

    model_config = ConfigDict(frozen=True)

    message: str
    type: MessageType = MessageType.ERROR
    additional_text: Optional[str] = None  # Label of the field, when resolvable
    target_node_id: str
    target_property: Optional[str] = None  # First bound value property
    message_id: str = Field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @computed_field
    @property
    def target(self) -> str:
        """Registry key: '<node id>/<property>', with 'null' when unbound."""
        return f"{self.target_node_id}/{self.target_property or UNBOUND_PROPERTY}"


class ValidationSummary(BaseModel):
    """Outcome of the most recent validation pass."""

    valid: bool = True
    nodes_visited: int = 0
    invalid_nodes: list[str] = Field(default_factory=list)
    messages_emitted: int = 0
    messages_retracted: int = 0
    duration_ms: float = 0.0
