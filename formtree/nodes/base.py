"""Node capability interface — what the validator needs from a UI element.

Every capability a node may lack has a "not applicable" default, so adapters
only override what their widget actually supports. Probes never raise for the
expected "not bound" / "no such property" cases.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Union

from formtree.binding import PropertyBinding
from formtree.models import ValueState


class Node(ABC):
    """Abstract base for anything the validator can walk."""

    # ── Identity & structure ──

    @abstractmethod
    def get_id(self) -> str:
        """Stable identifier, used in message targets."""
        ...

    @abstractmethod
    def is_visible(self) -> bool:
        ...

    @abstractmethod
    def get_aggregation(self, name: str) -> Union["Node", Sequence["Node"], None]:
        """Children held under a named containment relationship."""
        ...

    def get_parent(self) -> Optional["Node"]:
        return None

    def is_validatable_kind(self) -> bool:
        """Whether the traversal recognizes this kind of node at all."""
        return True

    def is_label_bearing(self) -> bool:
        """Whether messages for this node carry the label of its parent."""
        return False

    def get_label(self) -> Optional["Node"]:
        return None

    def get_text(self) -> Optional[str]:
        return self.get_property("text")

    # ── Field state ──

    def is_enabled(self) -> Optional[bool]:
        """None when the node has no notion of being enabled."""
        return None

    def is_required(self) -> Optional[bool]:
        return None

    def is_editable(self) -> bool:
        return True

    def has_picker(self) -> bool:
        """Selection-style control whose choice lives in 'selectedKey'."""
        return False

    def get_property(self, name: str) -> Any:
        return None

    def get_binding(self, name: str) -> Optional[PropertyBinding]:
        return None

    # ── Value state ──

    def supports_value_state(self) -> bool:
        return False

    def get_value_state(self) -> Optional[ValueState]:
        return None

    def set_value_state(self, state: ValueState) -> None:
        raise NotImplementedError(f"{type(self).__name__} has no value state")

    def supports_value_state_text(self) -> bool:
        return False

    def get_value_state_text(self) -> Optional[str]:
        return None

    def set_value_state_text(self, text: Optional[str]) -> None:
        raise NotImplementedError(f"{type(self).__name__} has no value state text")
