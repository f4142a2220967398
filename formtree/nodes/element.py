"""Element — generic in-memory node with properties, bindings and aggregations.

Subclasses declare their properties (with defaults) and aggregations
(name → holds many?) as class attributes, and are built from keyword
settings the same way for every kind:

    Input("email", value="", required=True,
          bindings={"value": PropertyBinding("/email", StringType(min_length=3))})
"""

import itertools
from collections import defaultdict
from typing import Any, Optional, Sequence, Union

from formtree.binding import PropertyBinding
from formtree.models import ValueState
from formtree.nodes.base import Node
from formtree.reference_data import EDITABLE_PROPERTY

_id_counters: dict[str, itertools.count] = defaultdict(itertools.count)


def _generate_id(kind: str) -> str:
    return f"__{kind.lower()}{next(_id_counters[kind])}"


class Element(Node):
    """Base element: visible, not a validatable kind, no value state."""

    PROPERTIES: dict[str, Any] = {"visible": True}
    AGGREGATIONS: dict[str, bool] = {}
    VALIDATABLE_KIND = False
    LABEL_BEARING = False
    VALUE_STATE = False
    VALUE_STATE_TEXT = False

    def __init__(
        self,
        id: Optional[str] = None,
        bindings: Optional[dict[str, PropertyBinding]] = None,
        **settings: Any,
    ):
        self._id = id or _generate_id(type(self).__name__)
        self._parent: Optional[Node] = None
        self._properties: dict[str, Any] = dict(self._declared_properties())
        self._bindings: dict[str, PropertyBinding] = {}
        self._aggregations: dict[str, Union[Node, list[Node], None]] = {
            name: ([] if multiple else None) for name, multiple in self._declared_aggregations().items()
        }

        for name, value in settings.items():
            if name in self._properties:
                self.set_property(name, value)
            elif name in self._aggregations:
                self.set_aggregation(name, value)
            else:
                raise TypeError(f"{type(self).__name__} has no property or aggregation '{name}'")

        for name, binding in (bindings or {}).items():
            self.bind_property(name, binding)

    @classmethod
    def _declared_properties(cls) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            merged.update(getattr(klass, "PROPERTIES", {}))
        return merged

    @classmethod
    def _declared_aggregations(cls) -> dict[str, bool]:
        merged: dict[str, bool] = {}
        for klass in reversed(cls.__mro__):
            merged.update(getattr(klass, "AGGREGATIONS", {}))
        return merged

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"

    # ── Node capabilities ──

    def get_id(self) -> str:
        return self._id

    def get_parent(self) -> Optional[Node]:
        return self._parent

    def is_visible(self) -> bool:
        return bool(self._properties.get("visible", True))

    def is_validatable_kind(self) -> bool:
        return self.VALIDATABLE_KIND

    def is_label_bearing(self) -> bool:
        return self.LABEL_BEARING

    def is_enabled(self) -> Optional[bool]:
        if "enabled" not in self._properties:
            return None
        return self._properties["enabled"] is True

    def is_required(self) -> Optional[bool]:
        if "required" not in self._properties:
            return None
        return self._properties["required"] is True

    def is_editable(self) -> bool:
        if EDITABLE_PROPERTY not in self._properties:
            return True
        return bool(self._properties[EDITABLE_PROPERTY])

    def get_property(self, name: str) -> Any:
        return self._properties.get(name)

    def get_binding(self, name: str) -> Optional[PropertyBinding]:
        return self._bindings.get(name)

    def get_aggregation(self, name: str) -> Union[Node, Sequence[Node], None]:
        return self._aggregations.get(name)

    def supports_value_state(self) -> bool:
        return self.VALUE_STATE

    def get_value_state(self) -> Optional[ValueState]:
        if not self.VALUE_STATE:
            return None
        return self._properties["valueState"]

    def set_value_state(self, state: ValueState) -> None:
        if not self.VALUE_STATE:
            super().set_value_state(state)
        self._properties["valueState"] = ValueState(state)

    def supports_value_state_text(self) -> bool:
        return self.VALUE_STATE_TEXT

    def get_value_state_text(self) -> Optional[str]:
        if not self.VALUE_STATE_TEXT:
            return None
        return self._properties["valueStateText"]

    def set_value_state_text(self, text: Optional[str]) -> None:
        if not self.VALUE_STATE_TEXT:
            super().set_value_state_text(text)
        self._properties["valueStateText"] = text or ""

    # ── Mutation ──

    def set_property(self, name: str, value: Any) -> "Element":
        if name not in self._properties:
            raise KeyError(f"{type(self).__name__} has no property '{name}'")
        if name == "valueState":
            value = ValueState(value)
        self._properties[name] = value
        return self

    def bind_property(self, name: str, binding: PropertyBinding) -> "Element":
        if name not in self._properties:
            raise KeyError(f"{type(self).__name__} has no property '{name}'")
        self._bindings[name] = binding
        return self

    def unbind_property(self, name: str) -> "Element":
        self._bindings.pop(name, None)
        return self

    def set_aggregation(self, name: str, value: Union[Node, Sequence[Node], None]) -> "Element":
        multiple = self._declared_aggregations()[name]
        if multiple:
            self._aggregations[name] = []
            for child in value or []:
                self.add_aggregation(name, child)
        else:
            self._adopt(value)
            self._aggregations[name] = value
        return self

    def add_aggregation(self, name: str, child: Node) -> "Element":
        if not self._declared_aggregations()[name]:
            raise TypeError(f"Aggregation '{name}' of {type(self).__name__} holds a single node")
        self._adopt(child)
        self._aggregations[name].append(child)
        return self

    def _adopt(self, child: Optional[Node]) -> None:
        if isinstance(child, Element):
            child._parent = self
