"""Property bindings — the link between a control property and its data."""

from typing import Optional

from formtree.types import ValueType


class PropertyBinding:
    """Active binding of one control property to a model path.

    The binding only carries what the validator needs: the optional value type
    used to parse and check the bound value, and the internal type name of the
    control property it is attached to.
    """

    def __init__(
        self,
        path: str,
        value_type: Optional[ValueType] = None,
        internal_type: Optional[str] = "string",
    ):
        self.path = path
        self.value_type = value_type
        self.internal_type = internal_type

    def get_type(self) -> Optional[ValueType]:
        return self.value_type

    def __repr__(self) -> str:
        type_name = self.value_type.name if self.value_type else None
        return f"PropertyBinding(path={self.path!r}, type={type_name!r})"
