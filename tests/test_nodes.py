"""Tests for the reference node adapters."""

import pytest

from formtree.binding import PropertyBinding
from formtree.models import ValueState
from formtree.nodes import (
    CheckBox,
    Element,
    FormElement,
    IconTabFilter,
    Input,
    Label,
    Node,
    Select,
    Text,
    VBox,
)
from formtree.types import IntegerType


class TestElement:
    """Test construction, capability probes and mutation."""

    def test_generated_ids_are_unique(self) -> None:
        assert Input().get_id() != Input().get_id()
        assert Input().get_id().startswith("__input")

    def test_unknown_setting_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            Input(colour="red")

    def test_absent_capabilities_are_not_applicable(self) -> None:
        """Probes on a node without the capability return 'not applicable'."""
        text = Text(text="hi")

        assert text.is_enabled() is None
        assert text.is_required() is None
        assert text.is_editable() is True
        assert text.get_binding("text") is None
        assert text.get_property("value") is None
        assert not text.supports_value_state()
        assert text.get_value_state() is None

    def test_value_state_setter_requires_capability(self) -> None:
        with pytest.raises(NotImplementedError):
            Text().set_value_state(ValueState.ERROR)

    def test_value_state_without_text(self) -> None:
        box = CheckBox()
        box.set_value_state(ValueState.WARNING)

        assert box.get_value_state() == ValueState.WARNING
        assert not box.supports_value_state_text()
        assert box.get_value_state_text() is None

    def test_value_state_from_string(self) -> None:
        field = Input(valueState="Error")

        assert field.get_value_state() is ValueState.ERROR

    def test_bindings(self) -> None:
        binding = PropertyBinding("/age", IntegerType())
        field = Input(bindings={"value": binding})

        assert field.get_binding("value") is binding
        assert field.get_binding("value").get_type().name == "Integer"
        field.unbind_property("value")
        assert field.get_binding("value") is None

    def test_binding_unknown_property_is_rejected(self) -> None:
        with pytest.raises(KeyError):
            Input().bind_property("selectedKey", PropertyBinding("/x"))

    def test_aggregations_set_parent(self) -> None:
        field = Input()
        box = VBox(items=[field])

        assert box.get_aggregation("items") == [field]
        assert field.get_parent() is box
        assert box.get_aggregation("content") is None

    def test_single_aggregation_rejects_add(self) -> None:
        with pytest.raises(TypeError):
            Select().add_aggregation("picker", VBox())

    def test_kinds(self) -> None:
        assert Input().is_validatable_kind()
        assert IconTabFilter().is_validatable_kind()
        assert FormElement().is_validatable_kind()
        assert not Element().is_validatable_kind()
        assert Select().has_picker() and not Input().has_picker()
        assert isinstance(Input(), Node)


class TestFormElement:
    def test_label_from_string(self) -> None:
        element = FormElement(label="Email")

        assert isinstance(element.get_label(), Label)
        assert element.get_label().get_text() == "Email"

    def test_fields_know_their_form_element(self) -> None:
        field = Input()
        element = FormElement(label=Label(text="Email"), fields=[field])

        assert field.get_parent() is element
        assert element.get_aggregation("fields") == [field]
