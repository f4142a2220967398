"""Node capability interface and the in-memory reference adapters."""

from formtree.nodes.base import Node
from formtree.nodes.element import Element
from formtree.nodes.controls import (
    Button,
    CheckBox,
    ColumnListItem,
    ComboBox,
    Control,
    DatePicker,
    HBox,
    IconTabBar,
    Input,
    Label,
    Page,
    Panel,
    Select,
    Table,
    Text,
    TextArea,
    VBox,
)
from formtree.nodes.form import (
    Form,
    FormContainer,
    FormElement,
    IconTabFilter,
    ObjectPageSection,
    SimpleForm,
)

__all__ = [
    "Node",
    "Element",
    "Control",
    "Input",
    "TextArea",
    "DatePicker",
    "Select",
    "ComboBox",
    "CheckBox",
    "Text",
    "Label",
    "Button",
    "VBox",
    "HBox",
    "Panel",
    "Page",
    "IconTabBar",
    "Table",
    "ColumnListItem",
    "Form",
    "SimpleForm",
    "FormContainer",
    "FormElement",
    "IconTabFilter",
    "ObjectPageSection",
]
