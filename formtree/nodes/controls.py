"""Controls — the widgets a form is made of."""

from formtree.models import ValueState
from formtree.nodes.element import Element


class Control(Element):
    """Any visual control. Recognized by the traversal."""

    VALIDATABLE_KIND = True


class _ValueStateControl(Control):
    PROPERTIES = {
        "enabled": True,
        "required": False,
        "editable": True,
        "valueState": ValueState.NONE,
        "valueStateText": "",
    }
    VALUE_STATE = True
    VALUE_STATE_TEXT = True


class Input(_ValueStateControl):
    PROPERTIES = {"value": "", "placeholder": ""}
    LABEL_BEARING = True


class TextArea(_ValueStateControl):
    PROPERTIES = {"value": "", "rows": 2}


class DatePicker(_ValueStateControl):
    PROPERTIES = {"value": "", "displayFormat": None}


class Select(_ValueStateControl):
    """Drop-down; the chosen entry is held in 'selectedKey'."""

    PROPERTIES = {"selectedKey": ""}
    AGGREGATIONS = {"picker": False}
    LABEL_BEARING = True

    def has_picker(self) -> bool:
        return True


class ComboBox(_ValueStateControl):
    """Editable drop-down: free text in 'value', chosen entry in 'selectedKey'."""

    PROPERTIES = {"value": "", "selectedKey": ""}
    AGGREGATIONS = {"picker": False}

    def has_picker(self) -> bool:
        return True


class CheckBox(Control):
    """Check box; has a value state but no value state text."""

    PROPERTIES = {
        "text": "",
        "selected": False,
        "enabled": True,
        "editable": True,
        "valueState": ValueState.NONE,
    }
    LABEL_BEARING = True
    VALUE_STATE = True


class Text(Control):
    """Read-only text; no enabled flag and no value state."""

    PROPERTIES = {"text": ""}


class Label(Control):
    PROPERTIES = {"text": "", "required": False}


class Button(Control):
    PROPERTIES = {"text": "", "enabled": True}


# ── Layout containers ──


class VBox(Control):
    AGGREGATIONS = {"items": True}


class HBox(Control):
    AGGREGATIONS = {"items": True}


class Panel(Control):
    PROPERTIES = {"headerText": ""}
    AGGREGATIONS = {"content": True}


class Page(Control):
    PROPERTIES = {"title": ""}
    AGGREGATIONS = {"content": True}


class IconTabBar(Control):
    AGGREGATIONS = {"items": True}


class Table(Control):
    AGGREGATIONS = {"items": True}


class ColumnListItem(Control):
    AGGREGATIONS = {"cells": True}
