"""Form structure — forms, form containers, form elements, tab filters.

Form containers, form elements and icon tab filters are not controls, but the
traversal recognizes them so it can reach the fields they hold.
"""

from typing import Optional, Union

from formtree.nodes.base import Node
from formtree.nodes.controls import Control, Label
from formtree.nodes.element import Element


class Form(Control):
    """Form; its containers live under 'formContainers'."""

    PROPERTIES = {"editable": True}
    AGGREGATIONS = {"formContainers": True, "title": False}


class SimpleForm(Control):
    """Form built from a flat content list."""

    PROPERTIES = {"editable": True}
    AGGREGATIONS = {"content": True, "form": False}


class FormContainer(Element):
    PROPERTIES = {"title": ""}
    AGGREGATIONS = {"formElements": True}
    VALIDATABLE_KIND = True


class FormElement(Element):
    """One labelled row of a form; fields live under 'fields'."""

    AGGREGATIONS = {"label": False, "fields": True}
    VALIDATABLE_KIND = True

    def __init__(self, id: Optional[str] = None, label: Union[str, Label, None] = None, **settings):
        if isinstance(label, str):
            label = Label(text=label)
        super().__init__(id, label=label, **settings)

    def get_label(self) -> Optional[Node]:
        return self.get_aggregation("label")


class IconTabFilter(Element):
    PROPERTIES = {"text": "", "key": ""}
    AGGREGATIONS = {"content": True}
    VALIDATABLE_KIND = True


class ObjectPageSection(Element):
    """Section of an object page; not a recognized kind."""

    PROPERTIES = {"title": ""}
    AGGREGATIONS = {"subSections": True}
