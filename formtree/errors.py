"""Exceptions raised by value types while checking bound values."""

from typing import Optional


class FormTreeError(Exception):
    """Base class for all formtree errors."""


class ConversionError(FormTreeError):
    """An external value could not be parsed into the bound internal type."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.message = message
        self.value = value


class ConstraintError(FormTreeError):
    """A parsed value violates one or more constraints of its value type."""

    def __init__(self, message: str, violated_constraints: Optional[list[str]] = None):
        super().__init__(message)
        self.message = message
        self.violated_constraints = violated_constraints or []
