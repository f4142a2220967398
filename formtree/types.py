"""Value types — conversion and constraint checking for bound properties.

A value type turns the external (displayed) value of a control property into
its internal representation and checks it against declared constraints.
parse_value raises ConversionError, validate_value raises ConstraintError.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel

from formtree.errors import ConstraintError, ConversionError


class ValueType(ABC):
    """Abstract base for all value types."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Type name for logging."""
        ...

    @abstractmethod
    def parse_value(self, value: Any, internal_type: Optional[str] = None) -> Any:
        """Convert an external value to the internal representation."""
        ...

    @abstractmethod
    def validate_value(self, value: Any) -> None:
        """Check an internal value against the type's constraints."""
        ...

    def format_value(self, value: Any) -> Any:
        """Convert an internal value to its external representation."""
        return "" if value is None else str(value)

    def _raise_violations(self, violations: list[tuple[str, str]]) -> None:
        if violations:
            raise ConstraintError(
                ". ".join(message for _, message in violations),
                [constraint for constraint, _ in violations],
            )


# ── String ──


class StringConstraints(BaseModel):
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    search: Optional[str] = None  # Regular expression the value must contain
    starts_with: Optional[str] = None
    contains: Optional[str] = None


class StringType(ValueType):
    """Free text with optional length and pattern constraints."""

    def __init__(self, **constraints):
        self.constraints = StringConstraints(**constraints)

    @property
    def name(self) -> str:
        return "String"

    def parse_value(self, value: Any, internal_type: Optional[str] = None) -> str:
        if value is None:
            return ""
        if isinstance(value, (dict, list, tuple, set)):
            raise ConversionError(f"Don't know how to parse String from {type(value).__name__}", value)
        return str(value)

    def validate_value(self, value: Any) -> None:
        c = self.constraints
        text = "" if value is None else value
        violations = []

        if c.min_length is not None and len(text) < c.min_length:
            violations.append(("minLength", f"Enter a value with at least {c.min_length} characters"))
        if c.max_length is not None and len(text) > c.max_length:
            violations.append(("maxLength", f"Enter a value with no more than {c.max_length} characters"))
        if c.search is not None and not re.search(c.search, text):
            violations.append(("search", "Enter a valid value"))
        if c.starts_with is not None and not text.startswith(c.starts_with):
            violations.append(("startsWith", f"Enter a value starting with {c.starts_with}"))
        if c.contains is not None and c.contains not in text:
            violations.append(("contains", f"Enter a value containing {c.contains}"))

        self._raise_violations(violations)


# ── Numbers ──


class NumberConstraints(BaseModel):
    minimum: Optional[float] = None
    maximum: Optional[float] = None


class _NumberType(ValueType):
    def __init__(self, **constraints):
        self.constraints = NumberConstraints(**constraints)

    def validate_value(self, value: Any) -> None:
        # Empty input parses to None and carries no range to check
        if value is None:
            return
        c = self.constraints
        violations = []
        if c.minimum is not None and value < c.minimum:
            violations.append(("minimum", f"Enter a number greater than or equal to {self._show(c.minimum)}"))
        if c.maximum is not None and value > c.maximum:
            violations.append(("maximum", f"Enter a number less than or equal to {self._show(c.maximum)}"))
        self._raise_violations(violations)

    @staticmethod
    def _show(bound: float) -> str:
        return str(int(bound)) if float(bound).is_integer() else str(bound)

    @staticmethod
    def _clean(value: str) -> str:
        return value.strip().replace(",", "").replace(" ", "")


class IntegerType(_NumberType):
    """Whole numbers, optionally bounded."""

    @property
    def name(self) -> str:
        return "Integer"

    def parse_value(self, value: Any, internal_type: Optional[str] = None) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, bool):
            raise ConversionError("Enter a number with no decimal places", value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if value.is_integer():
                return int(value)
            raise ConversionError("Enter a number with no decimal places", value)

        text = self._clean(str(value))
        if text == "":
            return None
        try:
            return int(text)
        except ValueError:
            raise ConversionError("Enter a number with no decimal places", value)


class FloatType(_NumberType):
    """Decimal numbers, optionally bounded."""

    @property
    def name(self) -> str:
        return "Float"

    def parse_value(self, value: Any, internal_type: Optional[str] = None) -> Optional[float]:
        if value is None:
            return None
        if isinstance(value, bool):
            raise ConversionError("Enter a number", value)
        if isinstance(value, (int, float)):
            return float(value)

        text = self._clean(str(value))
        if text == "":
            return None
        try:
            return float(text)
        except ValueError:
            raise ConversionError("Enter a number", value)


# ── Boolean ──


class BooleanType(ValueType):
    """'true' / 'false' flags."""

    _TRUE = {"true", "x", "1", "yes"}
    _FALSE = {"false", "", "0", "no"}

    @property
    def name(self) -> str:
        return "Boolean"

    def parse_value(self, value: Any, internal_type: Optional[str] = None) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        text = str(value).strip().lower()
        if text in self._TRUE:
            return True
        if text in self._FALSE:
            return False
        raise ConversionError("Enter 'true' or 'false'", value)

    def validate_value(self, value: Any) -> None:
        if value is not None and not isinstance(value, bool):
            raise ConstraintError("Enter 'true' or 'false'", ["type"])

    def format_value(self, value: Any) -> str:
        return "true" if value else "false"
