"""Sample leaf validators over mapping payloads.

Each rule checks one field. An absent field fails closed: a rule that
cannot find its field reports valid=False with a message instead of
passing silently.
"""

import re
from collections.abc import Sized
from typing import Any, Optional

from validflow.validators.base import BaseValidator, MISSING
from validflow.validators.models import ValidationResult


class RequiredField(BaseValidator):
    """Field must be present and not None or an empty string."""

    def __init__(self, field: str):
        self.field = field

    @property
    def name(self) -> str:
        return f"RequiredField({self.field})"

    def validate(self, payload: Any) -> ValidationResult:
        value = self._field(payload, self.field)
        if value is MISSING or value is None or value == "":
            return self._fail(f"'{self.field}' is required")
        return self._pass()


class MatchesPattern(BaseValidator):
    """String field must match a regular expression."""

    def __init__(self, field: str, pattern: str, message: Optional[str] = None):
        self.field = field
        self.pattern = re.compile(pattern)
        self.message = message or f"'{self.field}' has an invalid format"

    @property
    def name(self) -> str:
        return f"MatchesPattern({self.field})"

    def validate(self, payload: Any) -> ValidationResult:
        value = self._field(payload, self.field)
        if not isinstance(value, str) or not self.pattern.fullmatch(value):
            return self._fail(self.message)
        return self._pass()


class MinLength(BaseValidator):
    """Field must have at least ``length`` characters or items."""

    def __init__(self, field: str, length: int):
        if length < 0:
            raise ValueError("length must be non-negative")
        self.field = field
        self.length = length

    @property
    def name(self) -> str:
        return f"MinLength({self.field}, {self.length})"

    def validate(self, payload: Any) -> ValidationResult:
        value = self._field(payload, self.field)
        if not isinstance(value, Sized) or len(value) < self.length:
            unit = "characters long" if isinstance(value, str) else "items"
            return self._fail(f"'{self.field}' must be at least {self.length} {unit}")
        return self._pass()


class ForbidsSubstring(BaseValidator):
    """String field must not contain ``substring``."""

    def __init__(self, field: str, substring: str, message: Optional[str] = None):
        if not substring:
            raise ValueError("substring must not be empty")
        self.field = field
        self.substring = substring
        self.message = message or f"'{self.field}' must not contain '{self.substring}'"

    @property
    def name(self) -> str:
        return f"ForbidsSubstring({self.field}, {self.substring!r})"

    def validate(self, payload: Any) -> ValidationResult:
        value = self._field(payload, self.field)
        if not isinstance(value, str):
            return self._fail(f"'{self.field}' must be a string")
        if self.substring in value:
            return self._fail(self.message)
        return self._pass()


# Rule names usable from JSON flow definitions
RULES: dict[str, type[BaseValidator]] = {
    "required": RequiredField,
    "matches": MatchesPattern,
    "min_length": MinLength,
    "forbids": ForbidsSubstring,
}
