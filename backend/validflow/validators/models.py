"""Validation result model shared by every leaf unit and combinator."""

from typing import Iterable

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Outcome of one validator invocation.

    A negative outcome is a normal value, not an error. ``messages`` is
    always a list (possibly empty) and is copied on construction, so a
    result never shares a list with whoever built it.
    """

    valid: bool
    messages: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, *messages: str) -> "ValidationResult":
        return cls(valid=True, messages=list(messages))

    @classmethod
    def fail(cls, *messages: str) -> "ValidationResult":
        return cls(valid=False, messages=list(messages))

    @classmethod
    def all_of(cls, results: Iterable["ValidationResult"]) -> "ValidationResult":
        """Aggregate several results: valid only if all are, messages in input order."""
        valid = True
        messages: list[str] = []
        for result in results:
            valid = valid and result.valid
            messages.extend(result.messages)
        return cls(valid=valid, messages=messages)
