"""Validator contract: the one shape every leaf unit and combinator satisfies.

A validator is anything callable with a single payload that returns a
ValidationResult, either directly or as an awaitable. Leaves and
combinators share this contract, so trees nest without special cases.
"""

import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional, Union

from validflow.validators.errors import InvalidResultError, ValidatorConfigurationError
from validflow.validators.models import ValidationResult

Validator = Callable[[Any], Union[ValidationResult, Awaitable[ValidationResult]]]


class _Missing:
    """Sentinel for a field absent from the payload."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class BaseValidator(ABC):
    """Abstract base for named validators.

    Contract:
        - validate() keeps no state between invocations
        - validate() returns a ValidationResult, or an awaitable of one
        - a payload that breaks the rule yields valid=False, never an exception
        - an exception out of validate() is a fault and is left to propagate
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, payload: Any) -> Union[ValidationResult, Awaitable[ValidationResult]]:
        """Check the payload against this validator's rule(s)."""
        ...

    def __call__(self, payload: Any) -> Union[ValidationResult, Awaitable[ValidationResult]]:
        return self.validate(payload)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    # ── Helper Methods ──

    def _pass(self, *messages: str) -> ValidationResult:
        return ValidationResult.ok(*messages)

    def _fail(self, *messages: str) -> ValidationResult:
        return ValidationResult.fail(*messages)

    def _field(self, payload: Mapping, key: str) -> Any:
        """Read a key from a mapping payload, MISSING when absent.

        A payload without ``.get`` raises AttributeError, which is a fault.
        """
        return payload.get(key, MISSING)


class FunctionValidator(BaseValidator):
    """Wraps a plain sync or async function as a named validator."""

    def __init__(self, func: Callable[[Any], Any], name: Optional[str] = None):
        if not callable(func):
            raise ValidatorConfigurationError(f"{func!r} is not callable")
        self._func = func
        self._name = name or getattr(func, "__name__", type(func).__name__)

    @property
    def name(self) -> str:
        return self._name

    def validate(self, payload: Any) -> Union[ValidationResult, Awaitable[ValidationResult]]:
        return self._func(payload)


def as_validator(func: Optional[Callable[[Any], Any]] = None, *, name: Optional[str] = None):
    """Turn a function into a FunctionValidator.

    Works both as ``as_validator(fn)`` and as a decorator, with or without
    a ``name`` keyword.
    """
    if func is None:
        return lambda f: FunctionValidator(f, name=name)
    return FunctionValidator(func, name=name)


def validator_name(validator: Any) -> str:
    """Best-effort display name for a validator."""
    name = getattr(validator, "name", None)
    if isinstance(name, str):
        return name
    return getattr(validator, "__name__", type(validator).__name__)


def ensure_validators(validators: tuple, owner: str) -> tuple:
    """Check every child of a combinator is callable."""
    for index, child in enumerate(validators):
        if not callable(child):
            raise ValidatorConfigurationError(
                f"{owner} child #{index + 1} is not a validator: {child!r}"
            )
    return tuple(validators)


async def run_validator(validator: Validator, payload: Any) -> ValidationResult:
    """Invoke a validator and wait for its result if it suspends.

    Exceptions raised by the validator propagate unchanged. A return value
    that is not a ValidationResult raises InvalidResultError.
    """
    result = validator(payload)
    if inspect.isawaitable(result):
        result = await result
    if not isinstance(result, ValidationResult):
        raise InvalidResultError(
            f"Validator '{validator_name(validator)}' returned {type(result).__name__}, "
            f"expected ValidationResult"
        )
    return result
