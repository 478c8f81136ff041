"""Sequence combinator — ordered, fail-fast chain of validators."""

from typing import Any

import structlog

from validflow.validators.base import BaseValidator, Validator, ensure_validators, run_validator, validator_name
from validflow.validators.models import ValidationResult

logger = structlog.get_logger()


class Sequence(BaseValidator):
    """Runs children one at a time in order and stops at the first failure.

    Messages from passing children accumulate in evaluation order. The
    failing child's messages are appended and the remaining children are
    never invoked. With no children the sequence always passes.
    """

    def __init__(self, *validators: Validator, name: str = "Sequence"):
        self._children = ensure_validators(validators, name)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def children(self) -> tuple:
        return self._children

    async def validate(self, payload: Any) -> ValidationResult:
        # Allocated per call; a list held on self would leak across invocations
        messages: list[str] = []

        for position, child in enumerate(self._children):
            result = await run_validator(child, payload)
            messages.extend(result.messages)
            if not result.valid:
                logger.debug(
                    "sequence_short_circuit",
                    sequence=self._name,
                    failed=validator_name(child),
                    position=position,
                    skipped=len(self._children) - position - 1,
                )
                return ValidationResult(valid=False, messages=messages)

        return ValidationResult(valid=True, messages=messages)
