"""Composite combinator — runs every validator and aggregates the outcomes."""

import asyncio
from typing import Any

import structlog

from validflow.validators.base import BaseValidator, Validator, ensure_validators, run_validator
from validflow.validators.models import ValidationResult

logger = structlog.get_logger()


class Composite(BaseValidator):
    """Runs all children concurrently against the same payload.

    The result is valid only if every child is valid. Messages are
    concatenated in the order the children were given, not the order they
    finished in. If a child raises, the fault propagates and any siblings
    still running are cancelled.
    """

    def __init__(self, *validators: Validator, name: str = "Composite"):
        self._children = ensure_validators(validators, name)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def children(self) -> tuple:
        return self._children

    async def validate(self, payload: Any) -> ValidationResult:
        if not self._children:
            return ValidationResult(valid=True)

        tasks = [
            asyncio.ensure_future(run_validator(child, payload))
            for child in self._children
        ]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException as e:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            logger.debug(
                "composite_fault",
                composite=self._name,
                error=repr(e),
                cancelled=len(pending),
            )
            raise

        return ValidationResult.all_of(results)
