"""Validation Engine — registry of named validation flows.

Each flow is a validator tree assembled once (e.g. once for "user") and
invoked once per incoming payload. The engine adds timing and logging
around each run; it never alters the result or swallows a fault.

Usage:
    engine = ValidationEngine()
    result = await engine.validate("user", payload)
    if not result.valid:
        # Hand result.messages to whatever reports errors to the caller
"""

import asyncio
import time
from functools import lru_cache
from typing import Any, Optional

import structlog

from validflow.validators.base import Validator, run_validator
from validflow.validators.errors import UnknownFlowError, ValidatorConfigurationError
from validflow.validators.flows import load_flows
from validflow.validators.models import ValidationResult

logger = structlog.get_logger()


class ValidationEngine:
    """Runs named validation flows and logs every run with timing."""

    def __init__(self, flows: Optional[dict[str, Validator]] = None):
        """Initialize with the given flows, or the bundled and configured ones.

        Args:
            flows: Optional mapping of flow name to root validator.
        """
        self._flows: dict[str, Validator] = {}
        for name, validator in (load_flows() if flows is None else flows).items():
            self.register(name, validator)

    @property
    def flow_names(self) -> list[str]:
        return list(self._flows)

    def register(self, name: str, validator: Validator) -> None:
        """Add or replace a flow."""
        if not callable(validator):
            raise ValidatorConfigurationError(f"Flow '{name}' is not a validator: {validator!r}")
        self._flows[name] = validator

    def unregister(self, name: str) -> None:
        """Remove a flow by name. Missing names are ignored."""
        self._flows.pop(name, None)

    def get(self, name: str) -> Validator:
        try:
            return self._flows[name]
        except KeyError:
            raise UnknownFlowError(
                f"No validation flow named '{name}'. Registered: {', '.join(sorted(self._flows)) or 'none'}"
            ) from None

    async def validate(self, name: str, payload: Any) -> ValidationResult:
        """Run one flow against a payload.

        Args:
            name: Registered flow name
            payload: The value to validate

        Returns:
            The flow's ValidationResult

        Raises:
            UnknownFlowError: no flow is registered under ``name``
            Exception: whatever fault the flow's validators raised, unchanged
        """
        validator = self.get(name)
        start_time = time.perf_counter()

        try:
            result = await run_validator(validator, payload)
        except Exception as e:
            logger.error(
                "validator_fault",
                flow=name,
                error_type=type(e).__name__,
                error=str(e),
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        logger.info(
            "validation_complete",
            flow=name,
            valid=result.valid,
            message_count=len(result.messages),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result

    def validate_sync(self, name: str, payload: Any) -> ValidationResult:
        """Blocking wrapper around validate() for callers without an event loop."""
        return asyncio.run(self.validate(name, payload))


@lru_cache
def get_engine() -> ValidationEngine:
    """Shared engine loaded with the bundled and configured flows.

    Leaves structlog alone; applications call
    ``validflow.observability.configure_logging()`` at startup.
    """
    return ValidationEngine()
