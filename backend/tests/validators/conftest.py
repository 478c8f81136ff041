"""Validator test helpers — recording leaves with canned outcomes."""

import asyncio

import pytest

from validflow.validators import ValidationResult


class RecordingLeaf:
    """Async leaf returning a fixed result and counting its invocations."""

    def __init__(self, name: str, valid: bool, messages=(), delay: float = 0.0, log=None):
        self.name = name
        self.valid = valid
        self.messages = list(messages)
        self.delay = delay
        self.calls = 0
        self.log = log if log is not None else []

    async def __call__(self, payload):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        self.log.append(self.name)
        return ValidationResult(valid=self.valid, messages=self.messages)


@pytest.fixture
def leaf():
    """Factory for RecordingLeaf instances."""
    return RecordingLeaf
