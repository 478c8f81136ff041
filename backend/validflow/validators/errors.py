"""Exceptions raised by the validator layer.

None of these represent a failed validation. A payload that breaks a rule
produces ``ValidationResult(valid=False)``; these signal broken wiring or a
broken validator.
"""


class ValidflowError(Exception):
    """Base class for library errors."""


class ValidatorConfigurationError(ValidflowError, TypeError):
    """A validator tree was assembled from something that is not a validator."""


class InvalidResultError(ValidflowError, TypeError):
    """A validator returned something other than a ValidationResult."""


class UnknownRuleError(ValidatorConfigurationError):
    """A flow definition references a rule name that is not registered."""


class UnknownFlowError(ValidflowError, KeyError):
    """No flow is registered under the requested name."""

    def __str__(self) -> str:
        return Exception.__str__(self)
