"""Validator layer — leaf units, Sequence/Composite combinators, and named flows.

Usage:
    from validflow.validators import Sequence, Composite, RequiredField, MinLength

    user = Sequence(RequiredField("password"), MinLength("password", 8))
    result = await user({"password": "hunter2"})
"""

from validflow.validators.base import (
    MISSING,
    BaseValidator,
    FunctionValidator,
    Validator,
    as_validator,
    run_validator,
)
from validflow.validators.composite import Composite
from validflow.validators.engine import ValidationEngine, get_engine
from validflow.validators.errors import (
    InvalidResultError,
    UnknownFlowError,
    UnknownRuleError,
    ValidatorConfigurationError,
    ValidflowError,
)
from validflow.validators.models import ValidationResult
from validflow.validators.rules import RULES, ForbidsSubstring, MatchesPattern, MinLength, RequiredField
from validflow.validators.sequence import Sequence

__all__ = [
    "MISSING",
    "BaseValidator",
    "FunctionValidator",
    "Validator",
    "as_validator",
    "run_validator",
    "Sequence",
    "Composite",
    "ValidationEngine",
    "get_engine",
    "ValidationResult",
    "RULES",
    "RequiredField",
    "MatchesPattern",
    "MinLength",
    "ForbidsSubstring",
    "ValidflowError",
    "ValidatorConfigurationError",
    "InvalidResultError",
    "UnknownRuleError",
    "UnknownFlowError",
]
