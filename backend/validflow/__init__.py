"""validflow — composable payload validation with fail-fast and all-run combinators."""

from validflow.validators import (
    BaseValidator,
    Composite,
    Sequence,
    ValidationEngine,
    ValidationResult,
    as_validator,
    get_engine,
)

__version__ = "0.1.0"

__all__ = [
    "BaseValidator",
    "Composite",
    "Sequence",
    "ValidationEngine",
    "ValidationResult",
    "as_validator",
    "get_engine",
]
