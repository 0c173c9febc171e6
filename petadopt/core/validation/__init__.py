# petadopt/core/validation/__init__.py

from .errors import (
    APPLICATION_ERRORS,
    AlreadyEvaluatedError,
    ApplicationError,
    StepOrderError,
    StepValidationError,
)
from .steps import validate_step1, validate_step2, validate_step3

__all__ = [
    "validate_step1",
    "validate_step2",
    "validate_step3",
    "ApplicationError",
    "StepValidationError",
    "StepOrderError",
    "AlreadyEvaluatedError",
    "APPLICATION_ERRORS",
]
