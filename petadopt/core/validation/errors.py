# petadopt/core/validation/errors.py
"""
Typed errors for the three-step application flow.

Exports
-------
- ApplicationError, StepValidationError, StepOrderError, AlreadyEvaluatedError
- APPLICATION_ERRORS
"""

from __future__ import annotations

# =========================
# Exception types
# =========================


class ApplicationError(ValueError):
    """Base class for application-flow failures."""


class StepValidationError(ApplicationError):
    """A step submission violates the pet's adoption rule."""

    def __init__(self, step: int, problems: list[str]) -> None:
        self.step = step
        self.problems = list(problems)
        super().__init__(f"Step {step} rejected: " + "; ".join(self.problems))


class StepOrderError(ApplicationError):
    """A step was submitted before the steps it depends on."""


class AlreadyEvaluatedError(ApplicationError):
    """The application already has a final evaluation."""


# Selector tuple for grouped exception handling
APPLICATION_ERRORS = (
    StepValidationError,
    StepOrderError,
    AlreadyEvaluatedError,
)

__all__ = [
    "ApplicationError",
    "StepValidationError",
    "StepOrderError",
    "AlreadyEvaluatedError",
    "APPLICATION_ERRORS",
]
