# petadopt/orchestrator/flow.py
"""
Three-step adoption application flow (in-memory).

Purpose
-------
Accumulate an applicant's submissions for one pet and evaluate them once:
  1) Step 1 (identity)          -> validated against the rule, stored on the draft
  2) Step 2 (living situation)  -> validated against the rule, stored on the draft
  3) Step 3 (commitments)       -> validated, then the engine runs on steps 1-3

Design
------
- Drafts are immutable; every submission returns a new ApplicationDraft.
- Steps must arrive in order; earlier steps may be re-submitted until the
  application is evaluated.
- Persistence is the caller's job: store the returned draft (its status,
  score and knockouts) verbatim.

Public API
----------
ApplicationFlow(pet, rule).start() / submit_step1 / submit_step2 / submit_step3
run_application(pet, rule, step1, step2, step3) -> ApplicationDraft
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from petadopt.core.evaluation import evaluate_application
from petadopt.core.validation import (
    AlreadyEvaluatedError,
    ApplicationError,
    StepOrderError,
    StepValidationError,
    validate_step1,
    validate_step2,
    validate_step3,
)
from petadopt.schemas.models import (
    AdoptionRule,
    ApplicationDraft,
    Pet,
    Step1Snapshot,
    Step2Snapshot,
    Step3Snapshot,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApplicationFlow:
    """Step-by-step application for a single pet under its adoption rule."""

    pet: Pet
    rule: AdoptionRule | None = None

    def start(self) -> ApplicationDraft:
        return ApplicationDraft(pet_slug=self.pet.slug)

    def submit_step1(self, draft: ApplicationDraft, data: Step1Snapshot) -> ApplicationDraft:
        self._guard(draft, step=1)
        step1 = self._validated(validate_step1, data, step=1)
        logger.info("Step 1 accepted for %s", self.pet.slug)
        return draft.model_copy(update={"step1": step1})

    def submit_step2(self, draft: ApplicationDraft, data: Step2Snapshot) -> ApplicationDraft:
        self._guard(draft, step=2)
        if draft.step1 is None:
            raise StepOrderError("Step 2 submitted before step 1")
        step2 = self._validated(validate_step2, data, step=2)
        logger.info("Step 2 accepted for %s", self.pet.slug)
        return draft.model_copy(update={"step2": step2})

    def submit_step3(self, draft: ApplicationDraft, data: Step3Snapshot) -> ApplicationDraft:
        """Validate commitments and evaluate the full snapshot exactly once."""
        self._guard(draft, step=3)
        if draft.step1 is None or draft.step2 is None:
            raise StepOrderError("Step 3 submitted before steps 1 and 2")
        step3 = self._validated(validate_step3, data, step=3)

        result = evaluate_application(self.pet, self.rule, draft.step1, draft.step2, step3)
        logger.info("Application for %s evaluated: %s (score %d)", self.pet.slug, result.status.value, result.score)
        return draft.model_copy(update={"step3": step3, "status": result.status, "result": result})

    # ---------- Internals ----------

    def _guard(self, draft: ApplicationDraft, *, step: int) -> None:
        if draft.pet_slug != self.pet.slug:
            raise ApplicationError(f"Draft belongs to {draft.pet_slug!r}, not {self.pet.slug!r}")
        if draft.evaluated:
            raise AlreadyEvaluatedError(f"Application for {draft.pet_slug!r} is already evaluated; step {step} refused")

    def _validated(self, validator, data, *, step: int):
        try:
            return validator(data, self.rule)
        except StepValidationError as e:
            logger.warning("Step %d rejected for %s: %d problem(s)", step, self.pet.slug, len(e.problems))
            raise


def run_application(
    pet: Pet,
    rule: AdoptionRule | None,
    step1: Step1Snapshot,
    step2: Step2Snapshot,
    step3: Step3Snapshot,
) -> ApplicationDraft:
    """
    Run all three steps in sequence and return the evaluated draft.

    Raises:
        StepValidationError: a step violates the pet's adoption rule.
    """
    flow = ApplicationFlow(pet=pet, rule=rule)
    draft = flow.start()
    draft = flow.submit_step1(draft, step1)
    draft = flow.submit_step2(draft, step2)
    return flow.submit_step3(draft, step3)


__all__ = ["ApplicationFlow", "run_application"]
