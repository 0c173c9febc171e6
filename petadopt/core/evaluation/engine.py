# petadopt/core/evaluation/engine.py
"""
Adoption application evaluation engine.

Purpose
-------
Given a pet, its (optional) adoption rule and the applicant's three step
snapshots, compute:
  - knockouts: ordered hard violations (any one forces rejection)
  - score    : integer suitability score in [0, 100]
  - status   : rejected | review | interview

Design
------
- Pure and deterministic: no I/O, no shared state; same inputs, same output.
- Rule defaults are resolved once (`resolve_effective_rule`); nothing below
  falls back to inline literals for policy knobs.
- Total over schema-valid inputs: never raises.

Tuning
------
Point weights and thresholds are module constants below.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from petadopt.core.evaluation.defaults import resolve_effective_rule
from petadopt.core.evaluation.phrases import INDOOR_SLEEP, NEGATIVE_HISTORY, OUTDOOR_SLEEP
from petadopt.schemas.labels import (
    ApplicationStatus,
    BudgetBracket,
    Commitment,
    HousingType,
    PetEnvironment,
    Species,
)
from petadopt.schemas.models import (
    AdoptionRule,
    EffectiveRule,
    EvaluationReport,
    EvaluationResult,
    Pet,
    ScoreItem,
    Step1Snapshot,
    Step2Snapshot,
    Step3Snapshot,
)

logger = logging.getLogger(__name__)

# ----------------------------
# Disposition thresholds
# ----------------------------
INTERVIEW_MIN_SCORE = 80
REVIEW_MIN_SCORE = 60

# ----------------------------
# Point weights
# ----------------------------
HOUSING_POINTS: dict[HousingType, int] = {
    HousingType.own: 20,
    HousingType.with_family: 12,
    HousingType.rent: 10,
    HousingType.other: 0,
}
HOUSING_SECURE_BONUS = 10  # unless renting without landlord permission

LIFESTYLE_MAX = 20
LIFESTYLE_HOURS_CAP = 60
LIFESTYLE_HOURS_PER_POINT = 3

ENVIRONMENT_POINTS: dict[PetEnvironment, int] = {
    PetEnvironment.indoor: 25,
    PetEnvironment.indoor_with_enclosed: 20,
    PetEnvironment.free_roam: 0,
}

MOTIVATION_MAX_BONUS = 15
MOTIVATION_MAX_PENALTY = 10
MOTIVATION_CHARS_PER_PENALTY = 40

COMMIT_BONUS = 5
COMMIT_MISSING_PENALTY = 10

BUDGET_POINTS: dict[BudgetBracket, int] = {
    BudgetBracket.b100_200: -10,
    BudgetBracket.b200_300: -5,
    BudgetBracket.b300_400: 0,
    BudgetBracket.b400_500: 5,
    BudgetBracket.b500_plus: 8,
}

VET_NAMED_BONUS = 8
VET_CONTACT_BONUS = 4

FAMILY_MISSING_PENALTY = 30
FAMILY_VOLUNTARY_BONUS = 5

CONDO_ALLOWS_BONUS = 5
CONDO_FORBIDS_PENALTY = 25

SLEEP_INDOOR_BONUS = 5
SLEEP_OUTDOOR_PENALTY = 5
TRAVEL_CARETAKER_BONUS = 5
NEGATIVE_HISTORY_PENALTY = 15

HOURS_AWAY_MAX_PENALTY = 25
HOURS_AWAY_PER_POINT = 4
HOURS_ALONE_MAX_PENALTY = 30
HOURS_ALONE_POINTS_PER_HOUR = 4

DOG_LEASH_BONUS = 8
DOG_ID_TAG_BONUS = 6
DOG_TRAINING_BONUS = 6
DOG_SOCIAL_BONUS = 6
DOG_SECURE_YARD_BONUS = 10

# ----------------------------
# Knockout messages (shown to applicants and staff)
# ----------------------------
KO_MIN_AGE = "Edad mínima requerida: {min_age} años"
KO_HOUSING = "Tipo de vivienda no permitido para esta adopción"
KO_LANDLORD = "Contrato de renta no permite mascotas"
KO_FREE_ROAM = "Ambiente 100% exterior no permitido"
KO_OTHER_CATS = "No convive con otros gatos"
KO_OTHER_DOGS = "No convive con perros"
KO_HOME_VISIT = "Se requiere visita domiciliaria."
KO_INSECURE_YARD = "El entorno no es seguro (posibles salidas a la calle)."
KO_TETHERING = "No se permite amarrar o encadenar al adoptado."
KO_CONDO = "Reglamento del condominio no permite mascotas"


@dataclass
class _Scorecard:
    """Two accumulation registers for a single evaluation pass."""

    knockouts: list[str] = field(default_factory=list)
    items: list[ScoreItem] = field(default_factory=list)
    total: float = 0.0

    def knockout(self, msg: str) -> None:
        self.knockouts.append(msg)

    def add(self, points: float, label: str) -> None:
        if points == 0:
            return
        self.total += points
        self.items.append(ScoreItem(label=label, points=points))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(x + 0.5)


def clamp_score(raw: float) -> int:
    return max(0, min(100, round_half_up(raw)))


def classify(score: int, knockouts: list[str] | tuple[str, ...]) -> ApplicationStatus:
    """Any knockout rejects; otherwise thresholds on the clamped score."""
    if knockouts:
        return ApplicationStatus.rejected
    if score >= INTERVIEW_MIN_SCORE:
        return ApplicationStatus.interview
    if score >= REVIEW_MIN_SCORE:
        return ApplicationStatus.review
    return ApplicationStatus.rejected


# ----------------------------
# Knockout checks
# ----------------------------


def _check_knockouts(card: _Scorecard, pet: Pet, rule: EffectiveRule, step1: Step1Snapshot, step2: Step2Snapshot) -> None:
    if step1.age_bracket.min_age < rule.min_age_years:
        card.knockout(KO_MIN_AGE.format(min_age=rule.min_age_years))

    if rule.allowed_housing and step2.housing_type not in rule.allowed_housing:
        card.knockout(KO_HOUSING)

    if rule.require_landlord_permission and step2.housing_type == HousingType.rent and not step2.landlord_allows_pets:
        card.knockout(KO_LANDLORD)

    if rule.disallow_free_roam and step2.pet_environment == PetEnvironment.free_roam:
        card.knockout(KO_FREE_ROAM)

    # Checked independently: "both" can trigger both conflicts
    if step2.has_cats and rule.accepts_other_cats is False:
        card.knockout(KO_OTHER_CATS)
    if step2.has_dogs and rule.accepts_other_dogs is False:
        card.knockout(KO_OTHER_DOGS)

    if pet.species == Species.dog:
        if rule.require_home_visit and step2.home_visit_ok is False:
            card.knockout(KO_HOME_VISIT)
        if rule.require_fenced_or_secure and step2.yard_secure is False:
            card.knockout(KO_INSECURE_YARD)
        if rule.forbid_tethering and step2.will_not_tether is False:
            card.knockout(KO_TETHERING)


# ----------------------------
# Score components
# ----------------------------


def _score_housing(card: _Scorecard, step2: Step2Snapshot) -> None:
    card.add(HOUSING_POINTS[step2.housing_type], f"Housing: {step2.housing_type.value}")
    renting_without_permission = step2.housing_type == HousingType.rent and not step2.landlord_allows_pets
    if not renting_without_permission:
        card.add(HOUSING_SECURE_BONUS, "Housing secure for pets")


def _score_lifestyle(card: _Scorecard, step2: Step2Snapshot) -> None:
    hours = min(step2.hours_away_per_week, LIFESTYLE_HOURS_CAP)
    card.add(max(0.0, LIFESTYLE_MAX - hours / LIFESTYLE_HOURS_PER_POINT), "Time at home")


def _score_environment(card: _Scorecard, step2: Step2Snapshot) -> None:
    card.add(ENVIRONMENT_POINTS[step2.pet_environment], f"Environment: {step2.pet_environment.value}")


def _score_motivation(card: _Scorecard, rule: EffectiveRule, step2: Step2Snapshot) -> None:
    threshold = rule.min_motivation_chars
    length = len(step2.motivation.strip())
    if length >= threshold:
        bonus = min(MOTIVATION_MAX_BONUS, math.floor(length / max(1, threshold * 2) * MOTIVATION_MAX_BONUS))
        card.add(bonus, "Motivation")
    else:
        penalty = min(MOTIVATION_MAX_PENALTY, math.ceil((threshold - length) / MOTIVATION_CHARS_PER_PENALTY))
        card.add(-penalty, "Motivation too short")


def _score_commitments(card: _Scorecard, rule: EffectiveRule, step3: Step3Snapshot) -> None:
    for commitment in Commitment:
        if step3.given(commitment):
            card.add(COMMIT_BONUS, f"Commitment: {commitment.value}")
        elif rule.requires(commitment):
            card.add(-COMMIT_MISSING_PENALTY, f"Missing required commitment: {commitment.value}")


def _score_resources(card: _Scorecard, step2: Step2Snapshot) -> None:
    if step2.monthly_budget is not None:
        card.add(BUDGET_POINTS[step2.monthly_budget], f"Monthly budget: {step2.monthly_budget.value}")
    if step2.has_vet:
        card.add(VET_NAMED_BONUS, "Has a veterinarian")
    if step2.vet_contact:
        card.add(VET_CONTACT_BONUS, "Veterinarian contact provided")


def _score_family(card: _Scorecard, rule: EffectiveRule, step3: Step3Snapshot) -> None:
    if rule.require_family_consent:
        if not step3.family_agrees:
            card.add(-FAMILY_MISSING_PENALTY, "Required family consent missing")
    elif step3.family_agrees:
        card.add(FAMILY_VOLUNTARY_BONUS, "Family agrees")


def _score_condo(card: _Scorecard, step2: Step2Snapshot) -> None:
    # A forbidding condo is both penalized and a knockout.
    if step2.condo_allows_pets is False:
        card.add(-CONDO_FORBIDS_PENALTY, "Condominium forbids pets")
        card.knockout(KO_CONDO)
    elif step2.condo_allows_pets is True:
        card.add(CONDO_ALLOWS_BONUS, "Condominium allows pets")


def _score_free_text(card: _Scorecard, step2: Step2Snapshot) -> None:
    if INDOOR_SLEEP.matches(step2.sleep_location):
        card.add(SLEEP_INDOOR_BONUS, "Sleeps indoors")
    if OUTDOOR_SLEEP.matches(step2.sleep_location):
        card.add(-SLEEP_OUTDOOR_PENALTY, "Sleeps outdoors")
    if step2.travel_caretaker:
        card.add(TRAVEL_CARETAKER_BONUS, "Travel caretaker plan")
    if NEGATIVE_HISTORY.matches(step2.prior_pets_outcome):
        card.add(-NEGATIVE_HISTORY_PENALTY, "Negative prior-pet history")


def _score_hour_caps(card: _Scorecard, rule: EffectiveRule, step2: Step2Snapshot) -> None:
    cap = rule.max_hours_away_per_week
    if cap is not None and step2.hours_away_per_week > cap:
        excess = step2.hours_away_per_week - cap
        card.add(-min(HOURS_AWAY_MAX_PENALTY, math.ceil(excess / HOURS_AWAY_PER_POINT)), "Weekly hours away over limit")

    cap = rule.max_hours_alone
    if cap is not None and step2.hours_alone_per_day is not None and step2.hours_alone_per_day > cap:
        excess = step2.hours_alone_per_day - cap
        card.add(-min(HOURS_ALONE_MAX_PENALTY, excess * HOURS_ALONE_POINTS_PER_HOUR), "Daily hours alone over limit")


def _score_dog(card: _Scorecard, step2: Step2Snapshot) -> None:
    if step2.will_leash:
        card.add(DOG_LEASH_BONUS, "Dog: leash commitment")
    if step2.id_tag_will_use:
        card.add(DOG_ID_TAG_BONUS, "Dog: ID tag")
    if step2.training_plan:
        card.add(DOG_TRAINING_BONUS, "Dog: training plan")
    if step2.social_plan:
        card.add(DOG_SOCIAL_BONUS, "Dog: socialization plan")
    if step2.yard_secure:
        card.add(DOG_SECURE_YARD_BONUS, "Dog: secure yard")


# ----------------------------
# Public API
# ----------------------------


def explain_application(
    pet: Pet,
    rule: AdoptionRule | None,
    step1: Step1Snapshot,
    step2: Step2Snapshot,
    step3: Step3Snapshot,
) -> EvaluationReport:
    """
    Evaluate an application and keep the trail of score contributions.

    The embedded `result` is identical to `evaluate_application` for the same inputs.
    """
    effective = resolve_effective_rule(rule)
    card = _Scorecard()

    _check_knockouts(card, pet, effective, step1, step2)

    _score_housing(card, step2)
    _score_lifestyle(card, step2)
    _score_environment(card, step2)
    _score_motivation(card, effective, step2)
    _score_commitments(card, effective, step3)
    _score_resources(card, step2)
    _score_family(card, effective, step3)
    _score_condo(card, step2)
    _score_free_text(card, step2)
    _score_hour_caps(card, effective, step2)
    if pet.species == Species.dog:
        _score_dog(card, step2)

    score = clamp_score(card.total)
    status = classify(score, card.knockouts)
    result = EvaluationResult(score=score, knockouts=tuple(card.knockouts), status=status)

    logger.debug("Evaluated application for %s: status=%s score=%d knockouts=%d", pet.slug, status.value, score, len(card.knockouts))
    return EvaluationReport(result=result, items=tuple(card.items), raw_score=card.total, rule=effective)


def evaluate_application(
    pet: Pet,
    rule: AdoptionRule | None,
    step1: Step1Snapshot,
    step2: Step2Snapshot,
    step3: Step3Snapshot,
) -> EvaluationResult:
    """Compute knockouts, clamped score and disposition for one application."""
    return explain_application(pet, rule, step1, step2, step3).result
