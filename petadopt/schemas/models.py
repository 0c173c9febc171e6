# petadopt/schemas/models.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from petadopt.schemas.labels import (
    DISPOSITIONS,
    AgeBracket,
    ApplicationStatus,
    BudgetBracket,
    Commitment,
    HousingType,
    OtherPets,
    PetEnvironment,
    Species,
)

# Step snapshots arrive from the web forms with camelCase keys; accept both spellings.
_FORM_CONFIG = ConfigDict(frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True)

# =========================
# Pet & adoption rules
# =========================


class Pet(BaseModel):
    """The animal being adopted. Only `species` affects evaluation."""

    id: str = Field(..., description="Backend identifier of the pet.")
    slug: str = Field(..., description="Public slug used in adoption URLs.")
    name: str = Field(..., description="Display name.")
    species: Species = Field(..., description='Either "dog" or "cat"; gates dog-only rules.')

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __str__(self) -> str:
        return f"{self.name} ({self.species.value}, {self.slug})"


class AdoptionRule(BaseModel):
    """
    Per-pet adoption policy as stored by the shelter.

    Every knob is optional; `None` means "not configured" and is resolved to the
    documented default by `resolve_effective_rule`. No cross-field consistency
    is enforced: each knob is read independently.
    """

    allowed_housing: list[HousingType] | None = Field(None, description="Permitted housing types; empty/None = all.")
    require_commits: list[Commitment] | None = Field(None, description="Commitments that are mandatory instead of merely scored.")
    min_age_years: int | None = Field(None, ge=0, description="Minimum applicant age (default 18).")
    require_landlord_permission: bool | None = Field(None, description="Renters need landlord permission (default True).")
    disallow_free_roam: bool | None = Field(None, description="Reject 100% outdoor environments (default True).")
    max_hours_away_per_week: float | None = Field(None, ge=0, description="Soft cap on weekly hours away; None = no cap.")
    max_hours_alone: float | None = Field(None, ge=0, description="Soft cap on daily hours alone; None = no cap.")
    require_home_visit: bool | None = Field(None, description="Dogs only: failed home visit is a knockout (default False).")
    require_fenced_or_secure: bool | None = Field(None, description="Dogs only: insecure yard is a knockout (default False).")
    forbid_tethering: bool | None = Field(None, description="Dogs only: tethering is a knockout (default True).")
    min_motivation_chars: int | None = Field(None, ge=0, description="Motivation length threshold (default 120).")
    accepts_other_cats: bool | None = Field(None, description="False = conflict if the applicant has cats.")
    accepts_other_dogs: bool | None = Field(None, description="False = conflict if the applicant has dogs.")
    require_family_consent: bool | None = Field(None, description="Household consent is mandatory (default False).")
    required_documents: list[str] | None = Field(None, description="Document types to confirm at step 1 (e.g. 'ine').")

    model_config = ConfigDict(frozen=True, extra="ignore")


class EffectiveRule(BaseModel):
    """
    Fully defaulted adoption rule. Produced once per evaluation; the scoring
    pass reads only these resolved fields.
    """

    allowed_housing: tuple[HousingType, ...] = ()
    require_commits: frozenset[Commitment] = frozenset()
    min_age_years: int = 18
    require_landlord_permission: bool = True
    disallow_free_roam: bool = True
    max_hours_away_per_week: float | None = None
    max_hours_alone: float | None = None
    require_home_visit: bool = False
    require_fenced_or_secure: bool = False
    forbid_tethering: bool = True
    min_motivation_chars: int = 120
    accepts_other_cats: bool | None = None
    accepts_other_dogs: bool | None = None
    require_family_consent: bool = False
    required_documents: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    def requires(self, commitment: Commitment) -> bool:
        return commitment in self.require_commits

    def summary(self) -> str:
        housing = ", ".join(h.value for h in self.allowed_housing) or "any"
        commits = ", ".join(sorted(c.value for c in self.require_commits)) or "none"
        return (
            f"[EffectiveRule] min_age={self.min_age_years} | housing={housing} | commits={commits} | "
            f"landlord={self.require_landlord_permission} | no_free_roam={self.disallow_free_roam} | "
            f"min_motivation={self.min_motivation_chars}"
        )

    def __str__(self) -> str:
        return self.summary()


# =========================
# Applicant steps
# =========================


class Step1Snapshot(BaseModel):
    """Applicant identity (step 1). Only `age_bracket` feeds evaluation."""

    name: str = Field(..., min_length=3)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=8, max_length=20)
    city: str = Field(..., min_length=2)
    age_bracket: AgeBracket = Field(..., description="Coarse age category; its value is the minimum real age.")
    occupation: str | None = Field(None, max_length=80)
    address: str | None = Field(None, max_length=160)
    household_count: int | None = Field(None, ge=1, le=12)
    household_ages: str | None = Field(None, max_length=120)
    phone_verified: bool = Field(False, description="Whether the phone OTP was verified.")
    docs_confirmed: dict[str, bool] = Field(default_factory=dict, description="Document type -> confirmed by applicant.")

    model_config = _FORM_CONFIG

    @field_validator("email")
    @classmethod
    def _email_shape(cls, v: str) -> str:
        local, _, domain = v.partition("@")
        if not local or "." not in domain:
            raise ValueError(f"invalid email address: {v!r}")
        return v


class Step2Snapshot(BaseModel):
    """Living situation (step 2)."""

    housing_type: HousingType
    landlord_allows_pets: bool = Field(False, description="Only meaningful when housing_type is rent.")
    hours_away_per_week: float = Field(..., ge=0, le=168)
    pet_environment: PetEnvironment
    other_pets: OtherPets = OtherPets.none
    motivation: str = Field("", max_length=5000)

    condo_allows_pets: bool | None = None
    prior_pets_experience: str | None = Field(None, max_length=2000)
    prior_pets_outcome: str | None = Field(None, max_length=2000, description="Free text scanned for red-flag phrases.")
    sleep_location: str | None = Field(None, max_length=200, description="Free text scanned for indoor/outdoor keywords.")
    travel_caretaker: str | None = Field(None, max_length=200)
    hours_alone_per_day: float | None = Field(None, ge=0, le=24)

    # dog-specific bundle
    yard_secure: bool | None = None
    will_leash: bool | None = None
    will_not_tether: bool | None = None
    id_tag_will_use: bool | None = None
    training_plan: str | None = Field(None, max_length=200)
    social_plan: str | None = Field(None, max_length=200)

    monthly_budget: BudgetBracket | None = None
    has_vet: bool | None = None
    vet_contact: str | None = Field(None, max_length=200)
    children_youngest_age: int | None = Field(None, ge=0, le=18)

    home_visit_ok: bool | None = Field(None, description="Home-visit outcome; None = not visited yet.")

    model_config = _FORM_CONFIG

    @property
    def has_cats(self) -> bool:
        return self.other_pets in (OtherPets.cat, OtherPets.both)

    @property
    def has_dogs(self) -> bool:
        return self.other_pets in (OtherPets.dog, OtherPets.both)


class Step3Snapshot(BaseModel):
    """Commitments given at submission time (step 3)."""

    commit_sterilization: bool = False
    commit_vaccines: bool = False
    accept_contract: bool = False
    family_agrees: bool | None = None

    model_config = _FORM_CONFIG

    def given(self, commitment: Commitment) -> bool:
        return {
            Commitment.sterilization: self.commit_sterilization,
            Commitment.vaccines: self.commit_vaccines,
            Commitment.accept_contract: self.accept_contract,
        }[commitment]


# =========================
# Evaluation outputs
# =========================


class EvaluationResult(BaseModel):
    """Sole output of the evaluation engine; persisted verbatim by the caller."""

    score: int = Field(..., ge=0, le=100, description="Suitability score, clamped to [0, 100].")
    knockouts: tuple[str, ...] = Field(default_factory=tuple, description="Ordered human-readable violations.")
    status: ApplicationStatus = Field(..., description="rejected | review | interview")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("status")
    @classmethod
    def _is_disposition(cls, v: ApplicationStatus) -> ApplicationStatus:
        if v not in DISPOSITIONS:
            raise ValueError(f"status must be one of {[d.value for d in DISPOSITIONS]}, got {v.value!r}")
        return v

    @property
    def knocked_out(self) -> bool:
        return bool(self.knockouts)

    def summary(self) -> str:
        base = f"[EvaluationResult] status={self.status.value} | score={self.score}"
        if self.knockouts:
            base += " | knockouts: " + "; ".join(self.knockouts)
        return base

    def __str__(self) -> str:
        return self.summary()


class ScoreItem(BaseModel):
    """One non-zero contribution to the raw score."""

    label: str
    points: float

    model_config = ConfigDict(frozen=True, extra="ignore")


class EvaluationReport(BaseModel):
    """Evaluation result plus the trail of how the score was reached."""

    result: EvaluationResult
    items: tuple[ScoreItem, ...] = ()
    raw_score: float = Field(..., description="Score before rounding and clamping.")
    rule: EffectiveRule

    model_config = ConfigDict(frozen=True, extra="ignore")

    def summary(self) -> str:
        lines = [self.result.summary(), f"  raw={self.raw_score:.2f}"]
        for it in self.items:
            lines.append(f"  {it.points:+.2f}  {it.label}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()


# =========================
# Application lifecycle
# =========================


class ApplicationDraft(BaseModel):
    """
    Accumulated three-step submission for one pet. Immutable: each step
    submission yields a new draft.
    """

    pet_slug: str
    step1: Step1Snapshot | None = None
    step2: Step2Snapshot | None = None
    step3: Step3Snapshot | None = None
    status: ApplicationStatus = ApplicationStatus.draft
    result: EvaluationResult | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def next_step(self) -> int | None:
        """1, 2 or 3 for the next expected step; None once evaluated."""
        if self.result is not None:
            return None
        if self.step1 is None:
            return 1
        if self.step2 is None:
            return 2
        return 3

    @property
    def evaluated(self) -> bool:
        return self.result is not None
