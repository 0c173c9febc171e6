# petadopt/schemas/labels.py
from __future__ import annotations

from enum import Enum

# =========================
# Canonical label enums
# =========================


class Species(str, Enum):
    dog = "dog"
    cat = "cat"


class HousingType(str, Enum):
    own = "own"
    rent = "rent"
    with_family = "with_family"
    other = "other"


class PetEnvironment(str, Enum):
    indoor = "indoor"
    indoor_with_enclosed = "indoor_with_enclosed"
    free_roam = "free_roam"


class OtherPets(str, Enum):
    none = "none"
    cat = "cat"
    dog = "dog"
    both = "both"


class AgeBracket(str, Enum):
    """Coarse applicant age; each value is the minimum real age of the bracket."""

    y18 = "18"
    y21 = "21"
    y25 = "25"
    y30 = "30"
    y35 = "35"
    y40 = "40"
    y45 = "45"
    y50 = "50"

    @property
    def min_age(self) -> int:
        return int(self.value)


class BudgetBracket(str, Enum):
    b100_200 = "100-200"
    b200_300 = "200-300"
    b300_400 = "300-400"
    b400_500 = "400-500"
    b500_plus = "500+"


class Commitment(str, Enum):
    sterilization = "sterilization"
    vaccines = "vaccines"
    accept_contract = "accept_contract"


class ApplicationStatus(str, Enum):
    draft = "draft"
    rejected = "rejected"
    review = "review"
    interview = "interview"


# Dispositions the evaluation engine may emit (draft is a flow-only state)
DISPOSITIONS: tuple[ApplicationStatus, ...] = (
    ApplicationStatus.rejected,
    ApplicationStatus.review,
    ApplicationStatus.interview,
)

__all__ = [
    "Species",
    "HousingType",
    "PetEnvironment",
    "OtherPets",
    "AgeBracket",
    "BudgetBracket",
    "Commitment",
    "ApplicationStatus",
    "DISPOSITIONS",
]
