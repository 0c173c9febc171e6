# tests/utils.py
"""
Single source of truth for test data, factories, and canonical payloads.
Update values here to cascade across the test suite.

The baseline application (cat, no rule, own home, indoor, 150-char motivation,
all three commitments, nothing else) scores:
    20 housing + 10 secure housing + 20 time at home + 25 indoor
    + 9 motivation + 15 commitments = 99
"""

from __future__ import annotations

from typing import Any

from petadopt.schemas.models import (
    AdoptionRule,
    Pet,
    Step1Snapshot,
    Step2Snapshot,
    Step3Snapshot,
)

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_MOTIVATION = "M" * 150
BASELINE_SCORE = 99

DEFAULT_STEP1: dict[str, Any] = {
    "name": "Laura Gómez",
    "email": "laura@example.com",
    "phone": "5511122233",
    "city": "Guadalajara",
    "age_bracket": "25",
    "phone_verified": True,
}

DEFAULT_STEP2: dict[str, Any] = {
    "housing_type": "own",
    "landlord_allows_pets": False,
    "hours_away_per_week": 0,
    "pet_environment": "indoor",
    "other_pets": "none",
    "motivation": DEFAULT_MOTIVATION,
}

DEFAULT_STEP3: dict[str, Any] = {
    "commit_sterilization": True,
    "commit_vaccines": True,
    "accept_contract": True,
}

# -----------------------------
# Factories
# -----------------------------


def make_pet(species: str = "cat", slug: str | None = None, name: str | None = None) -> Pet:
    return Pet(
        id=f"pet-{species}",
        slug=slug or f"test-{species}",
        name=name or ("Luna" if species == "cat" else "Max"),
        species=species,
    )


def make_rule(**overrides: Any) -> AdoptionRule:
    return AdoptionRule(**overrides)


def make_step1(**overrides: Any) -> Step1Snapshot:
    return Step1Snapshot(**{**DEFAULT_STEP1, **overrides})


def make_step2(**overrides: Any) -> Step2Snapshot:
    return Step2Snapshot(**{**DEFAULT_STEP2, **overrides})


def make_step3(**overrides: Any) -> Step3Snapshot:
    return Step3Snapshot(**{**DEFAULT_STEP3, **overrides})


def make_bundle_payload(**sections: Any) -> dict[str, Any]:
    """JSON-ready application bundle using the forms' camelCase keys."""
    payload: dict[str, Any] = {
        "pet": {"id": "pet-cat", "slug": "test-cat", "name": "Luna", "species": "cat"},
        "rule": None,
        "step1": {
            "name": "Laura Gómez",
            "email": "laura@example.com",
            "phone": "5511122233",
            "city": "Guadalajara",
            "ageBracket": "25",
            "phoneVerified": True,
        },
        "step2": {
            "housingType": "own",
            "hoursAwayPerWeek": 0,
            "petEnvironment": "indoor",
            "otherPets": "none",
            "motivation": DEFAULT_MOTIVATION,
        },
        "step3": {"commitSterilization": True, "commitVaccines": True, "acceptContract": True},
    }
    payload.update(sections)
    return payload
