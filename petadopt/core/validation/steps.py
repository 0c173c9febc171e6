# petadopt/core/validation/steps.py
"""
Rule-dependent checks run on each step submission before it is accepted.

Structural checks (types, enums, ranges, lengths) live on the pydantic
snapshot models. The checks here depend on the pet's adoption rule and
collect every problem before raising, so the form can show them all at once.
"""

from __future__ import annotations

from petadopt.core.evaluation.defaults import resolve_effective_rule
from petadopt.core.validation.errors import StepValidationError
from petadopt.schemas.labels import Commitment
from petadopt.schemas.models import AdoptionRule, Step1Snapshot, Step2Snapshot, Step3Snapshot

MSG_PHONE_UNVERIFIED = "Debes verificar tu teléfono para continuar."
MSG_DOCUMENT_MISSING = "Falta adjuntar/confirmar: {doc}."
MSG_HOUSING_NOT_ALLOWED = "Tipo de vivienda no permitido para esta adopción"
MSG_COMMIT_REQUIRED = "Compromiso obligatorio no aceptado: {commitment}."
MSG_FAMILY_REQUIRED = "Se requiere el consentimiento de toda la familia."

_COMMITMENT_LABELS: dict[Commitment, str] = {
    Commitment.sterilization: "esterilización",
    Commitment.vaccines: "vacunas",
    Commitment.accept_contract: "contrato de adopción",
}


def validate_step1(step1: Step1Snapshot, rule: AdoptionRule | None = None) -> Step1Snapshot:
    effective = resolve_effective_rule(rule)
    problems: list[str] = []
    if not step1.phone_verified:
        problems.append(MSG_PHONE_UNVERIFIED)
    for doc in effective.required_documents:
        if not step1.docs_confirmed.get(doc):
            problems.append(MSG_DOCUMENT_MISSING.format(doc=doc))
    if problems:
        raise StepValidationError(1, problems)
    return step1


def validate_step2(step2: Step2Snapshot, rule: AdoptionRule | None = None) -> Step2Snapshot:
    """Housing must be one of the rule's allowed types when the rule lists any."""
    effective = resolve_effective_rule(rule)
    if effective.allowed_housing and step2.housing_type not in effective.allowed_housing:
        raise StepValidationError(2, [MSG_HOUSING_NOT_ALLOWED])
    return step2


def validate_step3(step3: Step3Snapshot, rule: AdoptionRule | None = None) -> Step3Snapshot:
    """Mandatory commitments and, when required, family consent must be given."""
    effective = resolve_effective_rule(rule)
    problems = [
        MSG_COMMIT_REQUIRED.format(commitment=_COMMITMENT_LABELS[c])
        for c in Commitment
        if effective.requires(c) and not step3.given(c)
    ]
    if effective.require_family_consent and step3.family_agrees is not True:
        problems.append(MSG_FAMILY_REQUIRED)
    if problems:
        raise StepValidationError(3, problems)
    return step3


__all__ = ["validate_step1", "validate_step2", "validate_step3"]
