# petadopt/core/evaluation/defaults.py

from __future__ import annotations

from typing import Any

from petadopt.schemas.models import AdoptionRule, EffectiveRule

# Knob -> documented default
_DEFAULTS: dict[str, Any] = {name: field.default for name, field in EffectiveRule.model_fields.items()}

_CONVERTERS = {
    "allowed_housing": tuple,
    "require_commits": frozenset,
    "required_documents": tuple,
}


def resolve_effective_rule(rule: AdoptionRule | None) -> EffectiveRule:
    """
    Resolve every knob of `rule` to a concrete value.

    A missing rule and a rule whose knob is explicitly None both yield the
    documented default for that knob; defaults are policy, not "no effect".
    """
    if rule is None:
        return EffectiveRule()

    values: dict[str, Any] = {}
    for key, default in _DEFAULTS.items():
        configured = getattr(rule, key)
        if configured is None:
            values[key] = default
            continue
        convert = _CONVERTERS.get(key)
        values[key] = convert(configured) if convert else configured
    return EffectiveRule(**values)


__all__ = ["resolve_effective_rule"]
