# petadopt/core/evaluation/__init__.py

from .defaults import resolve_effective_rule
from .engine import classify, clamp_score, evaluate_application, explain_application
from .phrases import INDOOR_SLEEP, NEGATIVE_HISTORY, OUTDOOR_SLEEP, PHRASES_VERSION, PhraseList

__all__ = [
    "evaluate_application",
    "explain_application",
    "resolve_effective_rule",
    "classify",
    "clamp_score",
    "PhraseList",
    "PHRASES_VERSION",
    "INDOOR_SLEEP",
    "OUTDOOR_SLEEP",
    "NEGATIVE_HISTORY",
]
