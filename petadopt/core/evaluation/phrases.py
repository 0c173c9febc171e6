# petadopt/core/evaluation/phrases.py
"""
Keyword and phrase lists scanned in applicants' free-text answers.

Matching is a case-insensitive substring test. Lists are static data with a
version tag so a change to the wording can be tracked and tested without
touching the scoring pass.
"""

from __future__ import annotations

from dataclasses import dataclass

PHRASES_VERSION = "2025.1"


@dataclass(frozen=True)
class PhraseList:
    name: str
    phrases: tuple[str, ...]
    version: str = PHRASES_VERSION

    def matches(self, text: str | None) -> bool:
        """True if any phrase occurs in `text` (case-insensitive). Empty text never matches."""
        if not text:
            return False
        haystack = text.lower()
        return any(p.lower() in haystack for p in self.phrases)

    def found(self, text: str | None) -> list[str]:
        """Phrases present in `text`, in list order."""
        if not text:
            return []
        haystack = text.lower()
        return [p for p in self.phrases if p.lower() in haystack]


# Where the pet will sleep
INDOOR_SLEEP = PhraseList(
    name="indoor_sleep",
    phrases=("interior", "habitación", "sala"),
)

OUTDOOR_SLEEP = PhraseList(
    name="outdoor_sleep",
    phrases=("exterior", "azotea", "patio abierto"),
)

# What happened to previous pets; any hit is a single flat penalty
NEGATIVE_HISTORY = PhraseList(
    name="negative_history",
    phrases=(
        "abandono",
        "regalé",
        "regale",
        "perdí",
        "perdi",
        "murió por envenenamiento",
        "murio por envenenamiento",
        "lo dejé",
        "lo deje",
        "lo soltamos",
        "se escapó",
        "se escapo",
        "lo entregué",
        "lo entregue",
        "maltrato",
        "maltrató",
        "maltrato animal",
        "maltrato a un animal",
        "no lo cuidé",
        "no lo cuide",
        "no podía con él",
        "no podia con él",
        "problemas económicos",
        "problemas economicos",
        "problemas de espacio",
        "problemas de tiempo",
        "alergia",
    ),
)

__all__ = ["PHRASES_VERSION", "PhraseList", "INDOOR_SLEEP", "OUTDOOR_SLEEP", "NEGATIVE_HISTORY"]
