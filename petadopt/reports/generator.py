# petadopt/reports/generator.py
from __future__ import annotations

from pathlib import Path

from petadopt.schemas.models import EffectiveRule, EvaluationReport, Pet, ScoreItem

_STATUS_TITLES = {
    "interview": "Interview",
    "review": "Needs review",
    "rejected": "Rejected",
}


def _fmt_points(x: float) -> str:
    """
    Signed points with up to two decimals, no trailing zeros.

    Example:
        5 -> +5
        -6.666 -> -6.67
    """
    return f"{x:+.2f}".rstrip("0").rstrip(".")


def _section(title: str) -> str:
    return f"\n## {title}\n"


def _render_header(pet: Pet, report: EvaluationReport) -> str:
    result = report.result
    lines = [
        f"# Adoption Application: {pet.name}",
        "",
        f"- **Pet:** {pet.name} ({pet.species.value}) `{pet.slug}`",
        f"- **Disposition:** {_STATUS_TITLES[result.status.value]}",
        f"- **Score:** {result.score} / 100",
    ]
    return "\n".join(lines) + "\n"


def _render_knockouts(knockouts: tuple[str, ...]) -> str:
    if not knockouts:
        return _section("Knockouts") + "\nNone.\n"
    body = [_section("Knockouts"), ""]
    body += [f"- {k}" for k in knockouts]
    return "\n".join(body) + "\n"


def _render_breakdown(items: tuple[ScoreItem, ...], raw_score: float, score: int) -> str:
    header = [
        _section("Score Breakdown"),
        "| Factor | Points |",
        "|---|---:|",
    ]
    rows = [f"| {it.label} | {_fmt_points(it.points)} |" for it in items]
    rows.append(f"| **Raw total** | {_fmt_points(raw_score)} |")
    rows.append(f"| **Final (rounded, 0-100)** | {score} |")
    return "\n".join(header + rows) + "\n"


def _render_rule(rule: EffectiveRule) -> str:
    def cap(x: float | None) -> str:
        return "no cap" if x is None else f"{x:g}"

    def flag(x: bool | None) -> str:
        return "not set" if x is None else ("yes" if x else "no")

    lines = [
        _section("Adoption Rule Applied"),
        f"- Minimum age: {rule.min_age_years}",
        f"- Allowed housing: {', '.join(h.value for h in rule.allowed_housing) or 'any'}",
        f"- Required commitments: {', '.join(sorted(c.value for c in rule.require_commits)) or 'none'}",
        f"- Landlord permission required: {flag(rule.require_landlord_permission)}",
        f"- Free roam disallowed: {flag(rule.disallow_free_roam)}",
        f"- Max hours away / week: {cap(rule.max_hours_away_per_week)}",
        f"- Max hours alone / day: {cap(rule.max_hours_alone)}",
        f"- Minimum motivation length: {rule.min_motivation_chars} chars",
        f"- Accepts other cats: {flag(rule.accepts_other_cats)}",
        f"- Accepts other dogs: {flag(rule.accepts_other_dogs)}",
        f"- Family consent required: {flag(rule.require_family_consent)}",
    ]
    return "\n".join(lines) + "\n"


def generate_report(pet: Pet, report: EvaluationReport) -> str:
    """Render a Markdown summary of one evaluated application for shelter staff."""
    parts = [
        _render_header(pet, report),
        _render_knockouts(report.result.knockouts),
        _render_breakdown(report.items, report.raw_score, report.result.score),
        _render_rule(report.rule),
    ]
    return "".join(parts)


def write_report(path: str | Path, pet: Pet, report: EvaluationReport) -> Path:
    """Write the Markdown report to `path` (parent directories are created)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(generate_report(pet, report), encoding="utf-8")
    return p
