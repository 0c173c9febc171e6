# main.py
"""
Entry Point: Pet Adoption Application Evaluator

Purpose
-------
Evaluate one adoption application end-to-end and write the outcome:
  1) Load the application bundle (sample defaults or --config JSON).
  2) Run the three-step flow (rule-dependent validation per step).
  3) Evaluate the accumulated snapshot once and write a Markdown staff
     report or the JSON record the caller would persist.

Usage
-----
    python main.py
    python main.py --config data/sample/application.json --out report.md
    python main.py --config application.json --format json --out result.json
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from petadopt.core.evaluation import explain_application
from petadopt.core.validation import StepValidationError
from petadopt.inputs.inputs import ApplicationBundle, ApplicationLoader, RunOptions
from petadopt.orchestrator.flow import run_application
from petadopt.reports.generator import write_report
from petadopt.schemas.models import (
    AdoptionRule,
    Pet,
    Step1Snapshot,
    Step2Snapshot,
    Step3Snapshot,
)

logger = logging.getLogger("petadopt")


def build_sample_bundle() -> ApplicationBundle:
    """Return a demo application: a dog adopter in their own home."""
    return ApplicationBundle(
        pet=Pet(id="pet-001", slug="rocky-beagle", name="Rocky", species="dog"),
        rule=AdoptionRule(
            require_commits=["sterilization", "vaccines"],
            max_hours_away_per_week=45,
            require_fenced_or_secure=True,
        ),
        step1=Step1Snapshot(
            name="Ana Martínez",
            email="ana@example.com",
            phone="5512345678",
            city="Monterrey",
            age_bracket="30",
            phone_verified=True,
        ),
        step2=Step2Snapshot(
            housing_type="own",
            hours_away_per_week=40,
            pet_environment="indoor_with_enclosed",
            other_pets="none",
            motivation=(
                "Queremos darle un hogar estable a un perro adulto. Tenemos patio cerrado, "
                "horarios flexibles y experiencia previa con perros rescatados."
            ),
            sleep_location="Dentro de casa, en la sala",
            travel_caretaker="Mi hermana vive a dos cuadras",
            yard_secure=True,
            will_leash=True,
            will_not_tether=True,
            id_tag_will_use=True,
            monthly_budget="400-500",
            has_vet=True,
        ),
        step3=Step3Snapshot(commit_sterilization=True, commit_vaccines=True, accept_contract=True),
        run=RunOptions(),
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pet Adoption Application Evaluator")
    p.add_argument("--config", type=str, default=None, help="Path to a JSON application bundle.")
    p.add_argument("--out", type=str, default=None, help="Output path (overrides config).")
    p.add_argument("--format", type=str, default=None, choices=["markdown", "json"], help="Output format (overrides config).")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Evaluate the application and write the outcome. Returns a process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    loader = ApplicationLoader()
    bundle = loader.load(args.config) if args.config else build_sample_bundle()
    bundle = loader.with_overrides(bundle, out=args.out, format=args.format)

    try:
        draft = run_application(bundle.pet, bundle.rule, bundle.step1, bundle.step2, bundle.step3)
    except StepValidationError as e:
        logger.error("Application rejected at step %d", e.step)
        for problem in e.problems:
            print(f"  - {problem}")
        return 2

    out_path = Path(bundle.run.out)
    if bundle.run.format == "json":
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(draft.model_dump(mode="json"), ensure_ascii=False, indent=2), encoding="utf-8")
    else:
        report = explain_application(bundle.pet, bundle.rule, bundle.step1, bundle.step2, bundle.step3)
        write_report(out_path, bundle.pet, report)

    print(f"Report written to {out_path}")
    print(f"Disposition: {draft.status.value} (score {draft.result.score})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
