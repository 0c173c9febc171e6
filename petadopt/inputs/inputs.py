# petadopt/inputs/inputs.py
"""
Inputs loader for the adoption application evaluator.

Goals
-----
- File-first inputs validated with Pydantic.
- One JSON bundle carries the pet, its (optional) adoption rule, the three
  step submissions and run options.
- Minimal environment-variable overrides for CI/CLI convenience.

Supported JSON shape
--------------------
    {
      "pet":   {"id": "p1", "slug": "luna", "name": "Luna", "species": "cat"},
      "rule":  {"min_age_years": 21, ...},          # optional / null
      "step1": {"name": "...", "ageBracket": "25", ...},
      "step2": {"housingType": "own", ...},
      "step3": {"commitSterilization": true, ...},
      "run":   {"out": "application_report.md", "format": "markdown"}
    }

Step payloads accept the form's camelCase keys or snake_case field names.

Environment overrides (optional)
--------------------------------
- PETADOPT_OUT     -> ApplicationBundle.run.out
- PETADOPT_FORMAT  -> ApplicationBundle.run.format ("markdown" | "json")
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, cast

from pydantic import BaseModel, Field, ValidationError

from petadopt.schemas.models import AdoptionRule, Pet, Step1Snapshot, Step2Snapshot, Step3Snapshot

OutputFormat = Literal["markdown", "json"]
_FORMATS: tuple[str, ...] = ("markdown", "json")

# ----------------------------
# Pydantic models for structured inputs
# ----------------------------


class RunOptions(BaseModel):
    """Runtime options controlling where and how the outcome is written."""

    out: str = Field("application_report.md", description="Path to write the report.")
    format: OutputFormat = Field("markdown", description='Output format: "markdown" or "json".')


class ApplicationBundle(BaseModel):
    """Everything needed to evaluate one application."""

    pet: Pet
    rule: AdoptionRule | None = None
    step1: Step1Snapshot
    step2: Step2Snapshot
    step3: Step3Snapshot
    run: RunOptions = RunOptions()


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class ApplicationLoader:
    """
    File-first bundle loader with light env overrides.

    Default search (when path=None):
        1) ./data/sample/application.json
        2) ./application.json
    """

    env_prefix: str = "PETADOPT_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> ApplicationBundle:
        p = self._resolve_path(path)
        raw = self._read_json_file(p)
        bundle = self._parse_root(raw)
        return self._apply_env_overrides(bundle)

    def load_json(self, text: str) -> ApplicationBundle:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        bundle = self._parse_root(raw)
        return self._apply_env_overrides(bundle)

    def with_overrides(
        self,
        bundle: ApplicationBundle,
        *,
        out: str | None = None,
        format: str | None = None,
    ) -> ApplicationBundle:
        """Return a *new* bundle with non-null run overrides applied."""
        updates: dict[str, Any] = {}
        if out is not None:
            updates["out"] = out
        if format is not None:
            updates["format"] = self._normalize_format(format)

        if not updates:
            return bundle

        run_new = bundle.run.model_copy(update=updates)
        return bundle.model_copy(update={"run": run_new})

    # ---------- Internals ----------

    def _resolve_path(self, path: str | Path | None) -> Path:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise FileNotFoundError(f"Application file not found: {p}")
            return p

        for candidate in (Path("data/sample/application.json"), Path("application.json")):
            if candidate.exists():
                return candidate
        raise FileNotFoundError(
            "No application path provided and no default found. Looked for ./data/sample/application.json and ./application.json."
        )

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported application format for {p.name}; only .json is supported.")
        try:
            return cast(dict[str, Any], json.loads(p.read_text(encoding="utf-8")))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e

    def _parse_root(self, data: Any) -> ApplicationBundle:
        if not isinstance(data, dict):
            raise ValueError("Application payload must be a JSON object.")
        try:
            return ApplicationBundle.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Application validation failed:\n{e}") from e

    def _normalize_format(self, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _FORMATS:
            raise ValueError(f"Unsupported output format {value!r}; expected one of {_FORMATS}.")
        return normalized

    def _apply_env_overrides(self, bundle: ApplicationBundle) -> ApplicationBundle:
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        out = os.getenv(f"{prefix}OUT")
        if out:
            updates["out"] = out

        fmt = os.getenv(f"{prefix}FORMAT")
        if fmt:
            normalized = fmt.strip().lower()
            # Ignore bad values; keep the validated format
            if normalized in _FORMATS:
                updates["format"] = normalized

        if not updates:
            return bundle

        run_new = bundle.run.model_copy(update=updates)
        return bundle.model_copy(update={"run": run_new})


# ----------------------------
# Convenience function
# ----------------------------


def load_application(path: str | Path | None = None) -> ApplicationBundle:
    """Convenience wrapper for one-shot callers."""
    return ApplicationLoader().load(path)
