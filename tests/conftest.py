# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from petadopt.core.evaluation import evaluate_application, explain_application
from tests.utils import make_bundle_payload, make_pet, make_step1, make_step2, make_step3


# -------- Environment isolation --------
@pytest.fixture(autouse=True)
def _clear_petadopt_env(monkeypatch):
    monkeypatch.delenv("PETADOPT_OUT", raising=False)
    monkeypatch.delenv("PETADOPT_FORMAT", raising=False)
    yield


# -------- Domain fixtures --------
@pytest.fixture
def cat():
    return make_pet("cat")


@pytest.fixture
def dog():
    return make_pet("dog")


@pytest.fixture
def evaluate():
    """
    Factory: evaluate the baseline application with per-step overrides.

    Usage:
        result = evaluate(pet=dog, rule=make_rule(...), step2={"yard_secure": False})
    """

    def _factory(*, pet=None, rule=None, step1=None, step2=None, step3=None):
        return evaluate_application(
            pet or make_pet("cat"),
            rule,
            make_step1(**(step1 or {})),
            make_step2(**(step2 or {})),
            make_step3(**(step3 or {})),
        )

    return _factory


@pytest.fixture
def explain():
    """Same as `evaluate`, returning the EvaluationReport with the score trail."""

    def _factory(*, pet=None, rule=None, step1=None, step2=None, step3=None):
        return explain_application(
            pet or make_pet("cat"),
            rule,
            make_step1(**(step1 or {})),
            make_step2(**(step2 or {})),
            make_step3(**(step3 or {})),
        )

    return _factory


@pytest.fixture
def bundle_file(tmp_path: Path):
    """
    Callable factory writing an application bundle JSON into tmp_path.

    Usage:
        path = bundle_file(rule={"min_age_years": 21})
    """

    def _factory(filename: str = "application.json", **sections) -> Path:
        p = tmp_path / filename
        p.write_text(json.dumps(make_bundle_payload(**sections), ensure_ascii=False), encoding="utf-8")
        return p

    return _factory
