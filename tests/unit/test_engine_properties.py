# tests/unit/test_engine_properties.py
import itertools

import pytest
from pydantic import ValidationError

from petadopt.core.evaluation import evaluate_application, explain_application
from petadopt.schemas.labels import ApplicationStatus
from petadopt.schemas.models import AdoptionRule, EvaluationResult
from tests import make_pet, make_rule, make_step1, make_step2, make_step3


def test_absent_rule_and_empty_rule_agree(evaluate):
    variants = [
        {},
        {"housing_type": "rent"},
        {"pet_environment": "free_roam"},
        {"motivation": "corta"},
        {"other_pets": "both", "condo_allows_pets": False},
    ]
    for step2 in variants:
        assert evaluate(rule=None, step2=step2) == evaluate(rule=AdoptionRule(), step2=step2)


def test_worst_case_clamps_to_zero(evaluate):
    result = evaluate(
        rule=make_rule(require_family_consent=True),
        step2={
            "housing_type": "rent",
            "hours_away_per_week": 168,
            "pet_environment": "free_roam",
            "motivation": "",
            "monthly_budget": "100-200",
            "condo_allows_pets": False,
            "sleep_location": "azotea",
            "prior_pets_outcome": "abandono",
        },
        step3={"commit_sterilization": False, "commit_vaccines": False, "accept_contract": False},
    )
    assert result.score == 0
    assert result.status == ApplicationStatus.rejected


def test_score_is_always_a_bounded_integer():
    rules = [None, make_rule(max_hours_away_per_week=10, max_hours_alone=2, require_commits=["vaccines"], require_family_consent=True)]
    pets = [make_pet("cat"), make_pet("dog")]
    step2_grid = itertools.product(
        ["own", "rent", "with_family", "other"],
        [0, 25.5, 90, 168],
        ["indoor", "indoor_with_enclosed", "free_roam"],
        [None, True, False],
        ["", "m" * 500],
    )
    for housing, hours, env, flag, motivation in step2_grid:
        step2 = make_step2(
            housing_type=housing,
            hours_away_per_week=hours,
            pet_environment=env,
            condo_allows_pets=flag,
            yard_secure=flag,
            will_leash=flag,
            hours_alone_per_day=12,
            motivation=motivation,
        )
        for pet, rule in itertools.product(pets, rules):
            result = evaluate_application(pet, rule, make_step1(), step2, make_step3(family_agrees=flag))
            assert isinstance(result.score, int)
            assert 0 <= result.score <= 100
            if result.knockouts:
                assert result.status == ApplicationStatus.rejected


def test_hours_away_over_cap_strictly_decreases_score_until_penalty_cap(evaluate):
    # Past 60 hours the lifestyle term is constant, so only the cap penalty moves.
    rule = make_rule(max_hours_away_per_week=60)
    scores = [evaluate(rule=rule, step2={"hours_away_per_week": 60 + 4 * k - 3}).score for k in range(1, 26)]
    assert all(a > b for a, b in zip(scores, scores[1:], strict=False))
    assert scores[0] == 79 - 1
    assert scores[-1] == 79 - 25

    capped = {evaluate(rule=rule, step2={"hours_away_per_week": h}).score for h in (157, 160, 164, 168)}
    assert capped == {79 - 25}


def test_hours_away_penalty_steps(explain):
    rule = make_rule(max_hours_away_per_week=20)
    label = "Weekly hours away over limit"
    assert [it.points for it in explain(rule=rule, step2={"hours_away_per_week": 21}).items if it.label == label] == [-1]
    assert [it.points for it in explain(rule=rule, step2={"hours_away_per_week": 28}).items if it.label == label] == [-2]
    assert [it.points for it in explain(rule=rule, step2={"hours_away_per_week": 20}).items if it.label == label] == []


def test_explain_matches_evaluate():
    args = (
        make_pet("dog"),
        make_rule(require_commits=["sterilization"], max_hours_away_per_week=30),
        make_step1(age_bracket="21"),
        make_step2(hours_away_per_week=44, will_leash=True, sleep_location="sala", condo_allows_pets=True),
        make_step3(commit_sterilization=False),
    )
    report = explain_application(*args)
    assert report.result == evaluate_application(*args)
    assert report.raw_score == pytest.approx(sum(it.points for it in report.items))


def test_result_is_immutable(evaluate):
    result = evaluate()
    with pytest.raises(ValidationError):
        result.score = 0


def test_result_rejects_draft_status():
    with pytest.raises(ValidationError):
        EvaluationResult(score=50, knockouts=(), status=ApplicationStatus.draft)
