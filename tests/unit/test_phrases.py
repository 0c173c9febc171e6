# tests/unit/test_phrases.py
import pytest

from petadopt.core.evaluation import INDOOR_SLEEP, NEGATIVE_HISTORY, OUTDOOR_SLEEP, PHRASES_VERSION, PhraseList


def test_lists_carry_version():
    for lst in (INDOOR_SLEEP, OUTDOOR_SLEEP, NEGATIVE_HISTORY):
        assert lst.version == PHRASES_VERSION
        assert lst.phrases


@pytest.mark.parametrize("text", [None, ""])
def test_empty_text_never_matches(text):
    assert not NEGATIVE_HISTORY.matches(text)
    assert NEGATIVE_HISTORY.found(text) == []


def test_matching_is_case_insensitive_substring():
    assert INDOOR_SLEEP.matches("Duerme en la SALA")
    assert OUTDOOR_SLEEP.matches("en el Patio Abierto de atrás")
    assert not OUTDOOR_SLEEP.matches("patio cerrado")


def test_found_lists_every_hit_in_order():
    hits = NEGATIVE_HISTORY.found("Por problemas de tiempo lo entregué")
    assert hits == ["lo entregué", "problemas de tiempo"]


def test_accented_and_plain_spellings_both_listed():
    assert NEGATIVE_HISTORY.matches("se escapo")
    assert NEGATIVE_HISTORY.matches("se escapó")


def test_custom_list_is_independent_of_scoring():
    custom = PhraseList(name="custom", phrases=("jaula",), version="test")
    assert custom.matches("Vive en una JAULA")
    assert custom.version == "test"
