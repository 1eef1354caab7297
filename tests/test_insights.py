# tests/test_insights.py

import json
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from rashi.core.errors import InsightUnavailableError
from rashi.core.types import RashiInsights
from rashi.insights import (
    BRACELETS,
    InsightsModel,
    fetch_insights,
    insight_prompt,
    parse_insights,
    recommend_bracelet,
)
from rashi.signs import RASHIS, sign_by_name


def _payload(**over):
    p = {
        "summary": "Calm and nurturing, with deep emotional memory.",
        "strengths": ["Empathy", "Loyalty", "Intuition"],
        "challenges": ["Moodiness", "Clinging to the past"],
        "recommendedBracelet": {
            "name": "Cancer (Karka) Bracelet",
            "crystals": ["Moonstone", "Clear Quartz", "Rose Quartz"],
        },
    }
    p.update(over)
    return p


def test_catalog_covers_every_sign():
    assert len(BRACELETS) == len(RASHIS) == 12
    for s in RASHIS:
        b = recommend_bracelet(s)
        assert b.name.startswith(s.english)
        assert len(b.crystals) == 3


def test_cancer_bracelet():
    b = recommend_bracelet(sign_by_name("Cancer"))
    assert b.crystals == ("Moonstone", "Clear Quartz", "Rose Quartz")


def test_prompt_names_sign_and_catalog():
    text = insight_prompt(sign_by_name("Leo"))
    assert "Leo (Simha)" in text
    assert "Tiger Eye, Citrine, Pyrite" in text
    assert "3 key strengths" in text


def test_parse_mapping_and_json():
    a = parse_insights(_payload())
    b = parse_insights(json.dumps(_payload()))
    assert a == b
    assert a.strengths == ("Empathy", "Loyalty", "Intuition")
    assert a.recommended_bracelet.crystals[0] == "Moonstone"


@pytest.mark.parametrize("over", [
    {"summary": ""},
    {"summary": None},
    {"strengths": ["One", "Two"]},
    {"strengths": ["One", "Two", "Three", "Four"]},
    {"challenges": ["Only one"]},
    {"challenges": ["One", "  "]},
    {"recommendedBracelet": None},
    {"recommendedBracelet": {"name": "X", "crystals": []}},
    {"recommendedBracelet": {"crystals": ["Onyx"]}},
])
def test_incomplete_payload_rejected(over):
    with pytest.raises(InsightUnavailableError, match="insights unavailable") as ei:
        parse_insights(_payload(**over))
    assert isinstance(ei.value.__cause__, ValidationError)


@pytest.mark.parametrize("raw", ["", "{not json", "[1, 2, 3]"])
def test_garbage_rejected(raw):
    with pytest.raises(InsightUnavailableError):
        parse_insights(raw)


def test_fetch_insights_passes_through():
    ins = parse_insights(_payload())
    provider = Mock()
    provider.insights_for.return_value = ins
    assert fetch_insights(RASHIS[3], provider) is ins


def test_fetch_insights_parses_raw_payload():
    provider = Mock()
    provider.insights_for.return_value = _payload()
    assert isinstance(fetch_insights(RASHIS[3], provider), RashiInsights)


def test_fetch_insights_wraps_provider_failure():
    provider = Mock()
    provider.insights_for.side_effect = ConnectionError("503")
    with pytest.raises(InsightUnavailableError) as ei:
        fetch_insights(RASHIS[0], provider)
    assert isinstance(ei.value.__cause__, ConnectionError)


def test_entries_are_stripped():
    ins = parse_insights(_payload(summary="  Calm.  ", strengths=[" A", "B ", " C "]))
    assert ins.summary == "Calm."
    assert ins.strengths == ("A", "B", "C")


def test_bytes_payload():
    ins = parse_insights(json.dumps(_payload()).encode())
    assert ins.challenges == ("Moodiness", "Clinging to the past")


def test_wire_model_uses_camel_case_key():
    m = InsightsModel.model_validate(_payload())
    assert m.recommended_bracelet.name == "Cancer (Karka) Bracelet"
    with pytest.raises(ValidationError):
        InsightsModel.model_validate({**_payload(), "recommendedBracelet": None})
