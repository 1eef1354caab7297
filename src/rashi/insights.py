"""
rashi.insights

Contract for the insight collaborator: a provider returns, for a sign, a short
summary, exactly three strengths, exactly two challenges and a bracelet from
the static catalog below. Text generation itself lives outside this package;
here we only hold the catalog, build the provider request and validate what
comes back.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, List, Mapping, Protocol, Tuple, Union

from pydantic import BaseModel, Field, StringConstraints, ValidationError

from .core.errors import InsightUnavailableError
from .core.types import Bracelet, RashiInsights, RashiSign

log = logging.getLogger(__name__)

N_STRENGTHS = 3
N_CHALLENGES = 2

# Zodiac bracelet catalog, by sign index
BRACELETS: Tuple[Bracelet, ...] = (
    Bracelet("Aries (Mesha) Bracelet", ("Red Jasper", "Bloodstone", "Sunstone")),
    Bracelet("Taurus (Vrishabha) Bracelet", ("Rose Quartz", "Green Jade", "Green Aventurine")),
    Bracelet("Gemini (Mithun) Bracelet", ("Lapis Lazuli", "Fluorite", "Sodalite")),
    Bracelet("Cancer (Karka) Bracelet", ("Moonstone", "Clear Quartz", "Rose Quartz")),
    Bracelet("Leo (Simha) Bracelet", ("Tiger Eye", "Citrine", "Pyrite")),
    Bracelet("Virgo (Kanya) Bracelet", ("Green Aventurine", "Howlite", "Amethyst")),
    Bracelet("Libra (Tula) Bracelet", ("Rose Quartz", "Lapis Lazuli", "Green Jade")),
    Bracelet("Scorpio (Vrischika) Bracelet", ("Black Obsidian", "Black Tourmaline", "Hematite")),
    Bracelet("Sagittarius (Dhanu) Bracelet", ("Amethyst", "Sodalite", "Citrine")),
    Bracelet("Capricorn (Makar) Bracelet", ("Black Onyx", "Hematite", "Black Obsidian")),
    Bracelet("Aquarius (Kumbha) Bracelet", ("Amethyst", "Fluorite", "Lapis Lazuli")),
    Bracelet("Pisces (Meen) Bracelet", ("Amethyst", "Fluorite", "Clear Quartz")),
)


class InsightProvider(Protocol):
    def insights_for(self, sign: RashiSign) -> RashiInsights: ...


def recommend_bracelet(sign: RashiSign) -> Bracelet:
    return BRACELETS[sign.index]


def catalog_text() -> str:
    return "\n".join(f"{b.name}: {', '.join(b.crystals)}" for b in BRACELETS)


def insight_prompt(sign: RashiSign) -> str:
    """Request text for a provider generating insights for `sign`."""
    return (
        f"Generate spiritual insights for the Moon Rashi: {sign.label}. "
        f"This should include a brief summary of their core nature, a list of {N_STRENGTHS} key strengths, "
        f"a list of {N_CHALLENGES} potential challenges to be mindful of, and the specific zodiac bracelet "
        f"recommendation from the list below.\n\n"
        f"Available zodiac bracelets:\n{catalog_text()}\n"
    )


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class BraceletModel(BaseModel):
    name: NonEmptyStr
    crystals: List[NonEmptyStr] = Field(min_length=1)


class InsightsModel(BaseModel):
    """Wire shape of a provider answer (camelCase keys, as the provider emits them)."""
    summary: NonEmptyStr
    strengths: List[NonEmptyStr] = Field(min_length=N_STRENGTHS, max_length=N_STRENGTHS)
    challenges: List[NonEmptyStr] = Field(min_length=N_CHALLENGES, max_length=N_CHALLENGES)
    recommended_bracelet: BraceletModel = Field(alias="recommendedBracelet")

    def to_insights(self) -> RashiInsights:
        b = self.recommended_bracelet
        return RashiInsights(
            summary=self.summary,
            strengths=tuple(self.strengths),
            challenges=tuple(self.challenges),
            recommended_bracelet=Bracelet(b.name, tuple(b.crystals)),
        )


def parse_insights(payload: Union[str, bytes, Mapping[str, Any]]) -> RashiInsights:
    """
    Validate a provider payload (JSON text or mapping) into RashiInsights.

    Anything missing or of the wrong size -> InsightUnavailableError, with the
    pydantic ValidationError chained.
    """
    try:
        if isinstance(payload, (str, bytes)):
            model = InsightsModel.model_validate_json(payload)
        else:
            model = InsightsModel.model_validate(payload)
    except ValidationError as e:
        log.warning("rejected insight payload (%d errors): %s", e.error_count(), e)
        raise InsightUnavailableError() from e
    return model.to_insights()


def fetch_insights(sign: RashiSign, provider: InsightProvider) -> RashiInsights:
    """
    Ask `provider` for insights; any provider failure surfaces as
    InsightUnavailableError with the original exception chained.
    """
    try:
        out = provider.insights_for(sign)
    except InsightUnavailableError:
        raise
    except Exception as e:
        log.warning("insight provider failed for %s: %s", sign.label, e)
        raise InsightUnavailableError() from e
    if not isinstance(out, RashiInsights):
        out = parse_insights(out)
    return out
