from __future__ import annotations
from enum import Enum
from typing import Callable, List, Tuple

from pydantic import BaseModel

from ..labels import DEFAULT_LOCALE, label
from ..workers.metrics import MetricsSnapshot


class TraitStyle(str, Enum):
    CONFIDENT = "confident"
    CAUTIOUS = "cautious"
    IMPULSIVE = "impulsive"


class Trait(BaseModel):
    name: str
    style: TraitStyle


class Profile(BaseModel):
    traits: List[Trait]
    insight: str


Predicate = Callable[[MetricsSnapshot], bool]

# Independent rules, evaluated top to bottom; several may fire at once.
# The two speed rules cannot both hold (< 200 excludes > 500).
# A zero average means no pointer samples yet, which says nothing about slowness.
TRAIT_RULES: Tuple[Tuple[Predicate, str, TraitStyle], ...] = (
    (lambda m: m.avg_speed > 500,            "trait.decisive",   TraitStyle.CONFIDENT),
    (lambda m: 0 < m.avg_speed < 200,        "trait.attentive",  TraitStyle.CAUTIOUS),
    (lambda m: m.click_frequency > 5,        "trait.active",     TraitStyle.IMPULSIVE),
    (lambda m: m.movement_consistency > 0.7, "trait.systematic", TraitStyle.CONFIDENT),
    (lambda m: m.decision_speed > 0.8,       "trait.quick",      TraitStyle.IMPULSIVE),
    (lambda m: m.scroll_intensity > 100,     "trait.energetic",  TraitStyle.IMPULSIVE),
)
FALLBACK_TRAIT = ("trait.balanced", TraitStyle.CONFIDENT)

# First match wins.
INSIGHT_RULES: Tuple[Tuple[Predicate, str], ...] = (
    (lambda m: m.avg_speed > 600 and m.click_frequency > 8,          "insight.energetic"),
    (lambda m: m.avg_speed < 300 and m.movement_consistency > 0.8,   "insight.methodical"),
    (lambda m: m.decision_speed > 0.9,                               "insight.intuitive"),
)
DEFAULT_INSIGHT = "insight.balanced"


class TraitClassifier:
    """Maps a MetricsSnapshot onto trait badges and one insight sentence."""

    def __init__(self, locale: str = DEFAULT_LOCALE,
                 trait_rules=TRAIT_RULES, insight_rules=INSIGHT_RULES):
        self.locale = locale
        self.trait_rules = trait_rules
        self.insight_rules = insight_rules

    def traits(self, m: MetricsSnapshot) -> List[Trait]:
        out = [Trait(name=label(key, self.locale), style=style)
               for pred, key, style in self.trait_rules if pred(m)]
        if not out:
            key, style = FALLBACK_TRAIT
            out.append(Trait(name=label(key, self.locale), style=style))
        return out

    def insight(self, m: MetricsSnapshot) -> str:
        key = next((k for pred, k in self.insight_rules if pred(m)), DEFAULT_INSIGHT)
        return label(key, self.locale)

    def classify(self, m: MetricsSnapshot) -> Profile:
        return Profile(traits=self.traits(m), insight=self.insight(m))
