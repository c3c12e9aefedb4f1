"""Tests for behaviorlens.analysis.traits: trait rule table and insight priority."""

from behaviorlens.analysis.traits import (
    INSIGHT_RULES, TRAIT_RULES, TraitClassifier, TraitStyle,
)
from behaviorlens.labels import label
from behaviorlens.workers.metrics import MetricsSnapshot


def snap(**kw):
    return MetricsSnapshot(**kw)


def names(traits):
    return [t.name for t in traits]


class TestTraits:
    def test_neutral_snapshot_falls_back_to_balanced(self):
        profile = TraitClassifier().classify(snap())
        assert [(t.name, t.style) for t in profile.traits] == [("Balanced", TraitStyle.CONFIDENT)]
        assert profile.insight == label("insight.balanced")

    def test_fast_and_active(self):
        profile = TraitClassifier().classify(snap(avg_speed=650, click_frequency=9))
        pairs = [(t.name, t.style) for t in profile.traits]
        assert ("Decisive", TraitStyle.CONFIDENT) in pairs
        assert ("Active", TraitStyle.IMPULSIVE) in pairs
        assert profile.insight == label("insight.energetic")

    def test_slow_is_attentive(self):
        traits = TraitClassifier().traits(snap(avg_speed=100))
        assert [(t.name, t.style) for t in traits] == [("Attentive", TraitStyle.CAUTIOUS)]

    def test_thresholds_are_strict(self):
        assert names(TraitClassifier().traits(snap(avg_speed=500))) == ["Balanced"]
        assert names(TraitClassifier().traits(snap(avg_speed=200))) == ["Balanced"]

    def test_no_pointer_data_is_not_attentive(self):
        assert names(TraitClassifier().traits(snap(avg_speed=0))) == ["Balanced"]
        assert names(TraitClassifier().traits(snap(avg_speed=0.5))) == ["Attentive"]

    def test_all_rules_fire_in_table_order(self):
        m = snap(avg_speed=700, click_frequency=10, movement_consistency=0.9,
                 decision_speed=0.95, scroll_intensity=200)
        assert names(TraitClassifier().traits(m)) == [
            "Decisive", "Active", "Systematic", "Quick-reacting", "Energetic",
        ]

    def test_ordered_tables(self):
        assert len(TRAIT_RULES) == 6
        assert len(INSIGHT_RULES) == 3


class TestInsight:
    def test_methodical(self):
        assert TraitClassifier().insight(snap(avg_speed=250, movement_consistency=0.85)) == label("insight.methodical")

    def test_intuitive(self):
        assert TraitClassifier().insight(snap(avg_speed=400, decision_speed=0.95)) == label("insight.intuitive")

    def test_methodical_outranks_intuitive(self):
        m = snap(avg_speed=250, movement_consistency=0.85, decision_speed=0.95)
        assert TraitClassifier().insight(m) == label("insight.methodical")

    def test_energetic_needs_both_conditions(self):
        assert TraitClassifier().insight(snap(avg_speed=650, click_frequency=7)) == label("insight.balanced")


class TestCustomTables:
    def test_injected_rules(self):
        clf = TraitClassifier(
            trait_rules=((lambda m: True, "trait.energetic", TraitStyle.IMPULSIVE),),
            insight_rules=((lambda m: True, "insight.intuitive"),),
        )
        profile = clf.classify(snap())
        assert names(profile.traits) == ["Energetic"]
        assert profile.insight == label("insight.intuitive")


class TestLocale:
    def test_russian_labels(self):
        profile = TraitClassifier(locale="ru").classify(snap())
        assert names(profile.traits) == ["Сбалансированный"]
        assert profile.insight == "Вы проявляете адаптивный и сбалансированный стиль поведения"

    def test_unknown_locale_uses_english(self):
        assert names(TraitClassifier(locale="xx").traits(snap())) == ["Balanced"]

    def test_label_formatting(self):
        assert label("timeline.click", x=3, y=4) == "Click at (3, 4)"
        assert label("unit.frequency", "ru", value=1.5) == "1.5/мин"

    def test_key_placeholder(self):
        assert label("timeline.keypress", key="Tab") == "Key pressed: Tab"
        assert label("timeline.keypress", "ru", key="Tab") == "Нажата клавиша: Tab"
