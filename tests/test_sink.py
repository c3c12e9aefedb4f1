"""Tests for behaviorlens.sink: in-memory display state."""

import pytest

from behaviorlens.analysis.traits import Trait, TraitStyle
from behaviorlens.errors import SinkNotReady
from behaviorlens.sink import DEFAULT_ICON, HEATMAP_CAP, SLOTS, MemorySink


class TestHeatmap:
    def test_keeps_most_recent_fifty(self, sink):
        for i in range(60):
            sink.append_heatmap_point(i, i, 0.1)
        assert len(sink.heatmap) == HEATMAP_CAP == 50
        assert [p.x for p in sink.heatmap] == list(range(10, 60))

    def test_intense_above_threshold(self, sink):
        sink.append_heatmap_point(0, 0, 0.7)
        sink.append_heatmap_point(0, 0, 0.8)
        assert [p.intense for p in sink.heatmap] == [False, True]


class TestSlots:
    def test_metric_text_stored_as_str(self, sink):
        sink.set_metric_text("clickCount", 3)
        assert sink.metrics["clickCount"] == "3"

    def test_unknown_slot_ignored(self, sink):
        sink.set_metric_text("nope", "1")
        assert "nope" not in sink.metrics

    def test_ready_with_all_slots(self, sink):
        sink.check_ready()

    def test_missing_slot_not_ready(self):
        sink = MemorySink(slots=[s for s in SLOTS if s != "avgSpeed"])
        with pytest.raises(SinkNotReady) as exc:
            sink.check_ready()
        assert exc.value.missing == ["avgSpeed"]


class TestState:
    @pytest.mark.parametrize("value,expected", [(-5, 0.0), (42.5, 42.5), (250, 100.0)])
    def test_progress_clamped(self, sink, value, expected):
        sink.set_progress_ratio(value)
        assert sink.progress == expected

    def test_traits_and_insight_replaced(self, sink):
        sink.set_traits([Trait(name="Active", style=TraitStyle.IMPULSIVE)])
        sink.set_traits([Trait(name="Balanced", style=TraitStyle.CONFIDENT)])
        sink.set_insight("hello")
        assert [t.name for t in sink.traits] == ["Balanced"]
        assert sink.insight == "hello"

    def test_timeline_icons(self, sink):
        sink.append_timeline_entry("click", "a")
        sink.append_timeline_entry("other", "b")
        assert [e.icon for e in sink.timeline] == ["🖱️", DEFAULT_ICON]
        assert len(sink.timeline[0].time) == 8
