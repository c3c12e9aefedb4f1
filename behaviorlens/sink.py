from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime
from typing import Deque, Dict, Iterable, List, Optional

from pydantic import BaseModel

from .analysis.traits import Trait
from .errors import SinkNotReady

HEATMAP_CAP = 50        # rendered heatmap cells; oldest evicted first
INTENSE_ABOVE = 0.7

# every slot the analyzer writes to
SLOTS = (
    "mouseSpeed", "clickCount", "scrollDistance", "sessionTime",
    "avgSpeed", "clickActivity", "scrollPattern",
)

EVENT_ICONS = {
    "click": "🖱️",
    "scroll": "📜",
    "keypress": "⌨️",
    "move": "🎯",
}
DEFAULT_ICON = "🔔"


class TimelineEntry(BaseModel):
    time: str
    kind: str
    icon: str
    text: str


class HeatmapPoint(BaseModel):
    x: float
    y: float
    intensity: float
    intense: bool = False


class PresentationSink(ABC):
    """Write-only display surface the analyzer publishes to."""

    def check_ready(self) -> None:
        """Raise SinkNotReady if the surface cannot show the analyzer's slots."""

    @abstractmethod
    def set_metric_text(self, slot: str, value: str) -> None: ...

    @abstractmethod
    def set_progress_ratio(self, value: float) -> None: ...

    @abstractmethod
    def set_traits(self, traits: List[Trait]) -> None: ...

    @abstractmethod
    def set_insight(self, text: str) -> None: ...

    @abstractmethod
    def append_timeline_entry(self, kind: str, text: str) -> None: ...

    @abstractmethod
    def append_heatmap_point(self, x: float, y: float, intensity: float) -> None: ...


class MemorySink(PresentationSink):
    """Holds the latest display state in memory.

    ``slots`` lists the metric slots the surface can show; leaving one of
    :data:`SLOTS` out makes :meth:`check_ready` fail, the way a page missing
    an element would.
    """

    def __init__(self, slots: Optional[Iterable[str]] = None, heatmap_cap: int = HEATMAP_CAP):
        self.slots = set(SLOTS if slots is None else slots)
        self.metrics: Dict[str, str] = {}
        self.progress = 0.0
        self.traits: List[Trait] = []
        self.insight = ""
        self.timeline: List[TimelineEntry] = []
        self.heatmap: Deque[HeatmapPoint] = deque(maxlen=heatmap_cap)

    def check_ready(self) -> None:
        missing = set(SLOTS) - self.slots
        if missing:
            raise SinkNotReady(missing)

    def set_metric_text(self, slot: str, value: str) -> None:
        # unknown slots are ignored, like a missing element on the page
        if slot in self.slots:
            self.metrics[slot] = str(value)

    def set_progress_ratio(self, value: float) -> None:
        self.progress = max(0.0, min(float(value), 100.0))

    def set_traits(self, traits: List[Trait]) -> None:
        self.traits = list(traits)

    def set_insight(self, text: str) -> None:
        self.insight = text

    def append_timeline_entry(self, kind: str, text: str) -> None:
        self.timeline.append(TimelineEntry(
            time=datetime.now().strftime("%H:%M:%S"),
            kind=kind,
            icon=EVENT_ICONS.get(kind, DEFAULT_ICON),
            text=text,
        ))

    def append_heatmap_point(self, x: float, y: float, intensity: float) -> None:
        self.heatmap.append(HeatmapPoint(x=x, y=y, intensity=intensity, intense=intensity > INTENSE_ABOVE))
