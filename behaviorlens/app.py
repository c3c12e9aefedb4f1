from __future__ import annotations
import asyncio
import logging
import math
import time
from typing import Callable, Optional, Tuple

from .analysis.traits import Profile, TraitClassifier
from .errors import AnalyzerStartupError
from .events import Click, InputEvent, KeyPress, PointerMove, Scroll
from .labels import DEFAULT_LOCALE, label
from .sink import PresentationSink
from .workers.buffer import EventBuffer
from .workers.metrics import MetricExtractor, MetricsSnapshot

logger = logging.getLogger(__name__)

CLOCK_INTERVAL_S = 1.0      # session timer
ANALYSIS_INTERVAL_S = 3.0   # metrics -> traits -> sink
DEFAULT_VIEWPORT = (1920, 1080)
SCROLL_ENERGETIC_ABOVE = 100
HEAT_FULL_AT_CLICKS = 10


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


def round_half_up(value: float, digits: int = 0):
    """Round halves up, as the browser's Math.round does (round() goes to even)."""
    if digits == 0:
        return int(math.floor(value + 0.5))
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def _every(interval: float, fn: Callable[[], object]):
    # a failing tick is logged; the timer keeps firing for the rest of the session
    async def loop():
        while True:
            await asyncio.sleep(interval)
            try:
                fn()
            except Exception:
                logger.exception("timer tick failed")
    return loop()


class BehaviorAnalyzer:
    """Owns one session's buffers and publishes derived state to a sink."""

    def __init__(self, sink: PresentationSink,
                 clock: Callable[[], int] = wall_clock_ms,
                 viewport: Callable[[], Tuple[float, float]] = lambda: DEFAULT_VIEWPORT,
                 locale: str = DEFAULT_LOCALE):
        if not callable(clock) or not callable(viewport):
            raise AnalyzerStartupError("clock and viewport must be callables")
        sink.check_ready()

        self.sink = sink
        self.clock = clock
        self.viewport = viewport
        self.locale = locale
        self.session_start = clock()
        self.buffer = EventBuffer(self.session_start)
        self.metrics = MetricExtractor(self.buffer)
        self.classifier = TraitClassifier(locale)

        for slot in ("mouseSpeed", "clickCount", "scrollDistance", "sessionTime"):
            sink.set_metric_text(slot, "0")

    def _now(self, ts: Optional[int]) -> int:
        return self.clock() if ts is None else ts

    # ---------- input ----------

    def on_pointer_move(self, x: float, y: float, ts: Optional[int] = None) -> None:
        sample = self.buffer.record_pointer_move(x, y, self._now(ts), self.viewport())
        if sample is not None:
            self.sink.set_metric_text("mouseSpeed", str(round_half_up(sample.speed)))

    def on_click(self, x: float, y: float, pressure: Optional[float] = None,
                 ts: Optional[int] = None) -> None:
        self.buffer.record_click(x, y, self._now(ts), pressure)
        count = self.buffer.click_count
        self.sink.set_metric_text("clickCount", str(count))
        self.sink.append_heatmap_point(x, y, min(count / HEAT_FULL_AT_CLICKS, 1.0))
        self.sink.append_timeline_entry("click", label("timeline.click", self.locale, x=_fmt(x), y=_fmt(y)))

    def on_scroll(self, y: float, ts: Optional[int] = None) -> None:
        sample = self.buffer.record_scroll(y, self._now(ts))
        self.sink.set_metric_text("scrollDistance", str(round_half_up(sample.position)))

    def on_key_press(self, key: str) -> None:
        self.sink.append_timeline_entry("keypress", label("timeline.keypress", self.locale, key=key))

    def dispatch(self, event: InputEvent) -> None:
        if isinstance(event, PointerMove):
            self.on_pointer_move(event.x, event.y, event.ts)
        elif isinstance(event, Click):
            self.on_click(event.x, event.y, event.pressure, event.ts)
        elif isinstance(event, Scroll):
            self.on_scroll(event.y, event.ts)
        elif isinstance(event, KeyPress):
            self.on_key_press(event.key)
        else:
            raise TypeError(f"unsupported event: {type(event).__name__}")

    # ---------- periodic output ----------

    def tick_clock(self, now: Optional[int] = None) -> int:
        seconds = round_half_up((self._now(now) - self.session_start) / 1000)
        self.sink.set_metric_text("sessionTime", str(seconds))
        return seconds

    def snapshot(self, now: Optional[int] = None) -> MetricsSnapshot:
        return self.metrics.snapshot(self._now(now))

    def update_analysis(self, now: Optional[int] = None) -> Profile:
        m = self.snapshot(now)
        profile = self.classifier.classify(m)

        self.sink.set_progress_ratio(max(0.0, min(m.avg_speed / 10, 100.0)))
        self.sink.set_metric_text("avgSpeed", label("unit.speed", self.locale, value=round_half_up(m.avg_speed)))
        self.sink.set_metric_text("clickActivity", label("unit.frequency", self.locale, value=round_half_up(m.click_frequency, 1)))
        pattern = "scroll.energetic" if m.scroll_intensity > SCROLL_ENERGETIC_ABOVE else "scroll.smooth"
        self.sink.set_metric_text("scrollPattern", label(pattern, self.locale))
        self.sink.set_traits(profile.traits)
        self.sink.set_insight(profile.insight)

        logger.debug("analysis %s -> %s", m.model_dump(), [t.name for t in profile.traits])
        return profile

    async def run(self) -> None:
        """Drive both timers until the enclosing task is cancelled."""
        logger.info("analyzer running (clock every %ss, analysis every %ss)",
                    CLOCK_INTERVAL_S, ANALYSIS_INTERVAL_S)
        await asyncio.gather(
            _every(CLOCK_INTERVAL_S, self.tick_clock),
            _every(ANALYSIS_INTERVAL_S, self.update_analysis),
        )


def _fmt(v: float):
    # integral coordinates render without a trailing .0
    return int(v) if float(v).is_integer() else v


def start_analyzer(sink: PresentationSink, **kwargs) -> Optional[BehaviorAnalyzer]:
    """Build an analyzer, or log and return None if it cannot start.

    A failed start never propagates to the host; the page keeps working
    without telemetry.
    """
    try:
        analyzer = BehaviorAnalyzer(sink, **kwargs)
    except Exception:
        logger.exception("analyzer failed to start")
        return None
    logger.info("analyzer started")
    return analyzer
