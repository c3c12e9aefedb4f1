from __future__ import annotations
from typing import Iterable, NamedTuple, Optional, Tuple

from ..analysis.traits import Profile
from ..app import ANALYSIS_INTERVAL_S, CLOCK_INTERVAL_S, DEFAULT_VIEWPORT, BehaviorAnalyzer
from ..events import InputEvent
from ..labels import DEFAULT_LOCALE
from ..sink import MemorySink
from .personas import PERSONAS


class SimulatedClock:
    """Manually advanced ms clock; never moves backwards."""

    def __init__(self, start: int = 0):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance_to(self, ts: int) -> None:
        self.now = max(self.now, ts)


class ReplayResult(NamedTuple):
    analyzer: BehaviorAnalyzer
    sink: MemorySink
    profile: Optional[Profile]


def replay(events: Iterable[InputEvent], start: int = 0, locale: str = DEFAULT_LOCALE,
           viewport: Tuple[float, float] = DEFAULT_VIEWPORT) -> ReplayResult:
    """Feed events through an analyzer, firing both timers on simulated time.

    Timers due at or before an event fire before it is dispatched; one more
    analysis tick runs at the first analysis boundary after the last event.
    """
    clock_ms = int(CLOCK_INTERVAL_S * 1000)
    analysis_ms = int(ANALYSIS_INTERVAL_S * 1000)

    clock = SimulatedClock(start)
    sink = MemorySink()
    analyzer = BehaviorAnalyzer(sink, clock=clock, viewport=lambda: viewport, locale=locale)
    next_clock, next_analysis = start + clock_ms, start + analysis_ms
    profile = None

    def fire_until(ts):
        nonlocal next_clock, next_analysis, profile
        while min(next_clock, next_analysis) <= ts:
            if next_clock <= next_analysis:
                clock.advance_to(next_clock)
                analyzer.tick_clock()
                next_clock += clock_ms
            else:
                clock.advance_to(next_analysis)
                profile = analyzer.update_analysis()
                next_analysis += analysis_ms

    for ev in sorted(events, key=lambda e: start if e.ts is None else e.ts):
        ts = clock() if ev.ts is None else ev.ts
        fire_until(ts)
        clock.advance_to(ts)
        analyzer.dispatch(ev)

    fire_until(next_analysis)
    return ReplayResult(analyzer, sink, profile)


def main():
    for name, make in PERSONAS.items():
        res = replay(make())
        traits = ", ".join(t.name for t in res.profile.traits)
        print(f"[replay] {name}: {traits} | {res.profile.insight}")

if __name__ == "__main__":
    main()
