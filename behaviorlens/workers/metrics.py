from __future__ import annotations
from pydantic import BaseModel

from .buffer import EventBuffer
from .feature_primitives import intervals, max_or, mean_or, step_speeds, variance

NEUTRAL = 0.5               # score reported while there is not enough data
MIN_MOVEMENT_POINTS = 10
MIN_ELAPSED_MS = 1000       # click frequency reads 0 before one second of session
# Empirical scale for speed variance in viewport-ratio units; a tunable heuristic,
# not derived from any data distribution.
CONSISTENCY_SCALE = 10000.0


class MetricsSnapshot(BaseModel):
    avg_speed: float = 0.0
    click_frequency: float = 0.0      # clicks per minute
    scroll_intensity: float = 0.0     # peak scroll velocity, px/sec
    movement_consistency: float = NEUTRAL
    decision_speed: float = NEUTRAL


class MetricExtractor:
    """Read-only statistics over an EventBuffer, computed at query time."""

    def __init__(self, buffer: EventBuffer):
        self.buffer = buffer

    def avg_speed(self) -> float:
        return mean_or([s.speed for s in self.buffer.pointer])

    def click_frequency(self, now: int) -> float:
        elapsed = now - self.buffer.session_start
        if elapsed < MIN_ELAPSED_MS:
            return 0.0
        return self.buffer.click_count / (elapsed / 60000.0)

    def scroll_intensity(self) -> float:
        return max_or([s.velocity for s in self.buffer.scrolls])

    def movement_consistency(self) -> float:
        points = self.buffer.movement
        if len(points) < MIN_MOVEMENT_POINTS:
            return NEUTRAL
        speeds = step_speeds([(p.ts, p.x, p.y) for p in points])
        return max(0.0, 1.0 - variance(speeds) / CONSISTENCY_SCALE)

    def decision_speed(self) -> float:
        if self.buffer.click_count < 2:
            return NEUTRAL
        avg_interval = mean_or(intervals([c.ts for c in self.buffer.clicks]))
        if avg_interval <= 0:
            return 1.0
        return min(1.0, 1000.0 / avg_interval)

    def snapshot(self, now: int) -> MetricsSnapshot:
        return MetricsSnapshot(
            avg_speed=self.avg_speed(),
            click_frequency=self.click_frequency(now),
            scroll_intensity=self.scroll_intensity(),
            movement_consistency=self.movement_consistency(),
            decision_speed=self.decision_speed(),
        )
