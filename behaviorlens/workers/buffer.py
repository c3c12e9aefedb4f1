from __future__ import annotations
from typing import Dict, List, Optional, Tuple

import pandas as pd

from ..events import (
    DEFAULT_PRESSURE, ClickSample, MovementPoint, PointerSample, ScrollSample,
)
from .feature_primitives import distance, rate_per_sec

POINTER_GATE_MS = 50  # moves closer together than this are dropped


class EventBuffer:
    """Append-only, time-ordered samples for one session.

    Nothing is evicted: the buffers grow for as long as the session lives.
    """

    def __init__(self, session_start: int):
        self.session_start = session_start
        self.pointer: List[PointerSample] = []
        self.movement: List[MovementPoint] = []
        self.clicks: List[ClickSample] = []
        self.scrolls: List[ScrollSample] = []
        self.last_position: Tuple[float, float] = (0.0, 0.0)
        self.last_move_ts = session_start

    def record_pointer_move(self, x: float, y: float, now: int,
                            viewport: Tuple[float, float]) -> Optional[PointerSample]:
        dt = now - self.last_move_ts
        if dt <= POINTER_GATE_MS:
            return None

        lx, ly = self.last_position
        sample = PointerSample(x=x, y=y, speed=rate_per_sec(distance(lx, ly, x, y), dt), ts=now)
        self.pointer.append(sample)
        self.last_position = (x, y)
        self.last_move_ts = now

        width, height = viewport
        self.movement.append(MovementPoint(x=x / (width or 1), y=y / (height or 1), ts=now))
        return sample

    def record_click(self, x: float, y: float, now: int,
                     pressure: Optional[float] = None) -> ClickSample:
        if self.clicks:
            now = max(now, self.clicks[-1].ts)   # keep timestamps non-decreasing
        sample = ClickSample(
            x=x, y=y, ts=now,
            # browsers report 0 when pressure is unsupported
            pressure=pressure or DEFAULT_PRESSURE,
        )
        self.clicks.append(sample)
        return sample

    def record_scroll(self, position: float, now: int) -> ScrollSample:
        velocity = 0.0
        if self.scrolls:
            prev = self.scrolls[-1]
            now = max(now, prev.ts)
            velocity = rate_per_sec(abs(position - prev.position), now - prev.ts)
        sample = ScrollSample(position=position, ts=now, velocity=velocity)
        self.scrolls.append(sample)
        return sample

    @property
    def click_count(self) -> int:
        return len(self.clicks)

    def frames(self) -> Dict[str, pd.DataFrame]:
        """One DataFrame per buffer, for offline inspection."""
        def _df(rows, cols):
            return pd.DataFrame([r.model_dump() for r in rows], columns=cols)
        return {
            "pointer": _df(self.pointer, ["x", "y", "speed", "ts"]),
            "movement": _df(self.movement, ["x", "y", "ts"]),
            "clicks": _df(self.clicks, ["x", "y", "ts", "pressure"]),
            "scrolls": _df(self.scrolls, ["position", "ts", "velocity"]),
        }
