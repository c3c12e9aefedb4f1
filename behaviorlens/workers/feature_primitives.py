from __future__ import annotations
from math import hypot
from typing import List, Sequence, Tuple

import numpy as np

# (ts_ms, x, y)
Point = Tuple[int, float, float]


def distance(x0: float, y0: float, x1: float, y1: float) -> float:
    return hypot(x1 - x0, y1 - y0)


def rate_per_sec(delta: float, dt_ms: float) -> float:
    """delta per second over dt_ms; 0 when no time elapsed."""
    if dt_ms <= 0:
        return 0.0
    return delta / (dt_ms / 1000.0)


def step_speeds(points: Sequence[Point]) -> List[float]:
    # per-step speed between consecutive points; zero-dt steps carry no speed
    speeds = []
    for i in range(1, len(points)):
        t0, x0, y0 = points[i-1]
        t1, x1, y1 = points[i]
        if t1 - t0 <= 0:
            continue
        speeds.append(rate_per_sec(distance(x0, y0, x1, y1), t1 - t0))
    return speeds


def intervals(timestamps: Sequence[int]) -> List[int]:
    ts = sorted(timestamps)
    return [ts[i] - ts[i-1] for i in range(1, len(ts))]


def mean_or(values: Sequence[float], default: float = 0.0) -> float:
    return float(np.mean(values)) if len(values) else default


def max_or(values: Sequence[float], default: float = 0.0) -> float:
    return float(np.max(values)) if len(values) else default


def variance(values: Sequence[float]) -> float:
    # population variance (ddof=0)
    return float(np.var(values)) if len(values) else 0.0
