from __future__ import annotations
import random
from typing import Callable, Dict, List, Optional

from ..events import Click, InputEvent, KeyPress, PointerMove, Scroll

# All timestamps are ms relative to t0 (the session start of the replay).

def reader(t0: int = 0, seconds: int = 60, seed: Optional[int] = 7) -> List[InputEvent]:
    """Small steady cursor drift, slow even scroll, rare clicks."""
    rnd = random.Random(seed); ev: List[InputEvent] = []
    x, y, pos = 600.0, 400.0, 0.0
    for i in range(seconds * 5):                 # one move every 200 ms
        ts = t0 + 200 * (i + 1)
        x += rnd.uniform(-4, 4); y += rnd.uniform(-4, 4)
        ev.append(PointerMove(x=round(x), y=round(y), ts=ts))
        if i % 5 == 0:
            pos += rnd.randint(10, 15)
            ev.append(Scroll(y=pos, ts=ts + 20))
        if i % 90 == 45:
            ev.append(Click(x=round(x), y=round(y), ts=ts + 40))
    return ev


def skimmer(t0: int = 0, seconds: int = 60, seed: Optional[int] = 11) -> List[InputEvent]:
    """Fast scroll bursts with a mostly parked cursor."""
    rnd = random.Random(seed); ev: List[InputEvent] = []
    pos = 0.0
    for i in range(seconds * 2):                 # every 500 ms
        ts = t0 + 500 * (i + 1)
        pos += rnd.randint(150, 300)
        ev.append(Scroll(y=pos, ts=ts))
        ev.append(PointerMove(x=500 + rnd.randint(-30, 30), y=350 + rnd.randint(-30, 30), ts=ts + 100))
        if i % 40 == 5:
            ev.append(Click(x=520, y=360, ts=ts + 200))
    return ev


def clicker(t0: int = 0, seconds: int = 60, seed: Optional[int] = 13) -> List[InputEvent]:
    """Rapid click clusters and a few keystrokes."""
    rnd = random.Random(seed); ev: List[InputEvent] = []
    for i in range(seconds):                     # every second
        ts = t0 + 1000 * (i + 1)
        cx, cy = 300 + rnd.randint(-80, 80), 600 + rnd.randint(-80, 80)
        ev.append(PointerMove(x=cx, y=cy, ts=ts))
        for j in range(3):
            ev.append(Click(x=cx, y=cy, ts=ts + 100 + 250 * j, pressure=rnd.uniform(0.3, 1.0)))
        if i % 10 == 0:
            ev.append(KeyPress(key=rnd.choice(["Enter", "Tab", "a"]), ts=ts + 900))
    return ev


def dasher(t0: int = 0, seconds: int = 60, seed: Optional[int] = 17) -> List[InputEvent]:
    """Long, fast cursor sweeps across the viewport."""
    rnd = random.Random(seed); ev: List[InputEvent] = []
    for i in range(seconds * 10):                # every 100 ms
        ts = t0 + 100 * (i + 1)
        ev.append(PointerMove(x=rnd.randint(0, 1900), y=rnd.randint(0, 1060), ts=ts))
        if i % 30 == 29:
            ev.append(Click(x=960, y=540, ts=ts + 50))
    return ev


PERSONAS: Dict[str, Callable[..., List[InputEvent]]] = {
    "reader": reader,
    "skimmer": skimmer,
    "clicker": clicker,
    "dasher": dasher,
}
