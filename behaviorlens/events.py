from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Literal, Optional, Union

DEFAULT_PRESSURE = 0.5

# ---------- raw input events (what the host dispatches) ----------

class PointerMove(BaseModel):
    ev: Literal["mousemove"] = "mousemove"
    x: float
    y: float
    ts: Optional[int] = Field(None, description="epoch ms; None means 'now'")

class Click(BaseModel):
    ev: Literal["click"] = "click"
    x: float
    y: float
    ts: Optional[int] = None
    pressure: Optional[float] = Field(None, ge=0.0, le=1.0)

class Scroll(BaseModel):
    ev: Literal["scroll"] = "scroll"
    y: float = Field(..., description="current vertical offset, px")
    ts: Optional[int] = None

class KeyPress(BaseModel):
    ev: Literal["keydown"] = "keydown"
    key: str
    ts: Optional[int] = None

InputEvent = Union[PointerMove, Click, Scroll, KeyPress]

# ---------- buffered samples ----------

class PointerSample(BaseModel):
    x: float
    y: float
    speed: float = Field(..., description="px/sec since the previous accepted sample")
    ts: int

class MovementPoint(BaseModel):
    # x/y are ratios of the viewport at capture time
    x: float
    y: float
    ts: int

class ClickSample(BaseModel):
    x: float
    y: float
    ts: int
    pressure: float = DEFAULT_PRESSURE

class ScrollSample(BaseModel):
    position: float
    ts: int
    velocity: float = 0.0
