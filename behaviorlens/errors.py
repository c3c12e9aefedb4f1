from __future__ import annotations
from typing import Iterable


class BehaviorLensError(Exception):
    """Base class for analyzer errors."""


class SinkNotReady(BehaviorLensError):
    """The presentation sink is missing display slots the analyzer writes to."""

    def __init__(self, missing: Iterable[str]):
        self.missing = sorted(missing)
        super().__init__(f"missing display slots: {', '.join(self.missing)}")


class AnalyzerStartupError(BehaviorLensError):
    """Raised when the analyzer cannot be wired to its host."""
