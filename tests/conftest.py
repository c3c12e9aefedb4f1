"""Shared fixtures for the behaviorlens test suite."""

import pytest

from behaviorlens.app import BehaviorAnalyzer
from behaviorlens.sink import MemorySink
from behaviorlens.synthetic.replay import SimulatedClock
from behaviorlens.workers.buffer import EventBuffer


@pytest.fixture
def clock():
    return SimulatedClock(0)


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def analyzer(sink, clock):
    return BehaviorAnalyzer(sink, clock=clock, viewport=lambda: (1000, 500))


@pytest.fixture
def buffer():
    return EventBuffer(session_start=0)
