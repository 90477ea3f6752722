"""
Shared fixtures for the triage test-suite.
"""
import matplotlib
matplotlib.use("Agg")

import pytest

from triage import InjurySeverityTable


class FakeClock:
    """Clock returning a settable time, in epoch seconds."""

    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def tick(self, seconds):
        self.now += seconds


@pytest.fixture
def small_table():
    """A five-level table small enough to reason about by hand."""
    return InjurySeverityTable({
        "Heart Attack": 1,
        "Major Bleeding": 2,
        "Broken Bone": 3,
        "Sprained Ankle": 4,
        "Minor Cut": 5,
    })


@pytest.fixture
def clock():
    return FakeClock()
