"""Shared fixtures for the schedule engine tests."""

import pendulum as p
import pytest

from fastswim import config
from fastswim.models.session import TrainingSession


@pytest.fixture
def make_session():
    counter = {"n": 0}

    def _make(date="2024-08-25", **overrides):
        counter["n"] += 1
        fields = dict(
            id=str(counter["n"]),
            date=date,
            time="08:00",
            location="Bassin n°1",
            group="Débutants",
            trainer="Anna Ivanova",
            type="Technique de nage",
        )
        fields.update(overrides)
        return TrainingSession(**fields)

    return _make


@pytest.fixture
def frozen_today(monkeypatch):
    """Pins "today" to Thursday 2024-08-22 (the demo data lives in August 2024)."""
    monkeypatch.setattr(config, "TODAY_OVERRIDE", "2024-08-22")
    return p.date(2024, 8, 22)
