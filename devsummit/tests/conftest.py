"""Shared fixtures for site tests.

Provides:
- schedule: a small in-memory schedule (no schedule.json read)
- counting_renderer: a fake LESS renderer that records each call
- client: TestClient for the full app, non-prod, with the fake renderer
- session data factory
"""

import os

import pytest

# Set env vars before any site imports
os.environ.setdefault("SITE_ENV", "development")


# ---------------------------------------------------------------------------
# Data factories
# ---------------------------------------------------------------------------

def make_session(**overrides):
    defaults = {
        "id": "keynote",
        "name": "Keynote",
        "time_label": "9:30 AM",
        "date": "2018-11-12",
        "start": "09:30",
        "description": "Opening keynote.",
        "speakers": ["Ben Galbraith"],
    }
    defaults.update(overrides)
    return defaults


def make_schedule(*sessions):
    return {"sessions": {s["id"]: s for s in sessions}}


SECTIONS = ("faq", "index", "schedule", "speakers")


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class CountingRenderer:
    """Stands in for the LESS preprocessor; returns a distinct CSS per call."""

    def __init__(self):
        self.calls = 0

    def __call__(self, entry):
        self.calls += 1
        return f"body{{--render:{self.calls}}}"


@pytest.fixture
def schedule():
    return make_schedule(
        make_session(),
        make_session(id="bare", name=None, time_label=None, description=None, start="11:00"),
        make_session(id="_lunch", name="Lunch", start="12:30"),
        make_session(id="day2", name="Day 2 Keynote", date="2018-11-13"),
    )


@pytest.fixture
def counting_renderer():
    return CountingRenderer()


@pytest.fixture
def stylesheet(counting_renderer, tmp_path):
    from devsummit.services.amp_css import AmpStylesheet

    return AmpStylesheet(tmp_path / "amp.less", prod=False, renderer=counting_renderer)


@pytest.fixture
def app(schedule, stylesheet):
    from devsummit.app import create_app

    return create_app(prod=False, schedule=schedule, sections=SECTIONS, stylesheet=stylesheet)


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    with TestClient(app) as c:
        yield c
