"""
Shared test fixtures for the stable-match test suite.

Sets environment variables before any package imports so settings are
predictable, then provides factory fixtures for matchable items and
preference functions.
"""

import os

# === Set environment BEFORE any package imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.pop("MATCH_ITERATION_CAP", None)

from dataclasses import dataclass
from typing import Optional

import pytest

from stable_match.core.matching.matching_engine import MatchingEngine
from stable_match.utils.config import reload_settings


@dataclass(eq=False)
class Item:
    """A profile or vacancy that wants one colour and offers another."""

    name: str
    want: str
    have: str


def wants_what_it_gets(vacancy: Item, current: Optional[Item], new: Item) -> bool:
    return current is None or vacancy.want == new.have


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings so monkeypatched environment variables take effect."""
    reload_settings()
    yield
    reload_settings()


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_item():
    """Factory that returns a callable to build Item instances."""

    def _factory(name: str = "item", want: str = "red", have: str = "blue") -> Item:
        return Item(name=name, want=want, have=have)

    return _factory


@pytest.fixture
def prefers():
    """Vacancy accepts anything when empty, otherwise only what it wants."""
    return wants_what_it_gets


@pytest.fixture
def recording_predicate():
    """Factory wrapping a decision function so every call is recorded."""

    def _factory(decide=wants_what_it_gets):
        calls = []

        def _predicate(vacancy, current, new):
            calls.append((vacancy, current, new))
            return decide(vacancy, current, new)

        _predicate.calls = calls
        return _predicate

    return _factory


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_profiles(make_item):
    return [
        make_item("profile1", want="red", have="blue"),
        make_item("profile2", want="yellow", have="green"),
        make_item("profile3", want="purple", have="teal"),
    ]


@pytest.fixture
def sample_vacancies(make_item):
    return [
        make_item("vacancy1", want="blue", have="red"),
        make_item("vacancy2", want="green", have="yellow"),
        make_item("vacancy3", want="black", have="white"),
    ]


@pytest.fixture
def matching_engine(sample_profiles, sample_vacancies, prefers):
    """MatchingEngine over the sample data with a generous iteration cap."""
    return MatchingEngine(sample_profiles, sample_vacancies, prefers, iteration_cap=10)
