"""Vacancy-profile deferred-acceptance matching module."""

from .candidate_tracker import CandidateTracker
from .exceptions import MatchingError, NonConvergenceError
from .matching_engine import (
    MatchingEngine,
    MatchingStats,
    MatchPair,
    PreferenceFn,
    stable_match,
)

__all__ = [
    "CandidateTracker",
    "MatchingEngine",
    "MatchingError",
    "MatchingStats",
    "MatchPair",
    "NonConvergenceError",
    "PreferenceFn",
    "stable_match",
]
