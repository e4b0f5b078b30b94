"""
stable-match: generalized Gale-Shapley matching.

Pairs "vacancies" with "profiles" using deferred acceptance, where the
vacancy's preference is supplied by the caller as a plain function.
"""

from stable_match.core.matching import (
    CandidateTracker,
    MatchingEngine,
    MatchingError,
    MatchingStats,
    MatchPair,
    NonConvergenceError,
    PreferenceFn,
    stable_match,
)
from stable_match.utils.constants import APP_NAME, VERSION

__app_name__ = APP_NAME
__version__ = VERSION

__all__ = [
    "CandidateTracker",
    "MatchingEngine",
    "MatchingError",
    "MatchingStats",
    "MatchPair",
    "NonConvergenceError",
    "PreferenceFn",
    "stable_match",
    "__app_name__",
    "__version__",
]
