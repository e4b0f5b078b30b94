"""
Application-wide constants for stable-match.

This module contains all constant values used throughout the library.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "stable-match"
APP_DISPLAY_NAME: Final[str] = "Generalized Gale-Shapley Matcher"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Matching Constants
# =============================================================================

# Rounds allowed before a run is declared failed (0 = unbounded)
DEFAULT_ITERATION_CAP: Final[int] = 0


# =============================================================================
# Enums
# =============================================================================


class ProposalOutcome(str, Enum):
    """What happened to a single profile proposal during a round."""

    ACCEPTED = "accepted"  # unmatched vacancy took an unmatched profile
    DISPLACED = "displaced"  # vacancy swapped its match for the proposer
    REJECTED = "rejected"  # vacancy kept its current match
    DEFERRED = "deferred"  # vacancy empty but proposer already matched
    EXHAUSTED = "exhausted"  # proposer has no candidates left

    @property
    def changes_state(self) -> bool:
        """Whether this outcome keeps the round from converging."""
        return self in (
            ProposalOutcome.ACCEPTED,
            ProposalOutcome.DISPLACED,
            ProposalOutcome.DEFERRED,
        )
