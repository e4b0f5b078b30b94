"""
Vacancy-profile matching engine.

Generalized Gale-Shapley (deferred acceptance). Profiles play the proposing
side and vacancies the deciding side. Whether a vacancy prefers a proposed
profile over its current match is answered by an injected preference
function, so the engine never looks inside the matched items.

Basic usage:

    engine = MatchingEngine(profiles, vacancies, prefers)
    pairs = engine.get_matches()  # [(vacancy, profile), ...]

``prefers(vacancy, current_match, new_match)`` must return True when the
vacancy would trade ``current_match`` (possibly None) for ``new_match``.
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, NamedTuple, Optional, TypeVar

from stable_match.core.matching.candidate_tracker import CandidateTracker
from stable_match.core.matching.exceptions import NonConvergenceError
from stable_match.utils.config import get_settings
from stable_match.utils.constants import ProposalOutcome
from stable_match.utils.logger import LoggerMixin

T = TypeVar("T")

PreferenceFn = Callable[[T, Optional[T], T], bool]


class MatchPair(NamedTuple, Generic[T]):
    """A matched ``(vacancy, profile)`` pair."""

    vacancy: T
    profile: T


@dataclass
class MatchingStats:
    """Counters collected while running the engine."""

    rounds: int = 0
    converged: bool = False
    evicted: int = 0
    matched: int = 0
    outcomes: dict[ProposalOutcome, int] = field(
        default_factory=lambda: {outcome: 0 for outcome in ProposalOutcome}
    )

    @property
    def proposals(self) -> int:
        """Proposals that actually reached a vacancy."""
        return sum(
            count for outcome, count in self.outcomes.items()
            if outcome is not ProposalOutcome.EXHAUSTED
        )


class MatchingEngine(LoggerMixin, Generic[T]):
    """
    Stable matching of profiles to vacancies.

    Flow:
    1. Wrap every profile (candidates = all vacancies) and every vacancy
       (candidates = all profiles) in a CandidateTracker
    2. Run proposal rounds until a round changes nothing, or fail once
       ``iteration_cap`` rounds have run
    3. Evict pairs the preference function does not endorse
    4. Read the pairs back in vacancy order

    The run happens once per engine; later calls reuse its state.
    """

    def __init__(
        self,
        profiles: Iterable[T],
        vacancies: Iterable[T],
        predicate: PreferenceFn[T],
        iteration_cap: Optional[int] = None,
    ):
        """
        Initialize the matching engine.

        Args:
            profiles: Proposing items ("grooms" in Gale-Shapley terms)
            vacancies: Deciding items ("brides" in Gale-Shapley terms)
            predicate: Decides whether a vacancy prefers a new profile to
                its current match
            iteration_cap: Maximum number of rounds before giving up.
                0 disables the cap, None uses the configured default.

        Raises:
            ValueError: If iteration_cap is negative
        """
        settings = get_settings().matching
        if iteration_cap is None:
            iteration_cap = settings.iteration_cap
        if iteration_cap < 0:
            raise ValueError(f"iteration_cap must be >= 0, got {iteration_cap}")

        profiles = list(profiles)
        vacancies = list(vacancies)

        self.profile_trackers: list[CandidateTracker[T]] = [
            CandidateTracker(profile, vacancies) for profile in profiles
        ]
        self.vacancy_trackers: list[CandidateTracker[T]] = [
            CandidateTracker(vacancy, profiles) for vacancy in vacancies
        ]
        self.predicate = predicate
        self.iteration_cap = iteration_cap
        self.log_rounds = settings.log_rounds
        self.stats = MatchingStats()

        self._converged = False
        self._started = False
        self._error: Optional[Exception] = None

    @property
    def converged(self) -> bool:
        """True once a round finished without any change."""
        return self._converged

    @property
    def rounds(self) -> int:
        """Number of proposal rounds run so far."""
        return self.stats.rounds

    def match(self) -> None:
        """
        Run the matching algorithm.

        Safe to call repeatedly: only the first call does any work. A failed
        run is not retried; later calls re-raise the same error.

        Raises:
            NonConvergenceError: If the iteration cap was reached without
                a round that changed nothing
            Exception: Whatever the preference function raised
        """
        if self._started:
            if self._error is not None:
                raise self._error
            return
        self._started = True

        self.logger.info(
            f"Matching {len(self.profile_trackers)} profiles against "
            f"{len(self.vacancy_trackers)} vacancies "
            f"(iteration cap: {self.iteration_cap or 'none'})"
        )

        try:
            self._run_rounds()
            self.stats.evicted = self.evict_unmatching()
        except Exception as exc:
            self._error = exc
            raise

        self.stats.matched = sum(
            1 for vacancy in self.vacancy_trackers if vacancy.is_matched
        )
        self.logger.info(
            f"Matching converged after {self.stats.rounds} rounds: "
            f"{self.stats.matched} pairs, {self.stats.evicted} evicted"
        )

    def _run_rounds(self) -> None:
        """Repeat proposal rounds until a fixed point or the iteration cap."""
        # The preference function comes from the caller, so nothing guarantees
        # this loop ends. The cap turns an endless loop into an error.
        while not self._converged and (
            self.iteration_cap <= 0 or self.stats.rounds < self.iteration_cap
        ):
            self._converged = True
            for profile_index, profile in enumerate(self.profile_trackers):
                outcome = self._propose(profile_index, profile)
                self.stats.outcomes[outcome] += 1
                if outcome.changes_state:
                    self._converged = False
            self.stats.rounds += 1

            if self.log_rounds:
                self.logger.debug(
                    f"Round {self.stats.rounds} finished "
                    f"(converged: {self._converged})"
                )

        self.stats.converged = self._converged
        if not self._converged:
            error = NonConvergenceError(self.stats.rounds, self.iteration_cap)
            self.logger.error(str(error))
            raise error

    def _propose(
        self, profile_index: int, profile: CandidateTracker[T]
    ) -> ProposalOutcome:
        """Let one profile propose to its next candidate vacancy."""
        vacancy_index = profile.next_candidate()
        if vacancy_index is None:
            return ProposalOutcome.EXHAUSTED

        vacancy = self.vacancy_trackers[vacancy_index]

        if vacancy.current_match is None:
            # An empty vacancy has nothing to compare against: it takes any
            # free profile. A profile that already holds a vacancy waits.
            if profile.current_match is None:
                self._pair(vacancy_index, profile_index)
                return ProposalOutcome.ACCEPTED
            return ProposalOutcome.DEFERRED

        current = self.profile_trackers[vacancy.current_match]
        if self.predicate(vacancy.subject, current.subject, profile.subject):
            self._pair(vacancy_index, profile_index)
            return ProposalOutcome.DISPLACED

        return ProposalOutcome.REJECTED

    def _pair(self, vacancy_index: int, profile_index: int) -> None:
        """Match a vacancy and a profile, releasing both previous partners."""
        vacancy = self.vacancy_trackers[vacancy_index]
        profile = self.profile_trackers[profile_index]

        if vacancy.current_match is not None:
            self.profile_trackers[vacancy.current_match].current_match = None
        if profile.current_match is not None:
            self.vacancy_trackers[profile.current_match].current_match = None

        vacancy.current_match = profile_index
        profile.current_match = vacancy_index

    def evict_unmatching(self) -> int:
        """
        Drop pairs the preference function does not endorse.

        Rounds only ever upgrade a vacancy relative to its previous match, so
        a vacancy can end up holding the only profile that ever proposed.
        Each surviving pair is re-checked by asking whether the vacancy
        prefers its match over itself.

        Does not touch ``stats``; ``match()`` records the count of its own
        eviction pass.

        Returns:
            Number of evicted pairs
        """
        evicted = 0
        for vacancy in self.vacancy_trackers:
            if vacancy.current_match is None:
                continue
            matched = self.profile_trackers[vacancy.current_match]
            if not self.predicate(vacancy.subject, matched.subject, matched.subject):
                self.logger.debug(
                    f"Evicting pair ({vacancy.subject!r}, {matched.subject!r})"
                )
                vacancy.current_match = None
                matched.current_match = None
                evicted += 1

        return evicted

    def get_matches(self) -> list[MatchPair[T]]:
        """
        Return the matches, running the matcher if it has not run yet.

        Returns:
            ``(vacancy, profile)`` pairs in vacancy input order
        """
        self.match()
        return [
            MatchPair(vacancy.subject, self.profile_trackers[vacancy.current_match].subject)
            for vacancy in self.vacancy_trackers
            if vacancy.current_match is not None
        ]

    def unmatched_profiles(self) -> list[T]:
        """Profiles left without a vacancy, in input order."""
        self.match()
        return [p.subject for p in self.profile_trackers if p.current_match is None]

    def unmatched_vacancies(self) -> list[T]:
        """Vacancies left without a profile, in input order."""
        self.match()
        return [v.subject for v in self.vacancy_trackers if v.current_match is None]


def stable_match(
    profiles: Iterable[T],
    vacancies: Iterable[T],
    predicate: PreferenceFn[T],
    iteration_cap: Optional[int] = None,
) -> list[MatchPair[T]]:
    """Match profiles to vacancies in one call. See MatchingEngine."""
    return MatchingEngine(profiles, vacancies, predicate, iteration_cap).get_matches()
