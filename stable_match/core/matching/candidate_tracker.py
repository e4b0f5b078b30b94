"""
Per-item proposal bookkeeping.

A tracker wraps one caller item so the engine can keep matching state
(current partner, next candidate to try) without touching the item itself.
"""

from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


class CandidateTracker(Generic[T]):
    """
    Matching state for a single profile or vacancy.

    ``candidates`` is the opposite side's item list; ``candidates[i]``
    belongs to tracker ``i`` on the opposite side, and ``current_match``
    uses the same indexing.
    """

    def __init__(self, subject: T, candidates: Sequence[T]):
        """
        Args:
            subject: The wrapped item
            candidates: Items that may be matched with ``subject``
        """
        self._subject = subject
        self.candidates = candidates
        self.current_match: Optional[int] = None
        self.cursor = 0

    @property
    def subject(self) -> T:
        """The wrapped item."""
        return self._subject

    @property
    def is_matched(self) -> bool:
        return self.current_match is not None

    @property
    def is_exhausted(self) -> bool:
        """True once every candidate has been handed out."""
        return self.cursor >= len(self.candidates)

    def next_candidate(self) -> Optional[int]:
        """
        Return the index of the next candidate and advance the cursor.

        Returns:
            The candidate index, or None once all candidates were processed
        """
        if self.is_exhausted:
            return None
        index = self.cursor
        self.cursor += 1
        return index

    def __repr__(self) -> str:
        return (
            f"CandidateTracker(subject={self._subject!r}, "
            f"current_match={self.current_match}, "
            f"cursor={self.cursor}/{len(self.candidates)})"
        )
