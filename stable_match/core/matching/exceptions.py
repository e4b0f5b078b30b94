"""Errors raised by the matching engine."""


class MatchingError(Exception):
    """Base class for matching failures."""


class NonConvergenceError(MatchingError):
    """
    The proposal rounds hit the iteration cap without reaching a fixed point.

    Usually means the preference function is not monotone, or the cap is
    too low for the size of the input.
    """

    def __init__(self, rounds: int, iteration_cap: int):
        self.rounds = rounds
        self.iteration_cap = iteration_cap
        super().__init__(
            f"Matching did not converge after {rounds} rounds "
            f"(iteration cap {iteration_cap})"
        )
