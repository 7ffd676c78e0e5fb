import itertools
import random
from typing import Optional

from .base import DistanceMatrix, Route, Solver, tour_length


class BruteForceSolver(Solver):
    """
    Exhaustive search over every visiting order. Exact, but O(n!): callers decide
    when an instance is small enough (the CLI stops at 9 nodes).
    """

    name = "brute_force"

    def solve(self, matrix: DistanceMatrix, rng: Optional[random.Random] = None) -> Route:
        best = None
        best_len = float("inf")
        # permutations(range(0)) yields a single empty tuple, so n=0 is covered.
        for path in itertools.permutations(range(len(matrix))):
            length = tour_length(matrix, path)
            if best is None or length < best_len:
                best = path
                best_len = length
        return Route(path=best, distance=best_len)
