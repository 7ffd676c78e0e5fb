import math
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .base import DistanceMatrix, Route, Solver, Tour, random_path, tour_length


def gen_neighbours(tour: Sequence[int]) -> Iterator[Tour]:
    """Every tour reachable from ``tour`` by exchanging the nodes at two positions."""
    n = len(tour)
    for i in range(n):
        for j in range(i + 1, n):
            neighbour = list(tour)
            neighbour[i], neighbour[j] = tour[j], tour[i]
            yield neighbour


def best_neighbour(matrix: DistanceMatrix, tour: Sequence[int]) -> Tuple[Tour, float]:
    best = None
    best_len = float("inf")
    for cand in gen_neighbours(tour):
        cand_len = tour_length(matrix, cand)
        if best is None or cand_len < best_len:
            best = cand
            best_len = cand_len
    return best, best_len


class HillClimbSolver(Solver):
    """
    Steepest-descent local search over the 2-swap neighbourhood.

    Starts from a random tour and repeatedly moves to the single best neighbour
    while that neighbour is strictly shorter. Stops at a local optimum, so
    different seeds can end on different tours.
    """

    name = "hill_climb"

    def solve(self, matrix: DistanceMatrix, rng: Optional[random.Random] = None) -> Route:
        rng = rng or random.Random()
        n = len(matrix)
        if n <= 1:
            return Route(path=tuple(range(n)), distance=0.0)
        best = random_path(n, rng)
        best_len = tour_length(matrix, best)
        while True:
            cand, cand_len = best_neighbour(matrix, best)
            if cand_len >= best_len:
                break
            best = cand
            best_len = cand_len
        return Route(path=tuple(best), distance=best_len)


def acceptance_probability(delta: float, temperature: float) -> float:
    """Metropolis criterion for a move that lengthens the tour by ``delta``."""
    if delta <= 0:
        return 1.0
    # A fully cooled schedule underflows to 0.0.
    if temperature <= 0:
        return 0.0
    return math.exp(-delta / temperature)


@dataclass
class AnnealingConfig:
    initial_temp: float = 1000.0
    cooling_rate: float = 0.99  # multiplicative, applied once per iteration
    num_iterations: int = 1000


class SimulatedAnnealingSolver(Solver):
    """
    Random 2-swap moves accepted by the Metropolis criterion.

    Improving (or neutral) swaps are always kept; a worsening swap of ``delta``
    survives with probability ``exp(-delta / temperature)``. The temperature is
    multiplied by ``cooling_rate`` after every iteration and the search stops
    after ``num_iterations``. The route returned is the final one, not the best
    one seen.
    """

    name = "simulated_annealing"

    def __init__(self, config: Optional[AnnealingConfig] = None):
        self.cfg = config or AnnealingConfig()

    def solve(self, matrix: DistanceMatrix, rng: Optional[random.Random] = None) -> Route:
        rng = rng or random.Random()
        n = len(matrix)
        if n == 0:
            return Route(path=(), distance=0.0)
        temperature = self.cfg.initial_temp
        tour: List[int] = random_path(n, rng)
        for _ in range(self.cfg.num_iterations):
            cur_len = tour_length(matrix, tour)
            # i == j is allowed and leaves the tour unchanged.
            i = rng.randrange(n)
            j = rng.randrange(n)
            tour[i], tour[j] = tour[j], tour[i]
            delta = tour_length(matrix, tour) - cur_len
            if delta > 0 and acceptance_probability(delta, temperature) < rng.random():
                tour[i], tour[j] = tour[j], tour[i]
            temperature *= self.cfg.cooling_rate
        return Route.from_tour(matrix, tour)
