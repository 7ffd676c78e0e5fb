import random
from typing import Optional, Sequence

from .data import Node
from .solvers.base import DistanceMatrix, Route, random_path, tour_length
from .solvers.exact import BruteForceSolver
from .solvers.heuristics import AnnealingConfig, HillClimbSolver, SimulatedAnnealingSolver


class Tsp:
    """
    A fixed set of nodes and the distances between them.

    The distance matrix is computed once here and handed to every solver, so
    repeated or concurrent solves over the same instance never recompute it.
    """

    def __init__(self, nodes: Sequence[Node]):
        self.nodes = tuple(nodes)
        self.matrix = DistanceMatrix.from_nodes(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def calc_path_distance(self, path: Sequence[int]) -> float:
        return tour_length(self.matrix, path)

    def random_route(self, rng: Optional[random.Random] = None) -> Route:
        path = random_path(len(self.nodes), rng or random.Random())
        return Route.from_tour(self.matrix, path)

    def brute_force(self, rng: Optional[random.Random] = None) -> Route:
        return BruteForceSolver().solve(self.matrix, rng)

    def hill_climb(self, rng: Optional[random.Random] = None) -> Route:
        return HillClimbSolver().solve(self.matrix, rng)

    def simulated_annealing(
        self,
        initial_temp: float,
        cooling_rate: float,
        num_iterations: int,
        rng: Optional[random.Random] = None,
    ) -> Route:
        cfg = AnnealingConfig(
            initial_temp=initial_temp,
            cooling_rate=cooling_rate,
            num_iterations=num_iterations,
        )
        return SimulatedAnnealingSolver(cfg).solve(self.matrix, rng)
