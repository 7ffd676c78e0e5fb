import math
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .problem import Tsp
from .solvers.base import Route


@dataclass
class Evaluation:
    route: Route
    runtime: float
    solver_name: str

    def gap(self, optimum: Optional[float]) -> float:
        if optimum is None:
            return float("inf")
        if math.isclose(self.route.distance, optimum):
            return 0.0
        if math.isclose(optimum, 0.0):
            return float("inf")
        return (self.route.distance - optimum) / optimum


def evaluate(solver_name: str, solve: Callable[[], Route]) -> Evaluation:
    start = time.perf_counter()
    route = solve()
    runtime = time.perf_counter() - start
    return Evaluation(route=route, runtime=runtime, solver_name=solver_name)


def sample_routes(
    tsp: Tsp, n_samples: int = 10, rng: Optional[random.Random] = None
) -> List[Route]:
    rng = rng or random.Random()
    return [tsp.random_route(rng) for _ in range(n_samples)]


def average_distance(routes: Sequence[Route]) -> float:
    if not routes:
        return float("inf")
    return sum(r.distance for r in routes) / len(routes)
