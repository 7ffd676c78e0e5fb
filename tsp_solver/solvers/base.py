import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np


Tour = List[int]


class DistanceMatrix:
    """
    Symmetric table of pairwise Euclidean distances, indexed by node position.
    Computed once per problem instance and shared read-only by every solver.
    """

    def __init__(self, values: np.ndarray):
        self.values = np.asarray(values, dtype=np.float64)
        self.values.flags.writeable = False

    @classmethod
    def from_nodes(cls, nodes: Sequence) -> "DistanceMatrix":
        xs = np.array([node.x for node in nodes], dtype=np.float64)
        ys = np.array([node.y for node in nodes], dtype=np.float64)
        # dx[i, j] = xs[i] - xs[j]
        dx = xs[:, None] - xs[None, :]
        dy = ys[:, None] - ys[None, :]
        return cls(np.hypot(dx, dy))

    def __len__(self) -> int:
        return self.values.shape[0]

    def __getitem__(self, key: Tuple[int, int]) -> float:
        return float(self.values[key])


def tour_length(matrix: DistanceMatrix, tour: Sequence[int]) -> float:
    if len(tour) == 0:
        return 0.0
    a = np.asarray(tour, dtype=np.intp)
    b = np.roll(a, -1)
    return float(matrix.values[a, b].sum())


def random_path(n: int, rng: random.Random) -> Tour:
    path = list(range(n))
    rng.shuffle(path)
    return path


@dataclass(frozen=True)
class Route:
    path: Tuple[int, ...]
    distance: float

    @classmethod
    def from_tour(cls, matrix: DistanceMatrix, tour: Sequence[int]) -> "Route":
        return cls(path=tuple(tour), distance=tour_length(matrix, tour))

    def is_valid(self, n: int) -> bool:
        return sorted(self.path) == list(range(n))

    def __str__(self) -> str:
        return f"{list(self.path)} distance={self.distance:.2f}"


class Solver(ABC):
    name: str = "base"

    @abstractmethod
    def solve(self, matrix: DistanceMatrix, rng: Optional[random.Random] = None) -> Route:
        raise NotImplementedError
