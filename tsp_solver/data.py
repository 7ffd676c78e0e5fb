import math
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import tsplib95


@dataclass(frozen=True)
class Node:
    id: int
    x: float
    y: float

    def __str__(self) -> str:
        return f"{self.id}: ({self.x:.2f}, {self.y:.2f})"


def calc_distance(a: Node, b: Node) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def random_nodes(
    n: int, rng: Optional[random.Random] = None, square_size: float = 100.0
) -> List[Node]:
    rng = rng or random.Random()
    return [
        Node(id=i, x=rng.uniform(0.0, square_size), y=rng.uniform(0.0, square_size))
        for i in range(n)
    ]


def load_nodes(path: Union[str, Path]) -> List[Node]:
    """
    Read node coordinates from a TSPLIB file.

    Nodes keep their TSPLIB labels as ids and are ordered by label, so matrix
    index i is the i-th smallest label. Instances given only as explicit edge
    weights have no coordinates and are rejected.
    """
    problem = tsplib95.load(str(path))
    coords = problem.node_coords
    if not coords:
        raise ValueError(
            f"{path} has no NODE_COORD_SECTION; only coordinate-based instances are supported."
        )
    nodes = []
    for label in sorted(coords):
        x, y = coords[label][:2]
        nodes.append(Node(id=int(label), x=float(x), y=float(y)))
    return nodes
