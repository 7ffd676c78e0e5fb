from .base import DistanceMatrix, Route, Solver, Tour, random_path, tour_length
from .exact import BruteForceSolver
from .heuristics import (
    AnnealingConfig,
    HillClimbSolver,
    SimulatedAnnealingSolver,
    acceptance_probability,
    best_neighbour,
    gen_neighbours,
)

__all__ = [
    "DistanceMatrix",
    "Route",
    "Solver",
    "Tour",
    "random_path",
    "tour_length",
    "BruteForceSolver",
    "AnnealingConfig",
    "HillClimbSolver",
    "SimulatedAnnealingSolver",
    "acceptance_probability",
    "best_neighbour",
    "gen_neighbours",
]
