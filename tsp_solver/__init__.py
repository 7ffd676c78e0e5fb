"""
Small TSP solver: exact brute force, hill climbing and simulated annealing over 2-D points.
"""

__all__ = [
    "data",
    "evaluation",
    "problem",
    "solvers",
]
