import random

from tsp_solver.data import random_nodes
from tsp_solver.evaluation import evaluate
from tsp_solver.problem import Tsp
from tsp_solver.solvers.heuristics import AnnealingConfig, HillClimbSolver, SimulatedAnnealingSolver


def main():
    cfg = AnnealingConfig(initial_temp=1000.0, cooling_rate=0.995, num_iterations=5000)
    restarts = 5
    for seed in range(3):
        rng = random.Random(seed)
        tsp = Tsp(random_nodes(8, rng))
        optimum = tsp.brute_force().distance
        # Independent restarts share the read-only distance matrix.
        hc = min(
            (evaluate(HillClimbSolver.name, lambda: tsp.hill_climb(rng)) for _ in range(restarts)),
            key=lambda e: e.route.distance,
        )
        sa = evaluate(
            SimulatedAnnealingSolver.name,
            lambda: tsp.simulated_annealing(cfg.initial_temp, cfg.cooling_rate, cfg.num_iterations, rng),
        )
        print(
            f"seed {seed}: optimum={optimum:.2f} "
            f"hill_climb={hc.route.distance:.2f} (gap {100 * hc.gap(optimum):.1f}%) "
            f"annealing={sa.route.distance:.2f} (gap {100 * sa.gap(optimum):.1f}%)"
        )


if __name__ == "__main__":
    main()
