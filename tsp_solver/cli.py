import argparse
import random
import time
from typing import List, Optional

from tsp_solver.data import Node, load_nodes, random_nodes
from tsp_solver.evaluation import Evaluation, average_distance, evaluate, sample_routes
from tsp_solver.problem import Tsp
from tsp_solver.solvers.exact import BruteForceSolver
from tsp_solver.solvers.heuristics import AnnealingConfig, HillClimbSolver, SimulatedAnnealingSolver


DEFAULT_NODES = 8
BRUTE_FORCE_LIMIT = 10
ANNEALING = AnnealingConfig(initial_temp=1000.0, cooling_rate=0.99, num_iterations=1000)


def log(msg: str) -> None:
    ts = time.strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", flush=True)


def sep() -> None:
    print("-" * 60)


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"number of nodes expected, got {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"number of nodes must be positive, got {n}")
    return n


def _print_result(title: str, result: Evaluation, optimum: Optional[float]) -> None:
    print(f"{title}:")
    print(result.route)
    if optimum is not None:
        print(f"gap to optimum: {100 * result.gap(optimum):.2f}%")
    log(f"{result.solver_name} finished in {result.runtime:.3f}s")
    sep()


def _load(args, rng: random.Random) -> List[Node]:
    if args.tsplib:
        log(f"loading nodes from {args.tsplib}")
        return load_nodes(args.tsplib)
    return random_nodes(args.nodes, rng)


def run(args) -> None:
    rng = random.Random(args.seed)
    nodes = _load(args, rng)

    print("Nodes:")
    for node in nodes:
        print(node)
    sep()

    tsp = Tsp(nodes)
    samples = sample_routes(tsp, args.samples, rng)
    print("Random routes:")
    for route in samples:
        print(route)
    print(f"Average distance of random routes: {average_distance(samples):.2f}")
    sep()

    optimum = None
    if len(tsp) < BRUTE_FORCE_LIMIT:
        bf = evaluate(BruteForceSolver.name, lambda: tsp.brute_force(rng))
        optimum = bf.route.distance
        _print_result("Best route (brute force)", bf, None)

    hc = evaluate(HillClimbSolver.name, lambda: tsp.hill_climb(rng))
    _print_result("Best hill climbing route", hc, optimum)

    sa = evaluate(
        SimulatedAnnealingSolver.name,
        lambda: tsp.simulated_annealing(
            ANNEALING.initial_temp, ANNEALING.cooling_rate, ANNEALING.num_iterations, rng
        ),
    )
    _print_result("Best simulated annealing route", sa, optimum)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Solve a random TSP instance three ways")
    parser.add_argument(
        "nodes", nargs="?", type=positive_int, default=None,
        help=f"number of random nodes (default {DEFAULT_NODES})",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for node generation and solvers")
    parser.add_argument("--tsplib", default=None, help="read nodes from a TSPLIB file instead")
    parser.add_argument("--samples", type=positive_int, default=10, help="random routes to sample")
    parser.set_defaults(func=run)

    args = parser.parse_args(argv)
    if args.tsplib and args.nodes is not None:
        parser.error("a node count cannot be combined with --tsplib")
    if args.nodes is None:
        args.nodes = DEFAULT_NODES
    args.func(args)


if __name__ == "__main__":
    main()
