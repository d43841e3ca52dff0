import argparse
import sys
import os
import logging
import random
from datetime import datetime

# Ensure project root is in path so we can import 'textmaze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

logger = logging.getLogger("textmaze")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n

def resolve_seed(seed: int) -> int:
    """-1 asks for a time-derived seed."""
    if seed == -1:
        return datetime.now().microsecond
    return seed

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textmaze",
        description="Text Maze: random perfect maze generator and solver"
    )
    parser.add_argument("width", type=positive_int, nargs="?", default=None, help="Maze Width (default 50)")
    parser.add_argument("height", type=positive_int, nargs="?", default=None, help="Maze Height (default 50)")
    parser.add_argument("breadcrumbs", type=int, nargs="?", default=1, help="Show solution path (0 or 1)")
    parser.add_argument("seed", type=int, nargs="?", default=-1, help="Random Seed (-1 = time based)")
    parser.add_argument("mask", type=str, nargs="?", default=None, help="Width*Height 1-bit mask image")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--solver", type=str, default="dfs", choices=["dfs", "bfs"], help="Solver algorithm")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    # Width and height only count as a pair
    if args.height is None:
        if args.width is not None:
            logger.warning(f"Ignoring width {args.width} given without a height; using 50x50")
        args.width, args.height = 50, 50

    width, height = args.width, args.height
    breadcrumbs = bool(args.breadcrumbs)
    seed = resolve_seed(args.seed)
    start = (0, 0)
    finish = (height - 1, width - 1)

    logger.debug(f"Generating {width}x{height} maze with seed {seed}...")
    rng = random.Random(seed)

    mask = set()
    if args.mask:
        from textmaze.io.mask import load_mask
        mask = load_mask(args.mask, width, height)
        for endpoint in (start, finish):
            if endpoint in mask:
                logger.warning(f"Mask covers endpoint {endpoint}; leaving it open")
                mask.discard(endpoint)

    from textmaze.core.grid import Grid
    from textmaze.algo.kruskal import RandomizedKruskal
    grid = Grid(width, height)
    generator = RandomizedKruskal(grid, rng, start, finish, mask)
    generator.run_all()

    # A performance statistic
    print(f"{generator.productive_percent:.2f}% productive "
          f"({generator.productive_iterations}/{generator.total_iterations})")

    path = None
    if breadcrumbs:
        from textmaze.algo.solvers import SOLVERS, solve
        logger.debug(f"Solving with {args.solver.upper()} from {start} to {finish}...")
        path = solve(grid, start, finish, SOLVERS[args.solver])
        if path is None:
            logger.warning("No solution found; drawing without breadcrumbs")
        else:
            logger.debug(f"Solution length: {len(path)}")

    from textmaze.viz.text_renderer import TextRenderer
    TextRenderer(grid, start, finish, path=path, mask=mask).draw()

    mask_fn = args.mask or ""
    prog = parser.prog
    print(f"\tReproduce: {prog} {width} {height} {int(breadcrumbs)} {seed} {mask_fn} ; "
          f"or, {'without' if breadcrumbs else 'with'} breadcrumbs: "
          f"{prog} {width} {height} {int(not breadcrumbs)} {seed} {mask_fn}")
    return 0

if __name__ == "__main__":
    main()
