import sys
import os
import time
import random

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from textmaze.core.grid import Grid
from textmaze.algo.kruskal import RandomizedKruskal
from textmaze.algo.solvers import BFS, DepthFirstSolver, solve

def benchmark_size(width: int, height: int, seed: int = 42):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")
    start = (0, 0)
    finish = (height - 1, width - 1)

    # 1. Generation
    grid = Grid(width, height)
    algo = RandomizedKruskal(grid, random.Random(seed), start, finish)

    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start
    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Productive: {algo.productive_percent:.2f}% "
          f"({algo.productive_iterations}/{algo.total_iterations})")
    print(f"Open walls: {grid.open_wall_count():,}")

    # 2. Solving
    for name, cls in [("DFS", DepthFirstSolver), ("BFS", BFS)]:
        t_start = time.time()
        path = solve(grid, start, finish, cls)
        duration = time.time() - t_start
        path_len = len(path) if path else 0
        print(f"{name:<5} | {duration:<10.4f} | path {path_len}")

def run_suite():
    sizes = [
        (20, 20),
        (50, 50),
        (100, 100),
        (200, 200),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
