import io
import unittest
import sys
import os
import shutil
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from textmaze.main import main, resolve_seed

class TestCLI(unittest.TestCase):
    def run_main(self, *args):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(list(args))
        self.assertEqual(code, 0)
        return out.getvalue().splitlines()

    def test_reproducible(self):
        first = self.run_main("8", "6", "1", "77")
        second = self.run_main("8", "6", "1", "77")
        self.assertEqual(first, second)

    def test_layout(self):
        w, h = 8, 6
        lines = self.run_main(str(w), str(h), "1", "77")
        self.assertRegex(lines[0], r"^\d+\.\d{2}% productive \(\d+/\d+\)$")

        maze = lines[1:-1]
        self.assertEqual(len(maze), 2 * h + 1)
        self.assertEqual(maze[1][1], "S")
        self.assertEqual(maze[2 * h - 1][2 * w - 1], "E")
        self.assertIn(".", "".join(maze))

        self.assertEqual(
            lines[-1],
            "\tReproduce: textmaze 8 6 1 77  ; "
            "or, without breadcrumbs: textmaze 8 6 0 77 "
        )

    def test_no_breadcrumbs(self):
        lines = self.run_main("8", "6", "0", "77")
        self.assertNotIn(".", "".join(lines[1:-1]))
        self.assertIn("or, with breadcrumbs: textmaze 8 6 1 77", lines[-1])

    def test_breadcrumbs_coerced(self):
        lines = self.run_main("5", "5", "7", "3")
        self.assertIn("Reproduce: textmaze 5 5 1 3", lines[-1])

    def test_same_maze_with_and_without_breadcrumbs(self):
        with_path = self.run_main("10", "10", "1", "5")
        without = self.run_main("10", "10", "0", "5")
        self.assertEqual(
            [l.replace(".", " ") for l in with_path[1:-1]],
            without[1:-1]
        )

    def test_bfs_solver_matches(self):
        dfs = self.run_main("10", "10", "1", "5")
        bfs = self.run_main("10", "10", "1", "5", "--solver", "bfs")
        self.assertEqual(dfs[:-1], bfs[:-1])

    def test_bad_mask_degrades(self):
        os.makedirs("test_out", exist_ok=True)
        try:
            path = os.path.join("test_out", "missing.pbm")
            with self.assertLogs("textmaze", level="WARNING"):
                lines = self.run_main("6", "6", "1", "9", path)
            self.assertTrue(lines[-1].endswith(path))
            self.assertEqual(lines[1:-1], self.run_main("6", "6", "1", "9")[1:-1])
        finally:
            shutil.rmtree("test_out", ignore_errors=True)

    def test_width_without_height(self):
        # A lone width falls back to the default size
        with self.assertLogs("textmaze", level="WARNING"):
            lines = self.run_main("8")
        maze = lines[1:-1]
        self.assertEqual(len(maze), 2 * 50 + 1)
        self.assertEqual(len(maze[0]), 2 * 50 + 1)
        self.assertIn("Reproduce: textmaze 50 50 1 ", lines[-1])

    def test_resolve_seed(self):
        self.assertEqual(resolve_seed(42), 42)
        seed = resolve_seed(-1)
        self.assertGreaterEqual(seed, 0)
        self.assertLess(seed, 1_000_000)

if __name__ == '__main__':
    unittest.main()
