import os
import tempfile
import unittest

from config import CFG
from io_files import write_layout_view_html, write_solution
from solver.search import solve_one


class WriteOutputsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self._orig_solution = CFG.SOLUTION_OUT
        self._orig_layout = CFG.LAYOUT_HTML

    def tearDown(self) -> None:
        CFG.SOLUTION_OUT = self._orig_solution
        CFG.LAYOUT_HTML = self._orig_layout

    def _read(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as fh:
            return fh.read()

    def test_write_solution_uses_configured_relative_path(self) -> None:
        CFG.SOLUTION_OUT = "outputs/custom_solution.txt"
        position = solve_one(4, 4, "LLZZ")

        path = write_solution(position, self.tmpdir.name)

        expected = os.path.join(self.tmpdir.name, "outputs", "custom_solution.txt")
        self.assertEqual(path, expected)
        self.assertEqual(self._read(path), "AAAB\nACBB\nCCBD\nCDDD\n")

    def test_write_solution_pretty(self) -> None:
        CFG.SOLUTION_OUT = "solution.txt"
        position = solve_one(4, 4, "LLZZ")

        path = write_solution(position, self.tmpdir.name, pretty=True)

        self.assertEqual(self._read(path), position.pretty())

    def test_write_solution_without_position(self) -> None:
        CFG.SOLUTION_OUT = ""

        path = write_solution(None, self.tmpdir.name)

        self.assertEqual(path, os.path.join(self.tmpdir.name, "solution.txt"))
        self.assertEqual(self._read(path), "No solution\n")

    def test_write_layout_view_html_accepts_absolute_path(self) -> None:
        target = os.path.join(self.tmpdir.name, "html", "layout.html")
        CFG.LAYOUT_HTML = target

        svg = "<svg></svg>"
        legend = "<li>A (L)</li>"

        path = write_layout_view_html(svg, legend, self.tmpdir.name, grid_label="4 × 4")

        self.assertEqual(path, target)
        contents = self._read(path)
        self.assertIn(svg, contents)
        self.assertIn(legend, contents)
        self.assertIn("<p>4 × 4</p>", contents)


if __name__ == "__main__":
    unittest.main()
