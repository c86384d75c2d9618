# --- File: queenslab/z3_solver.py ---
# SMT encoding of the regional queens rules. Used to count solutions of a
# layout (up to a small limit) and as an independent check on the
# backtracking solver.
import logging
import time
from collections import defaultdict

from z3 import Solver, Bool, PbEq, Implies, And, Not, Or, sat, is_true


def format_duration(seconds):
    if seconds >= 60: return f"{int(seconds // 60)} min {seconds % 60:.2f} s"
    if seconds >= 1: return f"{seconds:.3f} s"
    return f"{seconds * 1000:.2f} ms"


class Z3QueensSolver:
    """Solves a region layout with Z3, one queen per row, column and region."""

    def __init__(self, region_grid):
        self.region_grid, self.dim = region_grid, len(region_grid)

    def _build(self):
        s = Solver()
        grid_vars = [[Bool(f"q_{r}_{c}") for c in range(self.dim)] for r in range(self.dim)]
        # Rule: exactly one queen per row and column
        for i in range(self.dim):
            s.add(PbEq([(grid_vars[i][c], 1) for c in range(self.dim)], 1))
            s.add(PbEq([(grid_vars[r][i], 1) for r in range(self.dim)], 1))
        # Rule: exactly one queen per region
        regions = defaultdict(list)
        for r in range(self.dim):
            for c in range(self.dim):
                regions[self.region_grid[r][c]].append(grid_vars[r][c])
        for r_vars in regions.values():
            s.add(PbEq([(var, 1) for var in r_vars], 1))
        # Rule: queens cannot touch, not even diagonally
        for r in range(self.dim):
            for c in range(self.dim):
                neighbors = []
                for dr in [-1, 0, 1]:
                    for dc in [-1, 0, 1]:
                        if dr == 0 and dc == 0: continue
                        nr, nc = r + dr, c + dc
                        if 0 <= nr < self.dim and 0 <= nc < self.dim:
                            neighbors.append(Not(grid_vars[nr][nc]))
                if neighbors:
                    s.add(Implies(grid_vars[r][c], And(neighbors)))
        return s, grid_vars

    def solve_and_count(self, limit=2):
        """
        Enumerates solutions until `limit` are found or none remain.

        :returns: (count, first_solution) where first_solution is a 0/1 grid
            or None when the layout has no solution.
        """
        s, grid_vars = self._build()
        solutions, start_time = [], time.monotonic()
        while len(solutions) < limit and s.check() == sat:
            model = s.model()
            solution = [
                [(1 if is_true(model.evaluate(grid_vars[r][c], model_completion=True)) else 0) for c in range(self.dim)]
                for r in range(self.dim)
            ]
            solutions.append(solution)
            # Block this solution before looking for another
            s.add(Or([Not(v) if solution[r][c] else v for r, row in enumerate(grid_vars) for c, v in enumerate(row)]))
        logging.debug(f"Z3 solve time: {format_duration(time.monotonic() - start_time)}")
        return len(solutions), (solutions[0] if solutions else None)

    def is_unique(self):
        count, _ = self.solve_and_count(limit=2)
        return count == 1
