"""Word Network - Measure the edit-distance-1 social network of a word."""

from word_network.solver.solve import main_solve, solve

__all__ = ["solve", "main_solve"]
