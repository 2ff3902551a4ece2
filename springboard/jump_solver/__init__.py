"""
Solvers for springboard levels.

Decides whether the exit can be reached, finds a shortest jump sequence,
and offers a memoized decision procedure.
"""

from .benchmark import SolverComparison, compare_solvers, summarize_comparisons
from .difficulty import DifficultyLabel, DifficultyScorer
from .enumerator import JumpSearchResult, PathEnumerator, shortest_jump_sequence
from .feasibility import FeasibilityChecker, FeasibilityResult, is_reachable
from .memoized import (MemoizedSolver, MemoResult, is_reachable_memoized,
                       reachability_table)

__all__ = [
    "FeasibilityChecker",
    "FeasibilityResult",
    "is_reachable",
    "PathEnumerator",
    "JumpSearchResult",
    "shortest_jump_sequence",
    "MemoizedSolver",
    "MemoResult",
    "is_reachable_memoized",
    "reachability_table",
    "DifficultyScorer",
    "DifficultyLabel",
    "SolverComparison",
    "compare_solvers",
    "summarize_comparisons",
]
