"""
Side-by-side comparison of the three springboard solvers.

Runs the plain checker, the path enumerator and the memoized solver on the
same levels and records whether they agree and how much work each did.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Union

import numpy as np
from tqdm import tqdm

from ..game.level import Level
from ..util.logger import logger
from .enumerator import PathEnumerator
from .feasibility import FeasibilityChecker
from .memoized import MemoizedSolver

log = logger.bind(component="benchmark")


@dataclass
class SolverComparison:
    """Answers and costs of all three solvers on one level."""

    level: Level
    reachable: bool
    reachable_memoized: bool
    found: bool
    jump_count: int
    checker_nodes: int
    enumerator_nodes: int
    memo_subproblems: int
    memo_cache_hits: int
    checker_ms: float
    enumerator_ms: float
    memoized_ms: float

    @property
    def agree(self) -> bool:
        return self.reachable == self.reachable_memoized == self.found


def compare_level(level: Union[Level, Sequence[int]]) -> SolverComparison:
    """Run every solver on one level."""
    level = Level.coerce(level)

    checked = FeasibilityChecker().check(level)
    enumerated = PathEnumerator().solve(level)
    memoized = MemoizedSolver().solve(level)

    comparison = SolverComparison(
        level=level,
        reachable=checked.reachable,
        reachable_memoized=memoized.reachable,
        found=enumerated.found,
        jump_count=len(enumerated.jumps) if enumerated.found else -1,
        checker_nodes=checked.nodes_explored,
        enumerator_nodes=enumerated.nodes_explored,
        memo_subproblems=memoized.subproblems_resolved,
        memo_cache_hits=memoized.cache_hits,
        checker_ms=checked.time_taken_ms,
        enumerator_ms=enumerated.time_taken_ms,
        memoized_ms=memoized.time_taken_ms,
    )
    if not comparison.agree:
        log.error(
            f"Solvers disagree on {level}: checker={checked.reachable} "
            f"memoized={memoized.reachable} enumerator={enumerated.found}"
        )
    return comparison


def compare_solvers(
    levels: Iterable[Union[Level, Sequence[int]]], show_progress: bool = True
) -> List[SolverComparison]:
    """Compare the solvers on a batch of levels.

    Args:
        levels: Levels or raw power sequences
        show_progress: Show a tqdm progress bar

    Returns:
        One SolverComparison per level, in input order
    """
    levels = [Level.coerce(level) for level in levels]
    comparisons = []

    with tqdm(
        total=len(levels), desc="Comparing solvers", disable=not show_progress
    ) as pbar:
        for level in levels:
            comparisons.append(compare_level(level))
            pbar.update(1)
            pbar.set_postfix({"len": len(level)})

    disagreements = sum(1 for c in comparisons if not c.agree)
    log.info(
        f"Compared {len(comparisons)} levels, {disagreements} disagreement(s)"
    )
    return comparisons


def summarize_comparisons(comparisons: Sequence[SolverComparison]) -> Dict[str, float]:
    """Aggregate a batch of comparisons into mean costs and rates."""
    if not comparisons:
        return {}

    solved = [c for c in comparisons if c.found]
    return {
        "levels": float(len(comparisons)),
        "solve_rate": len(solved) / len(comparisons),
        "agreement_rate": float(np.mean([c.agree for c in comparisons])),
        "mean_jump_count": (
            float(np.mean([c.jump_count for c in solved])) if solved else 0.0
        ),
        "mean_checker_nodes": float(np.mean([c.checker_nodes for c in comparisons])),
        "mean_enumerator_nodes": float(
            np.mean([c.enumerator_nodes for c in comparisons])
        ),
        "mean_memo_subproblems": float(
            np.mean([c.memo_subproblems for c in comparisons])
        ),
        "mean_checker_ms": float(np.mean([c.checker_ms for c in comparisons])),
        "mean_enumerator_ms": float(np.mean([c.enumerator_ms for c in comparisons])),
        "mean_memoized_ms": float(np.mean([c.memoized_ms for c in comparisons])),
    }
