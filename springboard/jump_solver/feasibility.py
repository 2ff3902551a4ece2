"""
Plain depth-first feasibility check for springboard levels.

No memoization: the same suffix may be explored many times, so the worst
case is exponential in the level length. Kept as the reference answer for
the memoized solver.
"""

import time
from dataclasses import dataclass
from typing import List, Sequence, Union

from ..game.level import Level
from ..util.logger import logger


@dataclass
class FeasibilityResult:
    """Result of a feasibility check."""

    reachable: bool
    nodes_explored: int
    time_taken_ms: float


class FeasibilityChecker:
    """Decides whether the exit of a level can be reached."""

    def __init__(self):
        self.logger = logger.bind(component="feasibility")

    def check(self, level: Union[Level, Sequence[int]]) -> FeasibilityResult:
        """Search the jump tree until one path reaches the exit.

        Args:
            level: Level or raw sequence of powers

        Returns:
            FeasibilityResult with the answer and search statistics
        """
        level = Level.coerce(level)
        start_time = time.time()

        # Positions still to visit; the top of the stack is explored next.
        stack: List[int] = [0]
        nodes_explored = 0
        reachable = False

        while stack:
            position = stack.pop()
            nodes_explored += 1

            if level.is_exit(position):
                reachable = True
                break
            if level.is_mine(position):
                continue

            # Push longest jump first so the shortest jump is tried first
            for jump in range(level.max_jump(position), 0, -1):
                stack.append(position + jump)

        elapsed_ms = (time.time() - start_time) * 1000
        self.logger.debug(
            f"len={len(level)} reachable={reachable} nodes={nodes_explored} "
            f"in {elapsed_ms:.2f}ms"
        )
        return FeasibilityResult(reachable, nodes_explored, elapsed_ms)


def is_reachable(level: Union[Level, Sequence[int]]) -> bool:
    """True if some jump sequence leads from the start to the exit."""
    return FeasibilityChecker().check(level).reachable
