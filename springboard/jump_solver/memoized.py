"""
Feasibility check with a memo table over suffixes.

Within one call the level is fixed, so a suffix is identified by the index it
starts at. Each index is resolved at most once, which bounds the work by
O(n^2) instead of the exponential tree walked by the plain checker.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

from ..game.level import Level
from ..util.logger import logger


@dataclass
class MemoResult:
    """Result of a memoized feasibility check."""

    reachable: bool
    memo: Dict[int, bool] = field(default_factory=dict)
    cache_hits: int = 0
    subproblems_resolved: int = 0
    time_taken_ms: float = 0.0


class _Frame:
    __slots__ = ("position", "next_jump", "max_jump")

    def __init__(self, position: int, max_jump: int):
        self.position = position
        self.next_jump = 1
        self.max_jump = max_jump


class MemoizedSolver:
    """Decides reachability, resolving each suffix once."""

    def __init__(self):
        self.logger = logger.bind(component="memoized")

    def solve(self, level: Union[Level, Sequence[int]]) -> MemoResult:
        """Resolve the whole level, filling the memo table on the way.

        Args:
            level: Level or raw sequence of powers

        Returns:
            MemoResult whose ``memo`` maps every resolved start index to the
            feasibility of the suffix starting there
        """
        level = Level.coerce(level)
        start_time = time.time()

        memo: Dict[int, bool] = {}
        cache_hits = 0

        frames: List[_Frame] = []
        # Result of the frame popped last, handed to its parent
        child_result: Optional[bool] = self._enter(level, 0, memo, frames)

        while frames:
            frame = frames[-1]

            if child_result:
                # A child reached the exit, so this suffix does too
                self._finish(frame, True, memo, frames)
                continue

            descended = False
            while frame.next_jump <= frame.max_jump:
                target = frame.position + frame.next_jump
                frame.next_jump += 1

                if target in memo:
                    cache_hits += 1
                    child_result = memo[target]
                else:
                    child_result = self._enter(level, target, memo, frames)
                    if child_result is None:
                        descended = True
                        break
                if child_result:
                    break

            if descended:
                continue
            child_result = bool(child_result)
            self._finish(frame, child_result, memo, frames)

        reachable = memo[0]
        elapsed_ms = (time.time() - start_time) * 1000
        self.logger.debug(
            f"len={len(level)} reachable={reachable} subproblems={len(memo)} "
            f"hits={cache_hits} in {elapsed_ms:.2f}ms"
        )
        return MemoResult(
            reachable=reachable,
            memo=memo,
            cache_hits=cache_hits,
            subproblems_resolved=len(memo),
            time_taken_ms=elapsed_ms,
        )

    @staticmethod
    def _enter(
        level: Level, position: int, memo: Dict[int, bool], frames: List[_Frame]
    ) -> Optional[bool]:
        """Resolve ``position`` if it is terminal, else push a frame for it.

        Returns the feasibility of a terminal position, or None when a frame
        was pushed and the answer is still pending.
        """
        if level.is_exit(position):
            memo[position] = True
            return True
        if level.is_mine(position):
            memo[position] = False
            return False
        frames.append(_Frame(position, level.max_jump(position)))
        return None

    @staticmethod
    def _finish(
        frame: _Frame, result: bool, memo: Dict[int, bool], frames: List[_Frame]
    ) -> None:
        # Stored under the suffix this frame resolved, never under its caller
        memo[frame.position] = result
        frames.pop()


def is_reachable_memoized(level: Union[Level, Sequence[int]]) -> bool:
    """Same answer as ``is_reachable``, computed with suffix memoization."""
    return MemoizedSolver().solve(level).reachable


def reachability_table(level: Union[Level, Sequence[int]]) -> List[bool]:
    """Feasibility of the suffix starting at every index, computed bottom-up."""
    level = Level.coerce(level)
    table = [False] * len(level)
    for position in range(level.exit_index, -1, -1):
        if level.is_exit(position):
            table[position] = True
        elif level.is_mine(position):
            table[position] = False
        else:
            table[position] = any(
                table[position + jump]
                for jump in range(1, level.max_jump(position) + 1)
            )
    return table
