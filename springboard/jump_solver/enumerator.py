"""
Exhaustive backtracking search for the shortest jump sequence.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from ..game.level import Level
from ..util.logger import logger


@dataclass
class JumpSearchResult:
    """Result of enumerating jump sequences.

    ``found`` separates "no solution" from "solved with zero jumps"; in both
    cases ``jumps`` is empty.
    """

    found: bool
    jumps: List[int] = field(default_factory=list)
    solutions_found: int = 0
    nodes_explored: int = 0
    time_taken_ms: float = 0.0

    @property
    def jump_count(self) -> Optional[int]:
        return len(self.jumps) if self.found else None


class _Frame:
    """One position on the current root-to-node path."""

    __slots__ = ("position", "next_jump", "max_jump")

    def __init__(self, position: int, max_jump: int):
        self.position = position
        self.next_jump = 1
        self.max_jump = max_jump


class PathEnumerator:
    """Walks every jump sequence of a level and keeps the shortest one."""

    def __init__(self):
        self.logger = logger.bind(component="enumerator")

    def solve(self, level: Union[Level, Sequence[int]]) -> JumpSearchResult:
        """Enumerate all solutions and return the shortest.

        Args:
            level: Level or raw sequence of powers

        Returns:
            JumpSearchResult; ties between equally short solutions go to the
            first one met with jumps tried in ascending order
        """
        level = Level.coerce(level)
        start_time = time.time()

        path: List[int] = []
        best: Optional[List[int]] = None
        solutions_found = 0
        nodes_explored = 0

        frames: List[_Frame] = []
        entering: Optional[int] = 0

        while entering is not None or frames:
            if entering is not None:
                position = entering
                entering = None
                nodes_explored += 1

                if level.is_exit(position):
                    solutions_found += 1
                    if best is None or len(path) < len(best):
                        best = list(path)
                    self._backtrack(frames, path)
                    continue
                if level.is_mine(position):
                    self._backtrack(frames, path)
                    continue

                frames.append(_Frame(position, level.max_jump(position)))
                continue

            frame = frames[-1]
            if frame.next_jump > frame.max_jump:
                frames.pop()
                self._backtrack(frames, path)
                continue

            jump = frame.next_jump
            frame.next_jump += 1
            path.append(jump)
            entering = frame.position + jump

        elapsed_ms = (time.time() - start_time) * 1000
        self.logger.debug(
            f"len={len(level)} solutions={solutions_found} nodes={nodes_explored} "
            f"best={best} in {elapsed_ms:.2f}ms"
        )

        if best is None:
            return JumpSearchResult(
                found=False,
                nodes_explored=nodes_explored,
                time_taken_ms=elapsed_ms,
            )
        return JumpSearchResult(
            found=True,
            jumps=best,
            solutions_found=solutions_found,
            nodes_explored=nodes_explored,
            time_taken_ms=elapsed_ms,
        )

    @staticmethod
    def _backtrack(frames: List[_Frame], path: List[int]) -> None:
        """Undo the jump that led to a finished node, unless it is the root."""
        if frames:
            path.pop()


def shortest_jump_sequence(level: Union[Level, Sequence[int]]) -> JumpSearchResult:
    """Shortest jump sequence from the start to the exit, if there is one."""
    return PathEnumerator().solve(level)
