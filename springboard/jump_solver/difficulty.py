"""
Difficulty scoring for springboard levels.
"""

import math
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

from ..game.level import Level
from .enumerator import JumpSearchResult, shortest_jump_sequence
from .memoized import reachability_table


class DifficultyLabel(Enum):
    """Difficulty labels for levels."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    BRUTAL = "Brutal"
    UNSOLVABLE = "Unsolvable"


class DifficultyScorer:
    """Scores level difficulty based on the solution and the level layout."""

    @staticmethod
    def count_traps(level: Level) -> int:
        """Safe springboards from which the exit can no longer be reached."""
        table = reachability_table(level)
        return sum(
            1
            for position, reachable in enumerate(table)
            if not reachable and not level.is_mine(position)
        )

    @staticmethod
    def score_level(
        level: Union[Level, Sequence[int]],
        solution: Optional[JumpSearchResult] = None,
    ) -> float:
        """Calculate difficulty score for a level.

        Args:
            level: Level to score
            solution: Shortest-path result, computed if not given

        Returns:
            Difficulty score, ``inf`` when the exit cannot be reached
        """
        level = Level.coerce(level)
        if solution is None:
            solution = shortest_jump_sequence(level)
        if not solution.found:
            return math.inf

        mines = level.count_mines()
        traps = DifficultyScorer.count_traps(level)

        return 1.0 * len(solution.jumps) + 2.0 * mines + 0.5 * traps

    @staticmethod
    def get_difficulty_label(score: float) -> DifficultyLabel:
        """Get difficulty label from score."""
        if math.isinf(score):
            return DifficultyLabel.UNSOLVABLE
        elif score <= 4:
            return DifficultyLabel.EASY
        elif score <= 10:
            return DifficultyLabel.MEDIUM
        elif score <= 20:
            return DifficultyLabel.HARD
        else:
            return DifficultyLabel.BRUTAL

    @staticmethod
    def score_and_label(
        level: Union[Level, Sequence[int]],
        solution: Optional[JumpSearchResult] = None,
    ) -> Tuple[float, DifficultyLabel]:
        """Calculate both score and label.

        Returns:
            (score, label) tuple
        """
        score = DifficultyScorer.score_level(level, solution)
        label = DifficultyScorer.get_difficulty_label(score)
        return score, label
