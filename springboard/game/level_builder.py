"""
LevelBuilder for generating springboard levels.

Generates random levels for exercising and comparing the solvers.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

from ..jump_solver.memoized import is_reachable_memoized
from ..util.logger import logger
from .level import Level


@dataclass
class LevelConfig:
    """Configuration for level generation."""

    length: int = 10
    max_power: int = 3
    mine_probability: float = 0.2
    exit_power: int = 1  # 0 turns the exit into a mine

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.length <= 0:
            raise ValueError("length must be positive")

        if self.max_power <= 0:
            raise ValueError("max_power must be positive")

        if not (0.0 <= self.mine_probability <= 1.0):
            raise ValueError("mine_probability must be between 0.0 and 1.0")

        if self.exit_power < 0:
            raise ValueError("exit_power must not be negative")


class LevelBuilder:
    """Generates springboard levels."""

    def __init__(self, config: Optional[LevelConfig] = None, seed: Optional[int] = None):
        """Initialize level builder with configuration.

        Args:
            config: Level generation configuration
            seed: Random seed for deterministic generation
        """
        self.config = config or LevelConfig()
        self.rng = random.Random(seed)
        self.logger = logger.bind(component="level_builder")

    def generate_level(self) -> Level:
        """Generate a random level.

        The start is never a mine; every other springboard before the exit is
        a mine with probability ``mine_probability``.
        """
        powers: List[int] = []
        for position in range(self.config.length - 1):
            if position > 0 and self.rng.random() < self.config.mine_probability:
                powers.append(0)
            else:
                powers.append(self.rng.randint(1, self.config.max_power))
        powers.append(self.config.exit_power)
        return Level(powers)

    def generate_solvable_level(self, max_attempts: int = 100) -> Level:
        """Generate levels until one has a reachable exit.

        Raises:
            RuntimeError: if no solvable level was produced in ``max_attempts``
        """
        for attempt in range(1, max_attempts + 1):
            level = self.generate_level()
            if is_reachable_memoized(level):
                self.logger.debug(f"Solvable level after {attempt} attempt(s): {level}")
                return level

        raise RuntimeError(
            f"No solvable level generated in {max_attempts} attempts "
            f"(config: {self.config})"
        )

    def generate_levels(self, count: int) -> List[Level]:
        return [self.generate_level() for _ in range(count)]

    @staticmethod
    def adversarial_level(length: int, reachable: bool = True) -> Level:
        """Level with the most branching: every power equals the distance left.

        With ``reachable=False`` the exit is a mine, so a search without
        memoization has to try every path before giving up.
        """
        if length <= 0:
            raise ValueError("length must be positive")
        if length == 1:
            return Level([1 if reachable else 0])

        powers = [length - 1 - position for position in range(length - 1)]
        powers.append(1 if reachable else 0)
        return Level(powers)
