"""
Springboard level model.

A level is a row of springboards. Position ``i`` has a jump power ``p_i``;
from there the player may jump forward by 1..p_i positions. Power 0 marks a
mine, and the last position is the exit.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np


class InvalidLevelError(ValueError):
    """Raised when a level cannot be built from the given powers."""


class Level:
    """Immutable sequence of springboard powers."""

    __slots__ = ("_powers",)

    def __init__(self, powers: Iterable[int]):
        powers = tuple(int(p) for p in powers)
        if not powers:
            raise InvalidLevelError("Level must contain at least one springboard")
        self._powers: Tuple[int, ...] = powers

    @classmethod
    def coerce(cls, level: Union["Level", Sequence[int]]) -> "Level":
        """Return ``level`` unchanged if it is a Level, otherwise build one."""
        if isinstance(level, cls):
            return level
        return cls(level)

    @property
    def powers(self) -> Tuple[int, ...]:
        return self._powers

    @property
    def exit_index(self) -> int:
        return len(self._powers) - 1

    def __len__(self) -> int:
        return len(self._powers)

    def __getitem__(self, index):
        return self._powers[index]

    def __iter__(self):
        return iter(self._powers)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self._powers == other._powers

    def __hash__(self) -> int:
        return hash(self._powers)

    def __repr__(self) -> str:
        return f"Level({list(self._powers)})"

    def as_array(self) -> np.ndarray:
        """Read-only integer array of the powers."""
        array = np.array(self._powers, dtype=np.int64)
        array.flags.writeable = False
        return array

    def suffix(self, start: int) -> "Level":
        """The remaining puzzle after landing on ``start``."""
        if not 0 <= start < len(self._powers):
            raise IndexError(f"Suffix start {start} outside level of length {len(self)}")
        return Level(self._powers[start:])

    def is_exit(self, position: int) -> bool:
        """True if ``position`` is the exit and is safe to stand on."""
        return position == self.exit_index and self._powers[position] > 0

    def is_mine(self, position: int) -> bool:
        return self._powers[position] == 0

    def max_jump(self, position: int) -> int:
        """Longest legal jump from ``position`` without overshooting the exit."""
        return min(self._powers[position], self.exit_index - position)

    def count_mines(self) -> int:
        return sum(1 for p in self._powers if p == 0)

    def landing_positions(self, jumps: Sequence[int]) -> Optional[List[int]]:
        """Positions visited by following ``jumps`` from the start.

        Returns None as soon as a jump is illegal: longer than the current
        power, shorter than 1, past the exit, or taken from a mine.
        """
        position = 0
        positions = [position]
        for jump in jumps:
            if self.is_mine(position):
                return None
            if jump < 1 or jump > self.max_jump(position):
                return None
            position += jump
            positions.append(position)
        return positions

    def is_valid_jump_sequence(self, jumps: Sequence[int]) -> bool:
        """Check that ``jumps`` leads from the start to the exit without touching a mine."""
        positions = self.landing_positions(jumps)
        if positions is None:
            return False
        if any(self.is_mine(p) for p in positions):
            return False
        return self.is_exit(positions[-1])

    def to_dict(self) -> Dict[str, Any]:
        return {"powers": list(self._powers)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Level":
        return cls(data.get("powers", []))
