"""
Reference answers for small levels, computed independently of the solvers.
"""

import itertools
from collections import deque
from typing import List, Optional

from springboard.game.level import Level


def all_levels(max_length: int = 5, max_power: int = 3) -> List[Level]:
    """Every level up to ``max_length`` springboards with powers in 0..max_power."""
    levels = []
    for length in range(1, max_length + 1):
        for powers in itertools.product(range(max_power + 1), repeat=length):
            levels.append(Level(powers))
    return levels


def min_jump_count(level: Level) -> Optional[int]:
    """Fewest jumps to the exit by breadth-first search, None if unreachable."""
    if level.is_mine(0):
        return None
    distances = {0: 0}
    queue = deque([0])
    while queue:
        position = queue.popleft()
        if level.is_exit(position):
            return distances[position]
        if level.is_mine(position):
            continue
        for jump in range(1, level.max_jump(position) + 1):
            target = position + jump
            if target not in distances:
                distances[target] = distances[position] + 1
                queue.append(target)
    return None


SCENARIOS = [
    ([0], False, None),
    ([5], True, []),
    ([1, 1, 1, 1], True, [1, 1, 1]),
    ([3, 1, 1, 1], True, [3]),
    ([2, 0, 1, 0, 1], False, None),
]


SMALL_LEVELS = all_levels()
