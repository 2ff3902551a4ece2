"""
Tests for the plain feasibility checker.
"""

import pytest
from level_oracles import SCENARIOS, SMALL_LEVELS, min_jump_count

from springboard.game.level import InvalidLevelError, Level
from springboard.jump_solver.feasibility import FeasibilityChecker, is_reachable


class TestFeasibilityChecker:
    """Test feasibility checking."""

    @pytest.mark.parametrize("powers,reachable,_jumps", SCENARIOS)
    def test_scenarios(self, powers, reachable, _jumps):
        """Known levels give the known answer."""
        assert is_reachable(powers) is reachable

    def test_mine_at_start(self):
        """A mine at the start is fatal whatever follows."""
        for length in range(1, 8):
            assert is_reachable([0] + [9] * (length - 1)) is False

    def test_single_springboard_is_exit(self):
        """A one-springboard level is solved iff its power is positive."""
        assert is_reachable([1]) is True
        assert is_reachable([100]) is True
        assert is_reachable([0]) is False

    def test_exit_mine(self):
        """Landing on a mined exit does not count as escaping."""
        assert is_reachable([3, 3, 3, 0]) is False

    def test_jump_over_mines(self):
        """Mines can be jumped over."""
        assert is_reachable([3, 0, 0, 1]) is True
        assert is_reachable([2, 0, 0, 1]) is False

    def test_accepts_level_instance(self):
        """Level objects and raw sequences are both accepted."""
        assert is_reachable(Level([2, 0, 1])) is True
        assert is_reachable((2, 0, 1)) is True

    def test_empty_level_rejected(self):
        """Empty levels fail before any search."""
        with pytest.raises(InvalidLevelError):
            is_reachable([])

    def test_matches_reference(self):
        """Agrees with a breadth-first reference on every small level."""
        for level in SMALL_LEVELS:
            assert is_reachable(level) == (min_jump_count(level) is not None), level

    def test_long_level_does_not_hit_recursion_limit(self):
        """Search depth is not bounded by the interpreter stack."""
        assert is_reachable([1] * 5000) is True
        assert is_reachable([1] * 4999 + [0]) is False

    def test_result_statistics(self):
        """check() reports nodes explored and timing."""
        result = FeasibilityChecker().check([1, 1, 1, 1])
        assert result.reachable is True
        assert result.nodes_explored == 4
        assert result.time_taken_ms >= 0

    def test_stops_at_first_solution(self):
        """The search stops as soon as the exit is reached."""
        result = FeasibilityChecker().check([3, 1, 1, 1])
        # Shortest jumps are tried first: 0 -> 1 -> 2 -> 3
        assert result.nodes_explored == 4
