"""Unit tests for ThreatAnalyzer."""

from trapbot.grid import Grid
from trapbot.lines import LineGeometry
from trapbot.threats import Parity, ThreatAnalyzer

from boards import EMPTY_ROW


def analyzer_for(grid: Grid) -> ThreatAnalyzer:
    return ThreatAnalyzer(grid, LineGeometry(grid))


class TestThreats:
    """Tests for threat classification by row parity."""

    def test_empty_board_has_no_threats(self) -> None:
        threats = analyzer_for(Grid(6, 7))
        for player_id in (1, 2):
            assert threats.odd_threats(player_id) == {}
            assert threats.even_threats(player_id) == {}

    def test_odd_and_even_threats(self, make_grid) -> None:
        """Bottom row 5 is odd, the cell on top of a stack of three in row 2 is even."""
        grid = make_grid(
            EMPTY_ROW,
            EMPTY_ROW,
            EMPTY_ROW,
            "0000001",
            "0000001",
            "1110001",
        )
        threats = analyzer_for(grid)
        assert threats.odd_threats(1) == {3: 5}
        assert threats.even_threats(1) == {6: 2}
        assert threats.odd_threats(2) == {}
        assert threats.even_threats(2) == {}

    def test_threats_helper_matches_parity_methods(self, stack_trap_board, make_grid) -> None:
        threats = analyzer_for(make_grid(*stack_trap_board))
        assert threats.threats(1, Parity.ODD) == threats.odd_threats(1)
        assert threats.threats(1, Parity.EVEN) == threats.even_threats(1)

    def test_upper_threat_in_stack_trap_board(self, stack_trap_board, make_grid) -> None:
        """Cell (3, 3) finishes player 1's row of three."""
        threats = analyzer_for(make_grid(*stack_trap_board))
        assert threats.odd_threats(1).get(3) == 3


class TestThreatBuilding:
    """Tests for moves that create threats."""

    def test_bottom_row_first(self, middle_trap_board, make_grid) -> None:
        """Odd rows are visited bottom-up: 5, then 3, then 1."""
        threats = analyzer_for(make_grid(*middle_trap_board))
        assert threats.threat_building_columns(1, Parity.ODD) == [{0, 1, 4, 5}, set(), set()]

    def test_nothing_to_build_on_empty_board(self) -> None:
        threats = analyzer_for(Grid(6, 7))
        for parity in Parity:
            assert all(not columns for columns in threats.threat_building_columns(1, parity))
