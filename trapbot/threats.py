from enum import Enum
from typing import Dict, List, Set

from trapbot.grid import Grid
from trapbot.lines import LineGeometry


class Parity(Enum):
    ODD = 1
    EVEN = 0


class ThreatAnalyzer:
    """
    Threats are free cells that would complete a line of four for a
    player. They are grouped by the parity of their row index: discs
    stack from the bottom, so in a quiet endgame the player who can make
    the other fill the cells below a row of a given parity gets to use
    the threats of that parity.
    """

    def __init__(self, grid: Grid, geometry: LineGeometry):
        self.grid = grid
        self.geometry = geometry

    def _rows_of(self, parity: Parity) -> List[int]:
        return [row for row in range(self.grid.rows) if row % 2 == parity.value]

    def threats(self, player_id: int, parity: Parity) -> Dict[int, int]:
        """Column -> row of the player's threats on rows of the given parity"""
        free_locations = self.grid.free_locations_by_row()
        threats = {}
        for row in self._rows_of(parity):
            for col in free_locations[row]:
                if self.geometry.position_to_win(row, col, player_id):
                    threats[col] = row
        return threats

    def odd_threats(self, player_id: int) -> Dict[int, int]:
        return self.threats(player_id, Parity.ODD)

    def even_threats(self, player_id: int) -> Dict[int, int]:
        return self.threats(player_id, Parity.EVEN)

    def threat_building_columns(self, player_id: int, parity: Parity) -> List[Set[int]]:
        """
        For each row of the given parity, bottom row first, the columns
        where a disc would leave the player one move away from a line
        through a free cell of that row.
        """
        free_locations = self.grid.free_locations_by_row()
        targets = []
        for row in reversed(self._rows_of(parity)):
            columns = set()
            for col in free_locations[row]:
                for line in self.geometry.possible_wins(row, col, player_id):
                    cell = self.geometry.find_unique_open_cell(line, row, col)
                    if cell is not None:
                        columns.add(cell[1])
            targets.append(columns)
        return targets
