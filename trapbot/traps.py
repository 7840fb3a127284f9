from typing import Iterable, List, Set

from trapbot.grid import Grid, Owner
from trapbot.lines import Location, LineGeometry


class TrapAnalyzer:
    """Detects moves that set up a win the opponent can no longer stop."""

    def __init__(self, grid: Grid, geometry: LineGeometry):
        self.grid = grid
        self.geometry = geometry

    def follow_up_cells(self, row: int, col: int, player_id: int) -> List[Location]:
        """
        Playable cells that, together with (row, col), would complete one
        of the player's lines through (row, col). One entry per line.
        """
        cells = []
        for line in self.geometry.possible_wins(row, col, player_id):
            cell = self.geometry.find_unique_open_cell(line, row, col)
            if cell is not None:
                cells.append(cell)
        return cells

    def follow_up_columns(self, row: int, col: int, player_id: int) -> Set[int]:
        return {c for _, c in self.follow_up_cells(row, col, player_id)}

    def middle_trap_columns(self, player_id: int, columns: Iterable[int] = None) -> Set[int]:
        """
        Columns whose landing cell sits in the middle of two or more of the
        player's lines, each with its own playable gap. A disc there makes
        two threats at once and only one can be blocked.
        """
        if columns is None:
            columns = self.grid.available_moves.keys()
        traps = set()
        for col in columns:
            row = self.grid.available_moves[col]
            if len(set(self.follow_up_cells(row, col, player_id))) > 1:
                traps.add(col)
        return traps

    def stack_trap_columns(self, player_id: int) -> Set[int]:
        """
        Columns to play to stack two of the player's threats on top of each
        other. Once the lower cell threatens, the opponent has to fill it
        and the player takes the cell above.

        Every column whose landing cell and the cell above it are both free
        is examined, whether or not it is still worth playing itself. If one
        of the two cells already wins, the follow-ups of the other one are
        enough; otherwise a move must make both cells threaten.
        """
        traps = set()
        for col, row in self.grid.available_moves.items():
            above = row - 1
            if not self.grid.is_valid_location(above, col):
                continue
            if self.grid.cell(above, col) != Owner.EMPTY:
                continue
            lower = self.follow_up_columns(row, col, player_id)
            upper = self.follow_up_columns(above, col, player_id)
            if self.geometry.position_to_win(row, col, player_id):
                traps |= upper
            elif self.geometry.position_to_win(above, col, player_id):
                traps |= lower
            else:
                traps |= lower & upper
        return traps
