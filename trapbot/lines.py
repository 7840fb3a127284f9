from dataclasses import dataclass
from typing import Optional, Set, Tuple

from trapbot.errors import InvalidLocationError
from trapbot.grid import Grid, Owner

Location = Tuple[int, int]

WIN_LENGTH = 4

# Row/column steps of the four axes a win can run along
AXES = (
    (0, 1),   # horizontal
    (1, 0),   # vertical
    (1, 1),   # diagonal, top left to bottom right
    (-1, 1),  # diagonal, bottom left to top right
)


@dataclass(frozen=True)
class Line:
    """
    Four collinear, contiguous (row, col) locations. Cells are kept
    sorted so two lines with the same locations compare and hash equal
    no matter the order they were found in.
    """
    cells: Tuple[Location, ...]

    def __post_init__(self):
        if len(self.cells) != WIN_LENGTH:
            raise ValueError(f"A line has {WIN_LENGTH} cells, got {len(self.cells)}")
        object.__setattr__(self, "cells", tuple(sorted(tuple(c) for c in self.cells)))

    def __iter__(self):
        return iter(self.cells)

    def __contains__(self, location) -> bool:
        return tuple(location) in self.cells

    def __repr__(self) -> str:
        return "Line(" + " ".join(f"{r},{c}" for r, c in self.cells) + ")"


class LineGeometry:
    """Win windows through a cell and the win conditions built on them."""

    def __init__(self, grid: Grid):
        self.grid = grid

    def _matching_location(self, row: int, col: int, owner: int) -> bool:
        # In the field and either free or held by owner
        if not self.grid.is_valid_location(row, col):
            return False
        value = self.grid.cell(row, col)
        return value == owner or value == Owner.EMPTY

    def scan_direction(self, row: int, col: int, row_step: int, col_step: int) -> Location:
        """
        Farthest location from (row, col) in the given direction that
        could still be part of the same line of four.

        The walk goes over cells that are free or share the owner of the
        starting cell and stops at the border or at an opposing disc. A
        free starting cell takes on the owner of the first disc it runs
        into, so the extent covers the longest run either player could
        use through this cell.
        """
        owner = self.grid.cell(row, col)
        steps = 0
        location = (row, col)
        while steps < WIN_LENGTH and self._matching_location(
                row + row_step * steps, col + col_step * steps, owner):
            location = (row + row_step * steps, col + col_step * steps)
            steps += 1

        next_row, next_col = row + row_step * steps, col + col_step * steps
        if owner == Owner.EMPTY and self.grid.is_valid_location(next_row, next_col):
            owner = self.grid.cell(next_row, next_col)
            while steps < WIN_LENGTH and self._matching_location(
                    row + row_step * steps, col + col_step * steps, owner):
                location = (row + row_step * steps, col + col_step * steps)
                steps += 1
        return location

    def possible_wins(self, row: int, col: int, player_id: Optional[int] = None) -> Set[Line]:
        """
        Every line of four through (row, col) that is not broken by the
        border or by an opposing disc. With a player id, only the lines
        holding no disc of the other player are kept.
        """
        if not self.grid.is_valid_location(row, col):
            raise InvalidLocationError(row, col)
        if player_id is not None and player_id not in (Owner.PLAYER_ONE, Owner.PLAYER_TWO):
            raise ValueError(f"Unknown player id: {player_id}")

        wins = set()
        for row_step, col_step in AXES:
            start_row, start_col = self.scan_direction(row, col, -row_step, -col_step)
            end_row, end_col = self.scan_direction(row, col, row_step, col_step)
            span = max(abs(end_row - start_row), abs(end_col - start_col)) + 1
            for offset in range(span - WIN_LENGTH + 1):
                wins.add(Line(tuple(
                    (start_row + row_step * (offset + i), start_col + col_step * (offset + i))
                    for i in range(WIN_LENGTH)
                )))

        if player_id is not None:
            wins = {line for line in wins if self._line_belongs_to(line, player_id)}
        return wins

    def _line_belongs_to(self, line: Line, player_id: int) -> bool:
        return all(self.grid.cell(r, c) in (Owner.EMPTY, player_id) for r, c in line)

    def position_to_win(self, row: int, col: int, player_id: int) -> bool:
        """True if a disc of player_id at (row, col) completes a line of four"""
        if not self.grid.is_valid_location(row, col):
            raise InvalidLocationError(row, col)
        return any(
            self.count_tokens(line, player_id) == WIN_LENGTH - 1
            for line in self.possible_wins(row, col, player_id)
        )

    def below_is_winning_position(self, row: int, col: int, player_id: int) -> bool:
        """
        True if the cell right above (row, col) wins for player_id, i.e.
        playing here hands that cell to whoever moves next.
        """
        above = row - 1
        return (self.grid.is_valid_location(above, col)
                and self.position_to_win(above, col, player_id))

    def count_tokens(self, line: Line, owner: int) -> int:
        """Number of cells in the line held by owner (0 counts free cells)"""
        return sum(1 for r, c in line if self.grid.cell(r, c) == owner)

    def find_unique_open_cell(self, line: Line, row: int, col: int) -> Optional[Location]:
        """
        The only other cell of the line that can be played right now.

        Returns None when no other cell or more than one other cell is
        playable, or when some other free cell of the line is not yet
        reachable.
        """
        open_cells = []
        for line_row, line_col in line:
            if (line_row, line_col) == (row, col):
                continue
            if self.grid.is_available(line_row, line_col):
                open_cells.append((line_row, line_col))
            elif self.grid.cell(line_row, line_col) == Owner.EMPTY:
                return None
        if len(open_cells) == 1:
            return open_cells[0]
        return None
