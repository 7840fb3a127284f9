from enum import IntEnum
from typing import Dict, List

import numpy as np

from trapbot.config import Config
from trapbot.errors import ParseError


class Owner(IntEnum):
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2


class Grid:
    """
    The playing field. Row 0 is the top row, discs fall towards the
    highest row index.

    available_moves maps each column that still has room to the row a
    disc dropped there would land on.
    """

    def __init__(self, rows: int = Config.ROWS, cols: int = Config.COLS,
                 row_delimiter: str = Config.ROW_DELIMITER,
                 cell_delimiter: str = Config.CELL_DELIMITER):
        self.rows = rows
        self.cols = cols
        self.row_delimiter = row_delimiter
        self.cell_delimiter = cell_delimiter
        self.field = np.zeros((rows, cols), dtype=int)
        self.available_moves: Dict[int, int] = {}
        self._set_available_moves()

    def load(self, encoding: str):
        """Replace the field with a serialized board, e.g. '0,0,1;0,2,1'"""
        rows = encoding.strip().split(self.row_delimiter)
        if len(rows) != self.rows:
            raise ParseError(f"Expected {self.rows} rows, got {len(rows)}")

        field = np.zeros((self.rows, self.cols), dtype=int)
        for row, line in enumerate(rows):
            tokens = line.split(self.cell_delimiter)
            if len(tokens) != self.cols:
                raise ParseError(
                    f"Row {row}: expected {self.cols} cells, got {len(tokens)}"
                )
            for col, token in enumerate(tokens):
                try:
                    value = int(token)
                except ValueError:
                    raise ParseError(f"Row {row}: invalid cell {token!r}") from None
                if value not in (Owner.EMPTY, Owner.PLAYER_ONE, Owner.PLAYER_TWO):
                    raise ParseError(f"Row {row}: invalid cell {token!r}")
                field[row, col] = value

        # No disc may hang above an empty cell
        floating = (field[:-1] != Owner.EMPTY) & (field[1:] == Owner.EMPTY)
        if floating.any():
            row, col = np.argwhere(floating)[0]
            raise ParseError(f"Floating disc at ({row}, {col})")

        self.field = field
        self._set_available_moves()

    def encode(self) -> str:
        return self.row_delimiter.join(
            self.cell_delimiter.join(str(v) for v in row) for row in self.field
        )

    def copy(self) -> "Grid":
        grid = Grid(self.rows, self.cols, self.row_delimiter, self.cell_delimiter)
        grid.field = self.field.copy()
        grid._set_available_moves()
        return grid

    def _set_available_moves(self):
        self.available_moves = {}
        for col in range(self.cols):
            empty_rows = np.flatnonzero(self.field[:, col] == Owner.EMPTY)
            if len(empty_rows) > 0:
                self.available_moves[col] = int(empty_rows[-1])

    def cell(self, row: int, col: int) -> int:
        return int(self.field[row, col])

    def is_valid_location(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_available(self, row: int, col: int) -> bool:
        """True if (row, col) is the landing cell of its column"""
        return self.available_moves.get(col) == row

    def is_full(self) -> bool:
        return not self.available_moves

    def free_locations_by_row(self) -> List[List[int]]:
        """For each row, the columns that are still empty at that row"""
        return [
            [int(col) for col in np.flatnonzero(self.field[row] == Owner.EMPTY)]
            for row in range(self.rows)
        ]

    def owned_locations(self, player_id: int) -> Dict[int, List[int]]:
        """
        Column -> rows owned by the given player. An id of 0 gives the
        free locations. Columns without any such row are left out.
        """
        locations = {}
        for col in range(self.cols):
            rows = [int(row) for row in np.flatnonzero(self.field[:, col] == player_id)]
            if rows:
                locations[col] = rows
        return locations

    def drop(self, col: int, player_id: int) -> int:
        """Drop a disc in the column and return the row it lands on"""
        if player_id not in (Owner.PLAYER_ONE, Owner.PLAYER_TWO):
            raise ValueError(f"Unknown player id: {player_id}")
        if col not in self.available_moves:
            raise ValueError(f"Column {col} is full!")
        row = self.available_moves[col]
        self.field[row, col] = player_id
        self._set_available_moves()
        return row

    def winner(self) -> int:
        """Check if there's a winner. Returns 1, 2, or 0"""
        for row in range(self.rows):
            for col in range(self.cols):
                owner = self.field[row, col]
                if owner == Owner.EMPTY:
                    continue
                for row_step, col_step in ((0, 1), (1, 0), (1, 1), (1, -1)):
                    end_row = row + 3 * row_step
                    end_col = col + 3 * col_step
                    if not self.is_valid_location(end_row, end_col):
                        continue
                    window = [self.field[row + i * row_step, col + i * col_step]
                              for i in range(4)]
                    if all(v == owner for v in window):
                        return int(owner)
        return 0

    def __str__(self) -> str:
        symbols = {Owner.EMPTY: ".", Owner.PLAYER_ONE: "X", Owner.PLAYER_TWO: "O"}
        return "\n".join(
            " ".join(symbols[Owner(v)] for v in row) for row in self.field
        )
