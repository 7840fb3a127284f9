"""
Shared pytest fixtures.

Boards are written as row strings, top row first, e.g.

    "0000000",
    ...
    "0011000",   <- bottom row
"""

from typing import Callable, List

import pytest

from trapbot.grid import Grid

from boards import EMPTY_ROW, encode


@pytest.fixture
def make_grid() -> Callable[..., Grid]:
    """Factory building a Grid sized after the given rows."""

    def _make(*rows: str) -> Grid:
        grid = Grid(len(rows), len(rows[0]))
        grid.load(encode(list(rows)))
        return grid

    return _make


@pytest.fixture
def bottom_three_board() -> List[str]:
    """Player 1 holds columns 1-3 of the bottom row, column 4 is open."""
    return [EMPTY_ROW] * 5 + ["2111000"]


@pytest.fixture
def middle_trap_board() -> List[str]:
    """Player 1 holds columns 2-3 of the bottom row with both ends open."""
    return [EMPTY_ROW] * 4 + ["0022000", "0011000"]


@pytest.fixture
def stack_trap_board() -> List[str]:
    """
    Cell (3, 3) already wins for player 1, and a disc in column 4 makes
    the landing cell (4, 3) below it a second threat.
    """
    return [
        EMPTY_ROW,
        EMPTY_ROW,
        EMPTY_ROW,
        "1110000",
        "2220011",
        "2122122",
    ]
