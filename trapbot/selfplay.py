import logging
from typing import List, Tuple

import numpy as np

from trapbot.bot import TrapBot
from trapbot.config import get_engine_config
from trapbot.grid import Grid, Owner

logger = logging.getLogger(__name__)


def self_play(rows=None, cols=None, random_opening=0, rng=None) -> Tuple[List[int], int]:
    """
    Run a single game of TrapBot against itself.

    Args:
        rows, cols: Field size (Config defaults when None)
        random_opening: Number of opening moves drawn at random, so that
            repeated games do not all follow the same line
        rng: numpy Generator used for the opening moves

    Returns:
        The columns played in order and the winner (0 for a draw).
    """
    if rng is None:
        rng = np.random.default_rng()
    bots = {
        player: TrapBot(get_engine_config(rows=rows, cols=cols, bot_id=player))
        for player in (Owner.PLAYER_ONE, Owner.PLAYER_TWO)
    }
    config = bots[Owner.PLAYER_ONE].config
    grid = Grid(config.rows, config.cols)
    moves = []
    player = Owner.PLAYER_ONE

    while not grid.winner() and not grid.is_full():
        if len(moves) < random_opening:
            action = int(rng.choice(sorted(grid.available_moves)))
        else:
            bot = bots[player]
            bot.parse(grid.encode())
            action = bot.make_turn()

        grid.drop(action, player)
        moves.append(action)
        player = Owner(3 - player)

    winner = grid.winner()
    logger.info("Self-play finished after %d moves, winner: %d", len(moves), winner)
    return moves, winner


def main():
    logging.basicConfig(level=logging.INFO)
    results = {0: 0, 1: 0, 2: 0}
    rng = np.random.default_rng(0)
    for _ in range(20):
        _, winner = self_play(random_opening=4, rng=rng)
        results[winner] += 1
    print(f"Player 1: {results[1]}  Player 2: {results[2]}  Draws: {results[0]}")


if __name__ == "__main__":
    main()
