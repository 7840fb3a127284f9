import sys

from trapbot.bot import TrapBot
from trapbot.config import get_engine_config
from trapbot.grid import Grid, Owner


def print_board(grid: Grid):
    """Print the field with column numbers on top"""
    print("\n  " + " ".join(str(col) for col in range(grid.cols)))
    print("  " + "-" * (2 * grid.cols - 1))
    for row, line in enumerate(str(grid).splitlines()):
        print(f"{row}|" + line + "|")
    print("  " + "-" * (2 * grid.cols - 1))
    print()


def read_column(grid: Grid) -> int:
    """Ask until the answer names a column with room left"""
    while True:
        answer = input(f"Column to drop in (0-{grid.cols - 1}): ").strip()
        if answer.isdigit() and int(answer) in grid.available_moves:
            return int(answer)
        if answer.isdigit() and grid.is_valid_location(0, int(answer)):
            print(f"Column {answer} is full.")
        else:
            print(f"{answer!r} is not a column.")


def main():
    choice = input("Do you want to play as X (first)? [y/n]: ").lower()
    human_player = Owner.PLAYER_ONE if choice == "y" else Owner.PLAYER_TWO
    bot = TrapBot(get_engine_config(bot_id=3 - human_player))

    grid = Grid(bot.config.rows, bot.config.cols)
    player = Owner.PLAYER_ONE
    print_board(grid)

    # Game loop
    while not grid.winner() and not grid.is_full():
        if player == human_player:
            action = read_column(grid)
        else:
            print("TrapBot is thinking...")
            bot.parse(grid.encode())
            action = bot.make_turn()
            print(f"TrapBot plays column {action}")

        grid.drop(action, player)
        player = Owner(3 - player)
        print_board(grid)

    # Show result
    result = grid.winner()
    if result == 0:
        print("Game ended in a draw.")
    elif result == human_player:
        print("You win!")
    else:
        print("TrapBot wins!")


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, EOFError):
        sys.exit(1)
