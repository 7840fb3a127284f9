from trapbot.config import EngineConfig, get_engine_config
from trapbot.grid import Grid
from trapbot.pipeline import MoveFilterPipeline


class TrapBot:
    """
    Plays for traps.

    If it can win, it does. If the opponent would win, it blocks. It
    keeps away from cells that give the opponent a win one row up, steers
    towards threats on the rows that suit it, sets up middle and stack
    traps (and spoils the opponent's), and otherwise takes the column
    with the most ways left to make four.
    """

    def __init__(self, config: EngineConfig = None):
        self.config = config if config is not None else get_engine_config()
        self.grid = Grid(
            self.config.rows,
            self.config.cols,
            self.config.row_delimiter,
            self.config.cell_delimiter,
        )

    @property
    def my_id(self) -> int:
        return self.config.bot_id

    def parse(self, encoding: str):
        """Reset the field from a board encoding sent for this turn"""
        self.grid.load(encoding)

    def make_turn(self) -> int:
        """Column to drop the next disc in"""
        return MoveFilterPipeline(self.grid, self.my_id).choose_column()
