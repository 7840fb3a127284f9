from dataclasses import dataclass


class Config:
    # Field
    ROWS = 6
    COLS = 7

    # Board encoding
    ROW_DELIMITER = ";"
    CELL_DELIMITER = ","

    # Player 1 always moves first
    DEFAULT_BOT_ID = 1

    # Logging goes to stderr, stdout carries the protocol
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class EngineConfig:
    """Per-game engine configuration"""
    rows: int = Config.ROWS
    cols: int = Config.COLS
    bot_id: int = Config.DEFAULT_BOT_ID
    row_delimiter: str = Config.ROW_DELIMITER
    cell_delimiter: str = Config.CELL_DELIMITER

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Invalid field size: {self.rows}x{self.cols}")
        if self.bot_id not in (1, 2):
            raise ValueError(f"Unknown bot id: {self.bot_id}")

    @property
    def opponent_id(self) -> int:
        return 3 - self.bot_id


def get_engine_config(rows=None, cols=None, bot_id=None):
    """Factory function to get engine configuration, falling back to Config defaults"""
    return EngineConfig(
        rows=Config.ROWS if rows is None else rows,
        cols=Config.COLS if cols is None else cols,
        bot_id=Config.DEFAULT_BOT_ID if bot_id is None else bot_id,
    )
