class TrapBotError(Exception):
    """Base class for engine errors."""


class ParseError(TrapBotError, ValueError):
    """Board encoding does not match the configured field."""


class InvalidLocationError(TrapBotError, IndexError):
    """Geometric query on a location outside the field."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Location ({row}, {col}) is outside the field")
        self.row = row
        self.col = col


class NoAvailableMoveError(TrapBotError):
    """Every column of the field is full."""
