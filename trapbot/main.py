import logging
import sys

from trapbot.bot import TrapBot
from trapbot.config import Config, get_engine_config

logger = logging.getLogger(__name__)


class BotParser:
    """
    Line based engine protocol:

        settings field_columns 7
        settings field_rows 6
        settings your_botid 1
        update game round 3
        update game field 0,0,0,0,0,0,0;...;0,0,0,1,2,0,0
        action move 10000

    Each 'action move' is answered with 'place_disc <column>'.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.settings = {}
        self.round = 0
        self.bot = None
        self._field = None

    def _get_bot(self) -> TrapBot:
        # Settings arrive before the first field, the bot is built lazily
        if self.bot is None:
            self.bot = TrapBot(get_engine_config(
                rows=int(self.settings.get("field_rows", Config.ROWS)),
                cols=int(self.settings.get("field_columns", Config.COLS)),
                bot_id=int(self.settings.get("your_botid", Config.DEFAULT_BOT_ID)),
            ))
            logger.info("Playing as player %d on a %dx%d field", self.bot.my_id,
                        self.bot.config.rows, self.bot.config.cols)
        return self.bot

    def handle(self, line: str):
        parts = line.split()
        if not parts:
            return

        if parts[0] == "settings" and len(parts) == 3:
            self.settings[parts[1]] = parts[2]
            # A new setting invalidates a bot built from the old ones
            self.bot = None
        elif parts[0] == "update" and len(parts) == 4 and parts[1] == "game":
            if parts[2] == "field":
                self._field = parts[3]
            elif parts[2] == "round":
                self.round = int(parts[3])
        elif parts[0] == "action" and len(parts) >= 2 and parts[1] == "move":
            bot = self._get_bot()
            if self._field is not None:
                bot.parse(self._field)
            column = bot.make_turn()
            logger.debug("Round %d: place_disc %d", self.round, column)
            self.stdout.write(f"place_disc {column}\n")
            self.stdout.flush()
        else:
            logger.warning("Unknown command: %s", line.strip())

    def run(self):
        for line in self.stdin:
            try:
                self.handle(line)
            except Exception:
                logger.exception("Failed to handle: %s", line.strip())
                raise


def main():
    logging.basicConfig(
        stream=sys.stderr,
        level=Config.LOG_LEVEL,
        format=Config.LOG_FORMAT,
    )
    BotParser().run()


if __name__ == "__main__":
    main()
