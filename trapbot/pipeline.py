import logging
from typing import Iterable, Optional, Set

from trapbot.errors import NoAvailableMoveError
from trapbot.grid import Grid, Owner
from trapbot.lines import LineGeometry
from trapbot.threats import Parity, ThreatAnalyzer
from trapbot.traps import TrapAnalyzer

logger = logging.getLogger(__name__)


class MoveFilterPipeline:
    """
    Picks a column by narrowing the set of candidate columns one heuristic
    at a time:

    1. win right away
    2. block the opponent's immediate win
    3. keep away from cells right below an opponent win
    4. build threats of the parity that suits us, or deny the opponent's
    5. middle traps, ours then the opponent's
    6. stack traps, ours then the opponent's
    7. the landing cell with the most possible lines of four

    A heuristic that finds nothing among the candidates leaves them as
    they are, so the set never runs empty.
    """

    def __init__(self, grid: Grid, my_id: int):
        if my_id not in (Owner.PLAYER_ONE, Owner.PLAYER_TWO):
            raise ValueError(f"Unknown player id: {my_id}")
        self.grid = grid
        self.my_id = my_id
        self.opp_id = 3 - my_id
        self.geometry = LineGeometry(grid)
        self.threats = ThreatAnalyzer(grid, self.geometry)
        self.traps = TrapAnalyzer(grid, self.geometry)
        self.candidates: Set[int] = set()

    def choose_column(self) -> int:
        if not self.grid.available_moves:
            raise NoAvailableMoveError("The field is full")
        self.candidates = set(self.grid.available_moves)

        column = self.winning_column(self.my_id)
        if column is not None:
            logger.debug("Winning in column %d", column)
            return column
        column = self.winning_column(self.opp_id)
        if column is not None:
            logger.debug("Blocking column %d", column)
            return column

        self.narrow_against_almost_wins(self.opp_id)
        self.narrow_by_threats()
        self.narrow_to_middle_traps(self.my_id)
        self.narrow_to_middle_traps(self.opp_id)
        self.narrow_to_stack_traps(self.my_id)
        self.narrow_to_stack_traps(self.opp_id)
        return self.best_column()

    def narrow(self, reason: str, columns: Iterable[int]) -> bool:
        """Keep only the given columns, unless none of them is a candidate"""
        kept = self.candidates & set(columns)
        if not kept:
            return False
        if kept != self.candidates:
            logger.debug("%s: %s -> %s", reason, sorted(self.candidates), sorted(kept))
        self.candidates = kept
        return True

    def winning_column(self, player_id: int) -> Optional[int]:
        for col in sorted(self.grid.available_moves):
            row = self.grid.available_moves[col]
            if self.geometry.position_to_win(row, col, player_id):
                return col
        return None

    def narrow_against_almost_wins(self, player_id: int):
        """Avoid landing right below a cell that wins for player_id"""
        safe = {
            col for col in self.candidates
            if not self.geometry.below_is_winning_position(
                self.grid.available_moves[col], col, player_id)
        }
        self.narrow(f"below player {player_id} wins", safe)

    def narrow_to_middle_traps(self, player_id: int):
        self.narrow(f"player {player_id} middle traps",
                    self.traps.middle_trap_columns(player_id, self.candidates))

    def narrow_to_stack_traps(self, player_id: int):
        # A stack column ruled out earlier can still be set up from a candidate
        self.narrow(f"player {player_id} stack traps", self.traps.stack_trap_columns(player_id))

    def narrow_to_make_threat(self, player_id: int, parity: Parity):
        for columns in self.threats.threat_building_columns(player_id, parity):
            self.narrow(f"player {player_id} {parity.name.lower()} threats", columns)

    def narrow_to_reinforce_threats(self, player_id: int, odd_threats, even_threats):
        """The player holds threats of one parity only: build more of those"""
        if not odd_threats:
            self.narrow_to_make_threat(player_id, Parity.EVEN)
        elif not even_threats:
            self.narrow_to_make_threat(player_id, Parity.ODD)

    def narrow_by_threats(self):
        my_odd = self.threats.odd_threats(self.my_id)
        my_even = self.threats.even_threats(self.my_id)
        opp_odd = self.threats.odd_threats(self.opp_id)
        opp_even = self.threats.even_threats(self.opp_id)
        i_have_threats = bool(my_odd or my_even)
        opp_has_threats = bool(opp_odd or opp_even)

        if not i_have_threats and not opp_has_threats:
            # Player 1 moves first and so plays for odd threats
            order = (self.my_id, self.opp_id) if self.my_id == Owner.PLAYER_ONE \
                else (self.opp_id, self.my_id)
            for player_id in order:
                self.narrow_to_make_threat(player_id, Parity.ODD)
                self.narrow_to_make_threat(player_id, Parity.EVEN)
            return

        # Nothing left to steer once a player holds both parities
        if (my_odd and my_even) or (opp_odd and opp_even):
            return

        if not opp_has_threats:
            self.narrow_to_reinforce_threats(self.my_id, my_odd, my_even)
        elif not i_have_threats:
            self.narrow_to_reinforce_threats(self.opp_id, opp_odd, opp_even)
        elif self.my_id == Owner.PLAYER_ONE:
            if opp_odd:
                if not my_even:
                    self.narrow_to_make_threat(self.my_id, Parity.EVEN)
                else:
                    self.narrow_against_almost_wins(self.my_id)
            elif not my_odd:
                self.narrow_to_make_threat(self.my_id, Parity.ODD)
            else:
                self.narrow_against_almost_wins(self.my_id)
        else:
            if opp_odd:
                if not my_odd:
                    self.narrow_to_make_threat(self.my_id, Parity.ODD)
                else:
                    self.narrow_against_almost_wins(self.my_id)
            elif not my_even:
                self.narrow_to_make_threat(self.my_id, Parity.EVEN)
            else:
                self.narrow_against_almost_wins(self.opp_id)

    def best_column(self) -> int:
        """Candidate whose landing cell lies on the most possible lines of four"""
        best_col = None
        max_wins = -1
        for col in sorted(self.candidates):
            wins = len(self.geometry.possible_wins(self.grid.available_moves[col], col))
            if wins > max_wins:
                max_wins = wins
                best_col = col
        return best_col
