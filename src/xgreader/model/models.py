"""Public domain types produced by an import.

Positions and analyses are reported from the point of view of the player
on roll: ``player1_*`` fields in an analysis describe the side making the
decision, ``player2_*`` its opponent. They are unrelated to
``MatchMetadata.player1_name`` / ``player2_name``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from xgreader.core.enums import CubeAction, GameOutcome, MoveType
from xgreader.core.points import MoveEncoding, checker_count


@dataclass(slots=True, frozen=True)
class Position:
    """Board plus cube and score, relative to the player on roll.

    ``checkers[0]`` is the opponent's bar (negative), ``checkers[1:25]`` the
    points numbered from the player's own 1-point, ``checkers[25]`` the
    player's bar. ``cube_pos`` is 0 for a centred cube, 1 when the player on
    roll owns it and -1 when the opponent does.
    """

    checkers: tuple[int, ...]
    cube: int = 1
    cube_pos: int = 0
    score: tuple[int, int] = (0, 0)

    @property
    def checker_total(self) -> int:
        return checker_count(self.checkers)

    def swapped(self) -> Position:
        """The same position seen from the other side of the board."""
        from xgreader.model.perspective import swap_position

        return swap_position(self)


@dataclass(slots=True, frozen=True)
class CheckerAnalysis:
    """One ranked alternative of a checker-play decision."""

    position: Position
    move: MoveEncoding
    player1_win_rate: float
    player1_gammon_rate: float
    player1_bg_rate: float
    player2_gammon_rate: float
    player2_bg_rate: float
    equity: float
    analysis_depth: int

    @property
    def is_book_move(self) -> bool:
        """Zero plies marks a database move rather than a searched one."""
        return self.analysis_depth == 0


@dataclass(slots=True, frozen=True)
class CubeAnalysis:
    """Engine evaluation of a cube decision.

    ``wrong_pass_take_percent`` is -1.0 when no-double is not the best
    cubeful choice.
    """

    player1_win_rate: float
    player1_gammon_rate: float
    player1_bg_rate: float
    player2_gammon_rate: float
    player2_bg_rate: float
    cubeless_no_double: float
    cubeless_double: float
    cubeful_no_double: float
    cubeful_double_take: float
    cubeful_double_pass: float
    wrong_pass_take_percent: float
    analysis_depth: int

    @property
    def best_cubeful_equity(self) -> float:
        return max(
            self.cubeful_no_double,
            min(self.cubeful_double_take, self.cubeful_double_pass),
        )


@dataclass(slots=True)
class CheckerMove:
    """A checker-play decision with its ranked alternatives."""

    position: Position
    active_player: int
    dice: tuple[int, int]
    played_move: MoveEncoding
    analysis: list[CheckerAnalysis] = field(default_factory=list)

    def played_analysis(self) -> CheckerAnalysis | None:
        """Alternative matching the move actually played, if analysed."""
        for alternative in self.analysis:
            if alternative.move == self.played_move:
                return alternative
        return None


@dataclass(slots=True)
class CubeMove:
    """A cube decision."""

    position: Position
    active_player: int
    cube_action: int
    analysis: CubeAnalysis | None = None

    @property
    def is_double(self) -> bool:
        return self.cube_action == CubeAction.DOUBLE


@dataclass(slots=True)
class Move:
    """Either a checker play or a cube decision, tagged by ``move_type``."""

    move_type: MoveType
    checker_move: CheckerMove | None = None
    cube_move: CubeMove | None = None

    @classmethod
    def checker(cls, checker_move: CheckerMove) -> Move:
        return cls(MoveType.CHECKER, checker_move=checker_move)

    @classmethod
    def cube(cls, cube_move: CubeMove) -> Move:
        return cls(MoveType.CUBE, cube_move=cube_move)


@dataclass(slots=True, frozen=True)
class Termination:
    """How a game ended: +100 marks a resignation, +1000 a settlement."""

    code: int
    outcome: GameOutcome | None
    resigned: bool = False
    settled: bool = False

    @classmethod
    def from_code(cls, code: int) -> Termination:
        base = code
        resigned = settled = False
        if code >= 1000:
            base, settled = code - 1000, True
        elif code >= 100:
            base, resigned = code - 100, True
        try:
            outcome: GameOutcome | None = GameOutcome(base)
        except ValueError:
            outcome = None
        return cls(code=code, outcome=outcome, resigned=resigned, settled=settled)

    def __str__(self) -> str:
        name = self.outcome.name.lower() if self.outcome is not None else "unknown"
        if self.settled:
            return f"settle_{name}"
        if self.resigned:
            return f"resign_{name}"
        return name


@dataclass(slots=True)
class Game:
    """One game of a match. ``winner`` is -1 for player 1, 1 for player 2."""

    game_number: int
    initial_score: tuple[int, int]
    moves: list[Move] = field(default_factory=list)
    winner: int = 0
    points_won: int = 0
    crawford: bool = False
    termination: Termination | None = None

    @property
    def finished(self) -> bool:
        return self.winner != 0


@dataclass(slots=True)
class MatchMetadata:
    """Match-level information from the match header."""

    player1_name: str = ""
    player2_name: str = ""
    location: str = ""
    event: str = ""
    round: str = ""
    date_time: str = ""
    match_length: int = 0
    engine_version: int = 0
    product_version: str = ""
    crawford: bool = False
    jacoby: bool = False
    transcriber: str = ""


@dataclass(slots=True)
class Match:
    metadata: MatchMetadata = field(default_factory=MatchMetadata)
    games: list[Game] = field(default_factory=list)
    final_score: tuple[int, int] | None = None
