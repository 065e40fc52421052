"""Data models produced by match statistics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MoveJudgment(StrEnum):
    """Checker-play quality buckets by equity loss."""

    BEST = "Best"
    GOOD = "Good"
    DOUBTFUL = "Doubtful"
    ERROR = "Error"
    BLUNDER = "Blunder"

    @property
    def mark(self) -> str:
        """Annotation symbol used in move lists."""
        return _JUDGMENT_MARK[self]


_JUDGMENT_MARK: dict[MoveJudgment, str] = {
    MoveJudgment.BEST: "",
    MoveJudgment.GOOD: "",
    MoveJudgment.DOUBTFUL: "?!",
    MoveJudgment.ERROR: "?",
    MoveJudgment.BLUNDER: "??",
}


@dataclass(slots=True, frozen=True)
class CheckerPlayReview:
    """Equity loss of a single analysed checker play."""

    game_number: int
    move_index: int
    active_player: int
    equity_loss: float
    judgment: MoveJudgment


@dataclass(slots=True, frozen=True)
class PlayerSummary:
    """Aggregate metrics for one player."""

    games_won: int = 0
    points_won: int = 0
    checker_moves: int = 0
    cube_decisions: int = 0
    analysed_moves: int = 0
    avg_equity_loss: float = 0.0
    best: int = 0
    good: int = 0
    doubtful: int = 0
    errors: int = 0
    blunders: int = 0


@dataclass(slots=True, frozen=True)
class MatchStatistics:
    """Whole-match totals plus per-player summaries."""

    total_games: int
    total_moves: int
    checker_moves: int
    cube_moves: int
    player1: PlayerSummary
    player2: PlayerSummary
    reviews: tuple[CheckerPlayReview, ...]

    @property
    def average_moves_per_game(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.total_moves / self.total_games
