"""Tests for match statistics."""

from __future__ import annotations

import pytest

from xgreader.analysis import (
    MoveJudgment,
    checker_equity_loss,
    classify_equity_loss,
    compute_match_statistics,
    worst_plays,
)
from xgreader.core.enums import CubeAction
from xgreader.model import (
    CheckerAnalysis,
    CheckerMove,
    CubeMove,
    Game,
    Match,
    Move,
    Position,
)

_POSITION = Position(checkers=(0,) * 26)
_PLAYED = (8, 4, 6, 3, -1, -1, -1, -1)
_OTHER = (13, 9, 13, 10, -1, -1, -1, -1)


def _alternative(move: tuple[int, ...], equity: float) -> CheckerAnalysis:
    return CheckerAnalysis(
        position=_POSITION,
        move=move,
        player1_win_rate=0.5,
        player1_gammon_rate=0.1,
        player1_bg_rate=0.0,
        player2_gammon_rate=0.1,
        player2_bg_rate=0.0,
        equity=equity,
        analysis_depth=2,
    )


def _checker(active: int, played_equity: float | None, best_equity: float = 0.1) -> Move:
    analysis: list[CheckerAnalysis] = []
    if played_equity is not None:
        analysis = [_alternative(_OTHER, best_equity), _alternative(_PLAYED, played_equity)]
    return Move.checker(
        CheckerMove(
            position=_POSITION,
            active_player=active,
            dice=(4, 3),
            played_move=_PLAYED,
            analysis=analysis,
        )
    )


def _cube(active: int) -> Move:
    return Move.cube(CubeMove(_POSITION, active, CubeAction.DOUBLE))


@pytest.mark.parametrize(
    ("loss", "judgment"),
    [
        (0.0, MoveJudgment.BEST),
        (0.0005, MoveJudgment.BEST),
        (0.01, MoveJudgment.GOOD),
        (0.02, MoveJudgment.DOUBTFUL),
        (0.05, MoveJudgment.ERROR),
        (0.08, MoveJudgment.BLUNDER),
        (0.5, MoveJudgment.BLUNDER),
    ],
)
def test_classify_equity_loss(loss: float, judgment: MoveJudgment) -> None:
    assert classify_equity_loss(loss) == judgment


def test_judgment_marks() -> None:
    assert MoveJudgment.BLUNDER.mark == "??"
    assert MoveJudgment.BEST.mark == ""


class TestCheckerEquityLoss:
    def test_unanalysed(self) -> None:
        assert checker_equity_loss(_checker(1, None).checker_move) is None

    def test_loss_against_best(self) -> None:
        loss = checker_equity_loss(_checker(1, -0.15).checker_move)
        assert loss == pytest.approx(0.25)

    def test_played_best(self) -> None:
        assert checker_equity_loss(_checker(1, 0.2).checker_move) == 0.0


def test_compute_match_statistics() -> None:
    game1 = Game(
        game_number=1,
        initial_score=(0, 0),
        moves=[_checker(1, 0.1), _checker(-1, 0.0), _cube(1), _checker(1, None)],
        winner=-1,
        points_won=2,
    )
    game2 = Game(
        game_number=2,
        initial_score=(2, 0),
        moves=[_checker(-1, -0.2), _cube(-1)],
        winner=1,
        points_won=1,
    )
    stats = compute_match_statistics(Match(games=[game1, game2]))

    assert stats.total_games == 2
    assert stats.total_moves == 6
    assert stats.checker_moves == 4
    assert stats.cube_moves == 2
    assert stats.average_moves_per_game == 3.0

    assert stats.player1.games_won == 1
    assert stats.player1.points_won == 2
    assert stats.player1.checker_moves == 2
    assert stats.player1.cube_decisions == 1
    assert stats.player1.analysed_moves == 1
    assert stats.player1.best == 1

    assert stats.player2.games_won == 1
    assert stats.player2.points_won == 1
    assert stats.player2.analysed_moves == 2
    assert stats.player2.good == 0
    assert stats.player2.errors == 0
    assert stats.player2.blunders == 2
    assert stats.player2.avg_equity_loss == pytest.approx(0.2)

    worst = worst_plays(stats.reviews, count=1)
    assert len(worst) == 1
    assert worst[0].game_number == 2
    assert worst[0].equity_loss == pytest.approx(0.3)


def test_empty_match() -> None:
    stats = compute_match_statistics(Match())
    assert stats.total_games == 0
    assert stats.average_moves_per_game == 0.0
    assert worst_plays(stats.reviews) == []
