"""Match statistics computed from a decoded Match."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from xgreader.analysis.models import (
    CheckerPlayReview,
    MatchStatistics,
    MoveJudgment,
    PlayerSummary,
)
from xgreader.core.enums import MoveType
from xgreader.model.models import CheckerMove, Match

_BEST_MAX_LOSS = 0.0005
_GOOD_MAX_LOSS = 0.02
_DOUBTFUL_MAX_LOSS = 0.04
_ERROR_MAX_LOSS = 0.08

# Sign conventions differ between records: game winner -1 is player 1,
# while an active player of 1 is player 1.
PLAYER1_WINNER = -1
PLAYER1_ACTIVE = 1


@dataclass(slots=True)
class _PlayerAcc:
    games_won: int = 0
    points_won: int = 0
    checker_moves: int = 0
    cube_decisions: int = 0
    analysed_moves: int = 0
    loss_sum: float = 0.0
    best: int = 0
    good: int = 0
    doubtful: int = 0
    errors: int = 0
    blunders: int = 0


def classify_equity_loss(loss: float) -> MoveJudgment:
    if loss <= _BEST_MAX_LOSS:
        return MoveJudgment.BEST
    if loss < _GOOD_MAX_LOSS:
        return MoveJudgment.GOOD
    if loss < _DOUBTFUL_MAX_LOSS:
        return MoveJudgment.DOUBTFUL
    if loss < _ERROR_MAX_LOSS:
        return MoveJudgment.ERROR
    return MoveJudgment.BLUNDER


def checker_equity_loss(move: CheckerMove) -> float | None:
    """Best alternative equity minus the played one; None if unanalysed."""
    if not move.analysis:
        return None
    best = max(alt.equity for alt in move.analysis)
    played = move.played_analysis()
    if played is None:
        return 0.0
    return max(0.0, best - played.equity)


def compute_match_statistics(match: Match) -> MatchStatistics:
    """Summarise results, move counts and checker-play quality."""
    accs = (_PlayerAcc(), _PlayerAcc())
    reviews: list[CheckerPlayReview] = []
    total_moves = checker_moves = cube_moves = 0

    for game in match.games:
        if game.winner != 0:
            winner = accs[0] if game.winner == PLAYER1_WINNER else accs[1]
            winner.games_won += 1
            winner.points_won += game.points_won

        for idx, move in enumerate(game.moves):
            total_moves += 1
            if move.move_type == MoveType.CUBE and move.cube_move is not None:
                cube_moves += 1
                _acc_for(accs, move.cube_move.active_player).cube_decisions += 1
                continue
            if move.checker_move is None:
                continue
            checker_moves += 1
            player = move.checker_move.active_player
            acc = _acc_for(accs, player)
            acc.checker_moves += 1
            loss = checker_equity_loss(move.checker_move)
            if loss is None:
                continue
            judgment = classify_equity_loss(loss)
            _record_judgment(acc, loss, judgment)
            reviews.append(
                CheckerPlayReview(
                    game_number=game.game_number,
                    move_index=idx,
                    active_player=player,
                    equity_loss=loss,
                    judgment=judgment,
                )
            )

    return MatchStatistics(
        total_games=len(match.games),
        total_moves=total_moves,
        checker_moves=checker_moves,
        cube_moves=cube_moves,
        player1=_build_summary(accs[0]),
        player2=_build_summary(accs[1]),
        reviews=tuple(reviews),
    )


def worst_plays(
    reviews: Iterable[CheckerPlayReview], count: int = 3
) -> list[CheckerPlayReview]:
    """The ``count`` reviews with the largest equity loss."""
    ranked = sorted(reviews, key=lambda r: r.equity_loss, reverse=True)
    return [r for r in ranked[:count] if r.equity_loss > 0]


def _acc_for(accs: tuple[_PlayerAcc, _PlayerAcc], active_player: int) -> _PlayerAcc:
    return accs[0] if active_player == PLAYER1_ACTIVE else accs[1]


def _record_judgment(acc: _PlayerAcc, loss: float, judgment: MoveJudgment) -> None:
    acc.analysed_moves += 1
    acc.loss_sum += loss
    if judgment == MoveJudgment.BEST:
        acc.best += 1
    elif judgment == MoveJudgment.GOOD:
        acc.good += 1
    elif judgment == MoveJudgment.DOUBTFUL:
        acc.doubtful += 1
    elif judgment == MoveJudgment.ERROR:
        acc.errors += 1
    else:
        acc.blunders += 1


def _build_summary(acc: _PlayerAcc) -> PlayerSummary:
    avg = acc.loss_sum / acc.analysed_moves if acc.analysed_moves else 0.0
    return PlayerSummary(
        games_won=acc.games_won,
        points_won=acc.points_won,
        checker_moves=acc.checker_moves,
        cube_decisions=acc.cube_decisions,
        analysed_moves=acc.analysed_moves,
        avg_equity_loss=avg,
        best=acc.best,
        good=acc.good,
        doubtful=acc.doubtful,
        errors=acc.errors,
        blunders=acc.blunders,
    )
