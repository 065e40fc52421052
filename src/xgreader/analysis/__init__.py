"""Match statistics APIs."""

from xgreader.analysis.models import (
    CheckerPlayReview,
    MatchStatistics,
    MoveJudgment,
    PlayerSummary,
)
from xgreader.analysis.service import (
    checker_equity_loss,
    classify_equity_loss,
    compute_match_statistics,
    worst_plays,
)

__all__ = [
    "CheckerPlayReview",
    "MatchStatistics",
    "MoveJudgment",
    "PlayerSummary",
    "checker_equity_loss",
    "classify_equity_loss",
    "compute_match_statistics",
    "worst_plays",
]
