"""Turning the decoded record sequence into a Match tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from xgreader.config import ImportOptions
from xgreader.core.enums import CubeAction
from xgreader.core.points import convert_move
from xgreader.model.models import (
    CheckerAnalysis,
    CheckerMove,
    CubeAnalysis,
    CubeMove,
    Game,
    Match,
    MatchMetadata,
    Move,
    Position,
    Termination,
)
from xgreader.model.perspective import normalize
from xgreader.records.decoders import MAX_ALTERNATIVES
from xgreader.records.models import (
    CubeEntry,
    DoubleAnalysis,
    FooterGameEntry,
    FooterMatchEntry,
    HeaderGameEntry,
    HeaderMatchEntry,
    MoveEntry,
    Record,
)

_LOGGER = logging.getLogger(__name__)

NOT_APPLICABLE = -1.0
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _preferred(unicode_value: str, legacy_value: str) -> str:
    return unicode_value or legacy_value


# ── Cube decisions ───────────────────────────────────────────────────────────


def wrong_pass_take_percent(
    no_double: float, double_take: float, double_pass: float
) -> float:
    """Break-even chance (in %) of the opponent answering a double wrongly.

    Solves ``p * wrong + (1 - p) * right = no_double`` where ``right`` is the
    opponent's correct response (the lower equity for the doubler). Only
    meaningful when no-double is the best cubeful choice; otherwise
    :data:`NOT_APPLICABLE` is returned.
    """
    if no_double < double_take or no_double < double_pass:
        return NOT_APPLICABLE
    if double_take < double_pass:
        right, wrong = double_take, double_pass
    else:
        right, wrong = double_pass, double_take
    spread = wrong - right
    if spread == 0:
        return 0.0
    return (no_double - right) / spread * 100.0


def convert_cube_analysis(doubled: DoubleAnalysis) -> CubeAnalysis:
    ev = doubled.eval
    return CubeAnalysis(
        player1_win_rate=1.0 - ev[2],
        player1_gammon_rate=ev[4],
        player1_bg_rate=ev[5],
        player2_gammon_rate=ev[1],
        player2_bg_rate=ev[0],
        cubeless_no_double=ev[6],
        # Not stored by the format; twice the no-double value matches it.
        cubeless_double=ev[6] * 2.0,
        cubeful_no_double=doubled.equ_b,
        cubeful_double_take=doubled.equ_double,
        cubeful_double_pass=doubled.equ_drop,
        wrong_pass_take_percent=wrong_pass_take_percent(
            doubled.equ_b, doubled.equ_double, doubled.equ_drop
        ),
        analysis_depth=doubled.level,
    )


def convert_cube_entry(entry: CubeEntry) -> CubeMove:
    doubled = entry.doubled
    position = Position(
        checkers=entry.position,
        cube=doubled.cube or entry.cube_b,
        cube_pos=doubled.cube_pos,
        score=doubled.score,
    )
    return CubeMove(
        position=normalize(position, entry.active_p),
        active_player=entry.active_p,
        cube_action=entry.double,
        analysis=convert_cube_analysis(doubled),
    )


# ── Checker plays ────────────────────────────────────────────────────────────


def convert_move_entry(entry: MoveEntry) -> CheckerMove:
    best = entry.data_moves
    cube = best.cube or entry.cube_a
    position = Position(
        checkers=entry.position_i,
        cube=cube,
        cube_pos=best.cube_pos,
        score=best.score,
    )

    count = best.n_moves
    if count > MAX_ALTERNATIVES:
        _LOGGER.warning(
            "Move record lists %d alternatives; keeping the first %d",
            count,
            MAX_ALTERNATIVES,
        )
        count = MAX_ALTERNATIVES

    analysis: list[CheckerAnalysis] = []
    for idx in range(max(count, 0)):
        ev = best.eval[idx]
        after = Position(
            checkers=best.pos_played[idx],
            cube=cube,
            cube_pos=best.cube_pos,
            score=best.score,
        )
        analysis.append(
            CheckerAnalysis(
                position=normalize(after, entry.active_p),
                move=convert_move(best.moves[idx], stop_at_unused=True),
                player1_win_rate=1.0 - ev[2],
                player1_gammon_rate=ev[4],
                player1_bg_rate=ev[5],
                player2_gammon_rate=ev[1],
                player2_bg_rate=ev[0],
                equity=ev[6],
                analysis_depth=best.eval_level[idx].level,
            )
        )

    return CheckerMove(
        position=normalize(position, entry.active_p),
        active_player=entry.active_p,
        dice=entry.dice,
        played_move=convert_move(entry.moves),
        analysis=analysis,
    )


# ── Assembly ─────────────────────────────────────────────────────────────────


class MatchAssembler:
    """Consumes records in file order and builds the Match tree."""

    __slots__ = ("_match", "_current", "_options")

    def __init__(
        self, *, product_version: str = "", options: ImportOptions | None = None
    ) -> None:
        self._options = options or ImportOptions()
        self._match = Match(metadata=MatchMetadata(product_version=product_version))
        self._current: Game | None = None

    @property
    def current_game(self) -> Game | None:
        return self._current

    def feed(self, record: Record) -> None:
        if isinstance(record, HeaderMatchEntry):
            self._on_header_match(record)
        elif isinstance(record, HeaderGameEntry):
            self._on_header_game(record)
        elif isinstance(record, CubeEntry):
            self._on_cube(record)
        elif isinstance(record, MoveEntry):
            self._on_move(record)
        elif isinstance(record, FooterGameEntry):
            self._on_footer_game(record)
        elif isinstance(record, FooterMatchEntry):
            self._match.final_score = (record.score1m, record.score2m)
        else:
            raise TypeError(f"Unsupported record type: {type(record).__name__}")

    def feed_all(self, records: Iterable[Record]) -> None:
        for record in records:
            self.feed(record)

    def finish(self) -> Match:
        """Close the stream and return the assembled match."""
        if self._current is not None:
            if self._options.include_unfinished_games:
                self._match.games.append(self._current)
            else:
                _LOGGER.debug(
                    "Dropping unfinished game %d", self._current.game_number
                )
            self._current = None
        return self._match

    def _on_header_match(self, record: HeaderMatchEntry) -> None:
        meta = self._match.metadata
        meta.player1_name = _preferred(record.player1, record.s_player1)
        meta.player2_name = _preferred(record.player2, record.s_player2)
        meta.location = _preferred(record.location, record.s_location)
        meta.event = _preferred(record.event, record.s_event)
        meta.round = _preferred(record.round, record.s_round)
        meta.date_time = record.date.strftime(_DATE_FORMAT) if record.date else ""
        meta.match_length = record.match_length
        meta.engine_version = record.version
        meta.crawford = record.crawford
        meta.jacoby = record.jacoby
        meta.transcriber = record.transcriber

    def _on_header_game(self, record: HeaderGameEntry) -> None:
        if self._current is not None:
            _LOGGER.warning(
                "Game %d opened before game %d was closed",
                record.game_number,
                self._current.game_number,
            )
            self.finish()
        self._current = Game(
            game_number=record.game_number,
            initial_score=(record.score1, record.score2),
            crawford=record.crawford_apply,
        )

    def _on_cube(self, record: CubeEntry) -> None:
        if record.double == CubeAction.PLACEHOLDER:
            return
        if self._current is None:
            _LOGGER.warning("Cube record outside of any game ignored")
            return
        self._current.moves.append(Move.cube(convert_cube_entry(record)))

    def _on_move(self, record: MoveEntry) -> None:
        if self._current is None:
            _LOGGER.warning("Move record outside of any game ignored")
            return
        self._current.moves.append(Move.checker(convert_move_entry(record)))

    def _on_footer_game(self, record: FooterGameEntry) -> None:
        if self._current is None:
            _LOGGER.warning("Game footer without an open game ignored")
            return
        game = self._current
        game.winner = record.winner
        game.points_won = record.points_won
        game.termination = Termination.from_code(record.termination)
        self._match.games.append(game)
        self._current = None


def assemble_match(
    records: Iterable[Record],
    *,
    product_version: str = "",
    options: ImportOptions | None = None,
) -> Match:
    """Build a Match from records in file order."""
    assembler = MatchAssembler(product_version=product_version, options=options)
    assembler.feed_all(records)
    return assembler.finish()
