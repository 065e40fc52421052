"""Typed records decoded from the game-records segment.

One dataclass per record kind; :data:`Record` is their union. Field names
follow the producing application's own record layout, converted to
snake_case. Positions are stored exactly as on disk (26 signed counts).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, TypeAlias

from xgreader.core.enums import RecordKind

RawPosition: TypeAlias = tuple[int, ...]
Eval: TypeAlias = tuple[float, ...]  # 7 values, see CheckerAnalysis/CubeAnalysis


# ── Sub-records ──────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class TimeSetting:
    """Clock configuration, present from format version 25."""

    clock_type: int
    per_game: bool
    time1: int
    time2: int
    penalty: int
    time_left1: int
    time_left2: int
    penalty_money: int


@dataclass(slots=True, frozen=True)
class EvalLevel:
    """Search depth of one alternative; ``is_double`` marks a cube search."""

    level: int
    is_double: bool


@dataclass(slots=True, frozen=True)
class DoubleAnalysis:
    """Engine analysis block embedded in a cube record."""

    position: RawPosition
    level: int
    score: tuple[int, int]
    cube: int
    cube_pos: int
    jacoby: int
    crawford: int
    met: int
    flag_double: int
    is_beaver: int
    eval: Eval
    equ_b: float
    equ_double: float
    equ_drop: float
    level_request: int
    double_choice3: int
    eval_double: Eval


@dataclass(slots=True, frozen=True)
class BestMoveAnalysis:
    """Engine analysis block embedded in a move record (up to 32 plays)."""

    position: RawPosition
    dice: tuple[int, int]
    level: int
    score: tuple[int, int]
    cube: int
    cube_pos: int
    crawford: int
    jacoby: int
    n_moves: int
    pos_played: tuple[RawPosition, ...]
    moves: tuple[tuple[int, ...], ...]
    eval_level: tuple[EvalLevel, ...]
    eval: tuple[Eval, ...]
    unused: int
    met: int
    choice0: int
    choice3: int

    @property
    def cubepos(self) -> int:
        """Older spelling of :attr:`cube_pos`, kept for existing consumers."""
        return self.cube_pos


# ── Records ──────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class HeaderMatchEntry:
    kind: ClassVar[RecordKind] = RecordKind.HEADER_MATCH

    s_player1: str
    s_player2: str
    match_length: int
    variation: int
    crawford: bool
    jacoby: bool
    beaver: bool
    auto_double: bool
    elo1: float
    elo2: float
    exp1: int
    exp2: int
    date: datetime | None
    s_event: str
    game_id: int
    comp_level1: int
    comp_level2: int
    count_for_elo: bool
    add_to_profile1: bool
    add_to_profile2: bool
    s_location: str
    game_mode: int
    imported: bool
    s_round: str
    invert: int
    version: int
    magic: int
    money_init_g: int
    money_init_score: tuple[int, int]
    entered: bool
    counted: bool
    unrated_imp: bool
    comment_header_match: int
    comment_footer_match: int
    is_money_match: bool
    win_money: float
    lose_money: float
    currency: int
    fee_money: float
    table_stake: int
    site_id: int
    # version >= 8
    cube_limit: int = 0
    auto_double_max: int = 0
    # version >= 24
    transcribed: bool = False
    event: str = ""
    player1: str = ""
    player2: str = ""
    location: str = ""
    round: str = ""
    # version >= 25
    time_setting: TimeSetting | None = None
    # version >= 26
    tot_time_delay_move: int = 0
    tot_time_delay_cube: int = 0
    tot_time_delay_move_done: int = 0
    tot_time_delay_cube_done: int = 0
    # version >= 30
    transcriber: str = ""


@dataclass(slots=True, frozen=True)
class HeaderGameEntry:
    kind: ClassVar[RecordKind] = RecordKind.HEADER_GAME

    version: int
    score1: int
    score2: int
    crawford_apply: bool
    pos_init: RawPosition
    game_number: int
    in_progress: bool
    comment_header_game: int
    comment_footer_game: int
    # version >= 26
    number_of_auto_doubles: int = 0


@dataclass(slots=True, frozen=True)
class CubeEntry:
    kind: ClassVar[RecordKind] = RecordKind.CUBE

    version: int
    active_p: int
    double: int
    take: int
    beaver_r: int
    raccoon_r: int
    cube_b: int
    position: RawPosition
    doubled: DoubleAnalysis
    err_cube: float
    dice_rolled: str
    err_take: float
    rollout_index_d: int
    comp_choice_d: int
    analyze_c: int
    err_beaver: float
    err_raccoon: float
    analyze_cr: int
    is_valid: int
    tutor_cube: int
    tutor_take: int
    err_tutor_cube: float
    err_tutor_take: float
    flagged_double: bool
    comment_cube: int
    # version >= 24
    edited_cube: bool = False
    # version >= 26
    time_delay_cube: bool = False
    time_delay_cube_done: bool = False
    # version >= 27
    number_of_auto_double_cube: int = 0
    # version >= 28
    time_bot: int = 0
    time_top: int = 0


@dataclass(slots=True, frozen=True)
class MoveEntry:
    kind: ClassVar[RecordKind] = RecordKind.MOVE

    version: int
    position_i: RawPosition
    position_end: RawPosition
    active_p: int
    moves: tuple[int, ...]
    dice: tuple[int, int]
    cube_a: int
    error_m: float
    n_move_eval: int
    data_moves: BestMoveAnalysis
    played: bool
    err_move: float
    err_luck: float
    comp_choice: int
    init_eq: float
    rollout_index_m: tuple[int, ...]
    analyze_m: int
    analyze_l: int
    invalid_m: int
    position_tutor: RawPosition
    tutor: int
    err_tutor_move: float
    flagged: bool
    comment_move: int
    # version >= 24
    edited_move: bool = False
    # version >= 26
    time_delay_move: int = 0
    time_delay_move_done: int = 0
    # version >= 27
    number_of_auto_double_move: int = 0


@dataclass(slots=True, frozen=True)
class FooterGameEntry:
    kind: ClassVar[RecordKind] = RecordKind.FOOTER_GAME

    version: int
    score1g: int
    score2g: int
    crawford_applyg: bool
    winner: int
    points_won: int
    termination: int
    err_resign: float
    err_take_resign: float
    eval: tuple[float, ...]
    eval_level: int


@dataclass(slots=True, frozen=True)
class FooterMatchEntry:
    kind: ClassVar[RecordKind] = RecordKind.FOOTER_MATCH

    version: int
    score1m: int
    score2m: int
    winner_m: int
    elo1m: float
    elo2m: float
    exp1m: int
    exp2m: int
    datem: datetime | None


Record: TypeAlias = (
    HeaderMatchEntry
    | HeaderGameEntry
    | CubeEntry
    | MoveEntry
    | FooterGameEntry
    | FooterMatchEntry
)
