"""Fixed-layout decoders, one per record kind.

Every decoder starts at the first byte of a record slot and reads fields in
on-disk order. Version-gated trailing fields are read only when the format
version is recent enough; older files leave the dataclass defaults.
"""

from __future__ import annotations

from collections.abc import Callable

from xgreader.core.binary import ByteCursor
from xgreader.core.enums import RecordKind
from xgreader.core.points import MOVE_SLOTS, POSITION_SLOTS
from xgreader.records.models import (
    BestMoveAnalysis,
    CubeEntry,
    DoubleAnalysis,
    EvalLevel,
    FooterGameEntry,
    FooterMatchEntry,
    HeaderGameEntry,
    HeaderMatchEntry,
    MoveEntry,
    Record,
    TimeSetting,
)

RecordDecoder = Callable[[ByteCursor, int], Record]

SHORT_NAME_CAPACITY = 41
SHORT_TEXT_CAPACITY = 129
UNICODE_TEXT_UNITS = 129
EVAL_SIZE = 7
MAX_ALTERNATIVES = 32
ROLLOUT_SLOTS = 32
_RECORD_PREFIX = 9


def _read_position(cur: ByteCursor) -> tuple[int, ...]:
    return cur.read_i8_array(POSITION_SLOTS)


def _read_pair(cur: ByteCursor) -> tuple[int, int]:
    first = cur.read_i32()
    return first, cur.read_i32()


# ── Sub-records ──────────────────────────────────────────────────────────────


def read_time_setting(cur: ByteCursor) -> TimeSetting:
    clock_type = cur.read_i32()
    per_game = cur.read_bool()
    cur.skip(3)
    return TimeSetting(
        clock_type=clock_type,
        per_game=per_game,
        time1=cur.read_i32(),
        time2=cur.read_i32(),
        penalty=cur.read_i32(),
        time_left1=cur.read_i32(),
        time_left2=cur.read_i32(),
        penalty_money=cur.read_i32(),
    )


def read_eval_level(cur: ByteCursor) -> EvalLevel:
    level = cur.read_i16()
    is_double = cur.read_bool()
    cur.skip(1)
    return EvalLevel(level=level, is_double=is_double)


def read_double_analysis(cur: ByteCursor) -> DoubleAnalysis:
    """Cube analysis block (132 bytes)."""
    position = _read_position(cur)
    cur.skip(2)
    return DoubleAnalysis(
        position=position,
        level=cur.read_i32(),
        score=_read_pair(cur),
        cube=cur.read_i32(),
        cube_pos=cur.read_i32(),
        jacoby=cur.read_i32(),
        crawford=cur.read_i16(),
        met=cur.read_i16(),
        flag_double=cur.read_i16(),
        is_beaver=cur.read_i16(),
        eval=cur.read_f32_array(EVAL_SIZE),
        equ_b=cur.read_f32(),
        equ_double=cur.read_f32(),
        equ_drop=cur.read_f32(),
        level_request=cur.read_i16(),
        double_choice3=cur.read_i16(),
        eval_double=cur.read_f32_array(EVAL_SIZE),
    )


def read_best_move_analysis(cur: ByteCursor) -> BestMoveAnalysis:
    """Checker-play analysis block (2184 bytes).

    The dice are full 32-bit integers here, unlike every other byte-sized
    board field in the block.
    """
    position = _read_position(cur)
    cur.skip(2)
    dice = _read_pair(cur)
    level = cur.read_i32()
    score = _read_pair(cur)
    cube = cur.read_i32()
    cube_pos = cur.read_i32()
    crawford = cur.read_i32()
    jacoby = cur.read_i32()
    n_moves = cur.read_i32()
    pos_played = tuple(_read_position(cur) for _ in range(MAX_ALTERNATIVES))
    moves = tuple(cur.read_i8_array(MOVE_SLOTS) for _ in range(MAX_ALTERNATIVES))
    eval_level = tuple(read_eval_level(cur) for _ in range(MAX_ALTERNATIVES))
    evals = tuple(cur.read_f32_array(EVAL_SIZE) for _ in range(MAX_ALTERNATIVES))
    return BestMoveAnalysis(
        position=position,
        dice=dice,
        level=level,
        score=score,
        cube=cube,
        cube_pos=cube_pos,
        crawford=crawford,
        jacoby=jacoby,
        n_moves=n_moves,
        pos_played=pos_played,
        moves=moves,
        eval_level=eval_level,
        eval=evals,
        unused=cur.read_i8(),
        met=cur.read_i8(),
        choice0=cur.read_i8(),
        choice3=cur.read_i8(),
    )


# ── Records ──────────────────────────────────────────────────────────────────


def decode_header_match(cur: ByteCursor, version: int) -> HeaderMatchEntry:
    """Match header.

    The record carries its own format version, which gates its trailing
    fields; the ``version`` argument is not consulted.
    """
    cur.skip(_RECORD_PREFIX)
    s_player1 = cur.read_short_string(SHORT_NAME_CAPACITY)
    s_player2 = cur.read_short_string(SHORT_NAME_CAPACITY)
    cur.skip(1)
    match_length = cur.read_i32()
    variation = cur.read_i32()
    crawford = cur.read_bool()
    jacoby = cur.read_bool()
    beaver = cur.read_bool()
    auto_double = cur.read_bool()
    elo1 = cur.read_f64()
    elo2 = cur.read_f64()
    exp1 = cur.read_i32()
    exp2 = cur.read_i32()
    date = cur.read_datetime()
    s_event = cur.read_short_string(SHORT_TEXT_CAPACITY)
    cur.skip(3)
    game_id = cur.read_i32()
    comp_level1 = cur.read_i32()
    comp_level2 = cur.read_i32()
    count_for_elo = cur.read_bool()
    add_to_profile1 = cur.read_bool()
    add_to_profile2 = cur.read_bool()
    s_location = cur.read_short_string(SHORT_TEXT_CAPACITY)
    game_mode = cur.read_i32()
    imported = cur.read_bool()
    s_round = cur.read_short_string(SHORT_TEXT_CAPACITY)
    cur.skip(2)
    invert = cur.read_i32()
    own_version = cur.read_i32()
    magic = cur.read_u32()
    money_init_g = cur.read_i32()
    money_init_score = _read_pair(cur)
    entered = cur.read_bool()
    counted = cur.read_bool()
    unrated_imp = cur.read_bool()
    cur.skip(1)
    comment_header_match = cur.read_i32()
    comment_footer_match = cur.read_i32()
    is_money_match = cur.read_bool()
    cur.skip(3)
    win_money = cur.read_f32()
    lose_money = cur.read_f32()
    currency = cur.read_i32()
    fee_money = cur.read_f32()
    table_stake = cur.read_i32()
    site_id = cur.read_i32()

    cube_limit = auto_double_max = 0
    if own_version >= 8:
        cube_limit = cur.read_i32()
        auto_double_max = cur.read_i32()
    transcribed = False
    event = player1 = player2 = location = round_ = ""
    if own_version >= 24:
        transcribed = cur.read_bool()
        cur.skip(1)
        event = cur.read_utf16(UNICODE_TEXT_UNITS)
        player1 = cur.read_utf16(UNICODE_TEXT_UNITS)
        player2 = cur.read_utf16(UNICODE_TEXT_UNITS)
        location = cur.read_utf16(UNICODE_TEXT_UNITS)
        round_ = cur.read_utf16(UNICODE_TEXT_UNITS)
    time_setting: TimeSetting | None = None
    if own_version >= 25:
        time_setting = read_time_setting(cur)
    delay_move = delay_cube = delay_move_done = delay_cube_done = 0
    if own_version >= 26:
        delay_move = cur.read_i32()
        delay_cube = cur.read_i32()
        delay_move_done = cur.read_i32()
        delay_cube_done = cur.read_i32()
    transcriber = ""
    if own_version >= 30:
        transcriber = cur.read_utf16(UNICODE_TEXT_UNITS)

    return HeaderMatchEntry(
        s_player1=s_player1,
        s_player2=s_player2,
        match_length=match_length,
        variation=variation,
        crawford=crawford,
        jacoby=jacoby,
        beaver=beaver,
        auto_double=auto_double,
        elo1=elo1,
        elo2=elo2,
        exp1=exp1,
        exp2=exp2,
        date=date,
        s_event=s_event,
        game_id=game_id,
        comp_level1=comp_level1,
        comp_level2=comp_level2,
        count_for_elo=count_for_elo,
        add_to_profile1=add_to_profile1,
        add_to_profile2=add_to_profile2,
        s_location=s_location,
        game_mode=game_mode,
        imported=imported,
        s_round=s_round,
        invert=invert,
        version=own_version,
        magic=magic,
        money_init_g=money_init_g,
        money_init_score=money_init_score,
        entered=entered,
        counted=counted,
        unrated_imp=unrated_imp,
        comment_header_match=comment_header_match,
        comment_footer_match=comment_footer_match,
        is_money_match=is_money_match,
        win_money=win_money,
        lose_money=lose_money,
        currency=currency,
        fee_money=fee_money,
        table_stake=table_stake,
        site_id=site_id,
        cube_limit=cube_limit,
        auto_double_max=auto_double_max,
        transcribed=transcribed,
        event=event,
        player1=player1,
        player2=player2,
        location=location,
        round=round_,
        time_setting=time_setting,
        tot_time_delay_move=delay_move,
        tot_time_delay_cube=delay_cube,
        tot_time_delay_move_done=delay_move_done,
        tot_time_delay_cube_done=delay_cube_done,
        transcriber=transcriber,
    )


def decode_header_game(cur: ByteCursor, version: int) -> HeaderGameEntry:
    cur.skip(_RECORD_PREFIX + 3)
    score1 = cur.read_i32()
    score2 = cur.read_i32()
    crawford_apply = cur.read_bool()
    pos_init = _read_position(cur)
    cur.skip(1)
    game_number = cur.read_i32()
    in_progress = cur.read_bool()
    cur.skip(3)
    comment_header_game = cur.read_i32()
    comment_footer_game = cur.read_i32()
    number_of_auto_doubles = cur.read_i32() if version >= 26 else 0
    return HeaderGameEntry(
        version=version,
        score1=score1,
        score2=score2,
        crawford_apply=crawford_apply,
        pos_init=pos_init,
        game_number=game_number,
        in_progress=in_progress,
        comment_header_game=comment_header_game,
        comment_footer_game=comment_footer_game,
        number_of_auto_doubles=number_of_auto_doubles,
    )


def decode_cube(cur: ByteCursor, version: int) -> CubeEntry:
    cur.skip(_RECORD_PREFIX + 3)
    active_p = cur.read_i32()
    double = cur.read_i32()
    take = cur.read_i32()
    beaver_r = cur.read_i32()
    raccoon_r = cur.read_i32()
    cube_b = cur.read_i32()
    position = _read_position(cur)
    cur.skip(2)
    doubled = read_double_analysis(cur)
    cur.skip(4)
    err_cube = cur.read_f64()
    dice_rolled = cur.read_short_string(3)
    cur.skip(5)
    err_take = cur.read_f64()
    rollout_index_d = cur.read_i32()
    comp_choice_d = cur.read_i32()
    analyze_c = cur.read_i32()
    cur.skip(4)
    err_beaver = cur.read_f64()
    err_raccoon = cur.read_f64()
    analyze_cr = cur.read_i32()
    is_valid = cur.read_i32()
    tutor_cube = cur.read_i8()
    tutor_take = cur.read_i8()
    cur.skip(6)
    err_tutor_cube = cur.read_f64()
    err_tutor_take = cur.read_f64()
    flagged_double = cur.read_bool()
    cur.skip(3)
    comment_cube = cur.read_i32()

    edited_cube = time_delay_cube = time_delay_cube_done = False
    auto_doubles = time_bot = time_top = 0
    if version >= 24:
        edited_cube = cur.read_bool()
    if version >= 26:
        time_delay_cube = cur.read_bool()
        time_delay_cube_done = cur.read_bool()
    if version >= 27:
        cur.skip(1)
        auto_doubles = cur.read_i32()
    if version >= 28:
        time_bot = cur.read_i32()
        time_top = cur.read_i32()

    return CubeEntry(
        version=version,
        active_p=active_p,
        double=double,
        take=take,
        beaver_r=beaver_r,
        raccoon_r=raccoon_r,
        cube_b=cube_b,
        position=position,
        doubled=doubled,
        err_cube=err_cube,
        dice_rolled=dice_rolled,
        err_take=err_take,
        rollout_index_d=rollout_index_d,
        comp_choice_d=comp_choice_d,
        analyze_c=analyze_c,
        err_beaver=err_beaver,
        err_raccoon=err_raccoon,
        analyze_cr=analyze_cr,
        is_valid=is_valid,
        tutor_cube=tutor_cube,
        tutor_take=tutor_take,
        err_tutor_cube=err_tutor_cube,
        err_tutor_take=err_tutor_take,
        flagged_double=flagged_double,
        comment_cube=comment_cube,
        edited_cube=edited_cube,
        time_delay_cube=time_delay_cube,
        time_delay_cube_done=time_delay_cube_done,
        number_of_auto_double_cube=auto_doubles,
        time_bot=time_bot,
        time_top=time_top,
    )


def decode_move(cur: ByteCursor, version: int) -> MoveEntry:
    cur.skip(_RECORD_PREFIX)
    position_i = _read_position(cur)
    position_end = _read_position(cur)
    cur.skip(3)
    active_p = cur.read_i32()
    moves = cur.read_i32_array(MOVE_SLOTS)
    dice = _read_pair(cur)
    cube_a = cur.read_i32()
    error_m = cur.read_f64()
    n_move_eval = cur.read_i32()
    data_moves = read_best_move_analysis(cur)
    played = cur.read_bool()
    cur.skip(3)
    err_move = cur.read_f64()
    err_luck = cur.read_f64()
    comp_choice = cur.read_i32()
    cur.skip(4)
    init_eq = cur.read_f64()
    rollout_index_m = cur.read_i32_array(ROLLOUT_SLOTS)
    analyze_m = cur.read_i32()
    analyze_l = cur.read_i32()
    invalid_m = cur.read_i32()
    position_tutor = _read_position(cur)
    tutor = cur.read_i8()
    cur.skip(1)
    err_tutor_move = cur.read_f64()
    flagged = cur.read_bool()
    cur.skip(3)
    comment_move = cur.read_i32()

    edited_move = False
    time_delay_move = time_delay_move_done = auto_doubles = 0
    if version >= 24:
        edited_move = cur.read_bool()
    if version >= 26:
        cur.skip(3)
        time_delay_move = cur.read_u32()
        time_delay_move_done = cur.read_u32()
    if version >= 27:
        auto_doubles = cur.read_i32()

    return MoveEntry(
        version=version,
        position_i=position_i,
        position_end=position_end,
        active_p=active_p,
        moves=moves,
        dice=dice,
        cube_a=cube_a,
        error_m=error_m,
        n_move_eval=n_move_eval,
        data_moves=data_moves,
        played=played,
        err_move=err_move,
        err_luck=err_luck,
        comp_choice=comp_choice,
        init_eq=init_eq,
        rollout_index_m=rollout_index_m,
        analyze_m=analyze_m,
        analyze_l=analyze_l,
        invalid_m=invalid_m,
        position_tutor=position_tutor,
        tutor=tutor,
        err_tutor_move=err_tutor_move,
        flagged=flagged,
        comment_move=comment_move,
        edited_move=edited_move,
        time_delay_move=time_delay_move,
        time_delay_move_done=time_delay_move_done,
        number_of_auto_double_move=auto_doubles,
    )


def decode_footer_game(cur: ByteCursor, version: int) -> FooterGameEntry:
    cur.skip(_RECORD_PREFIX + 3)
    score1g = cur.read_i32()
    score2g = cur.read_i32()
    crawford_applyg = cur.read_bool()
    cur.skip(3)
    winner = cur.read_i32()
    points_won = cur.read_i32()
    termination = cur.read_i32()
    cur.skip(4)
    return FooterGameEntry(
        version=version,
        score1g=score1g,
        score2g=score2g,
        crawford_applyg=crawford_applyg,
        winner=winner,
        points_won=points_won,
        termination=termination,
        err_resign=cur.read_f64(),
        err_take_resign=cur.read_f64(),
        eval=cur.read_f64_array(EVAL_SIZE),
        eval_level=cur.read_i32(),
    )


def decode_footer_match(cur: ByteCursor, version: int) -> FooterMatchEntry:
    cur.skip(_RECORD_PREFIX + 3)
    return FooterMatchEntry(
        version=version,
        score1m=cur.read_i32(),
        score2m=cur.read_i32(),
        winner_m=cur.read_i32(),
        elo1m=cur.read_f64(),
        elo2m=cur.read_f64(),
        exp1m=cur.read_i32(),
        exp2m=cur.read_i32(),
        datem=cur.read_datetime(),
    )


DECODERS: dict[RecordKind, RecordDecoder] = {
    RecordKind.HEADER_MATCH: decode_header_match,
    RecordKind.HEADER_GAME: decode_header_game,
    RecordKind.CUBE: decode_cube,
    RecordKind.MOVE: decode_move,
    RecordKind.FOOTER_GAME: decode_footer_game,
    RecordKind.FOOTER_MATCH: decode_footer_match,
}
