"""Byte-level builders for synthetic match files used across the test suite.

Every field is written at its absolute offset inside the record slot so the
decoders are checked against the layout rather than against themselves.
"""

from __future__ import annotations

import struct
import zlib
from collections.abc import Sequence
from dataclasses import dataclass

RECORD_SIZE = 2560
HEADER_SIZE = 8232

INITIAL_POSITION = (
    0, -2, 0, 0, 0, 0, 5, 0, 3, 0, 0, 0, -5,
    5, 0, 0, 0, -3, 0, -5, 0, 0, 0, 0, 2, 0,
)


def _put(slot: bytearray, offset: int, fmt: str, *values: object) -> None:
    struct.pack_into("<" + fmt, slot, offset, *values)


def _put_short_string(slot: bytearray, offset: int, text: str, capacity: int) -> None:
    raw = text.encode("cp1252")[: capacity - 1]
    slot[offset] = len(raw)
    slot[offset + 1 : offset + 1 + len(raw)] = raw


def _put_utf16(slot: bytearray, offset: int, text: str, units: int) -> None:
    raw = text.encode("utf-16-le")[: (units - 1) * 2]
    slot[offset : offset + len(raw)] = raw


def _put_position(slot: bytearray, offset: int, position: Sequence[int]) -> None:
    _put(slot, offset, "26b", *position)


def _new_slot(kind: int) -> bytearray:
    slot = bytearray(RECORD_SIZE)
    slot[8] = kind
    return slot


# ── Records ──────────────────────────────────────────────────────────────────


def match_header_slot(
    *,
    version: int = 30,
    s_player1: str = "Alice",
    s_player2: str = "Bob",
    match_length: int = 7,
    crawford: bool = True,
    jacoby: bool = False,
    date: float = 45000.5,
    s_event: str = "Club night",
    s_location: str = "Paris",
    s_round: str = "Final",
    player1: str = "",
    player2: str = "",
    event: str = "",
    location: str = "",
    round_: str = "",
    transcriber: str = "",
    cube_limit: int = 10,
    clock_type: int = 2,
) -> bytearray:
    slot = _new_slot(0)
    _put_short_string(slot, 9, s_player1, 41)
    _put_short_string(slot, 50, s_player2, 41)
    _put(slot, 92, "ii", match_length, 0)
    _put(slot, 100, "4B", crawford, jacoby, 0, 0)
    _put(slot, 104, "dd", 1500.0, 1600.0)
    _put(slot, 120, "ii", 100, 200)
    _put(slot, 128, "d", date)
    _put_short_string(slot, 136, s_event, 129)
    _put(slot, 268, "iii", 42, 0, 0)
    _put_short_string(slot, 283, s_location, 129)
    _put(slot, 412, "i", 1)
    _put_short_string(slot, 417, s_round, 129)
    _put(slot, 548, "i", 0)
    _put(slot, 552, "i", version)
    slot[556:560] = b"DMLI"
    _put(slot, 576, "ii", -1, -1)
    _put(slot, 608, "i", 7)
    if version >= 8:
        _put(slot, 612, "ii", cube_limit, 0)
    if version >= 24:
        slot[620] = 1
        _put_utf16(slot, 622, event, 129)
        _put_utf16(slot, 880, player1, 129)
        _put_utf16(slot, 1138, player2, 129)
        _put_utf16(slot, 1396, location, 129)
        _put_utf16(slot, 1654, round_, 129)
    if version >= 25:
        _put(slot, 1912, "iB3xiiiiii", clock_type, 1, 60, 120, 5, 30, 45, 0)
    if version >= 26:
        _put(slot, 1944, "iiii", 11, 12, 13, 14)
    if version >= 30:
        _put_utf16(slot, 1960, transcriber, 129)
    return slot


def game_header_slot(
    *,
    score: tuple[int, int] = (0, 0),
    crawford: bool = False,
    position: Sequence[int] = INITIAL_POSITION,
    game_number: int = 1,
    auto_doubles: int = 0,
) -> bytearray:
    slot = _new_slot(1)
    _put(slot, 12, "ii", *score)
    slot[20] = int(crawford)
    _put_position(slot, 21, position)
    _put(slot, 48, "i", game_number)
    slot[52] = 1
    _put(slot, 56, "ii", -1, -1)
    _put(slot, 64, "i", auto_doubles)
    return slot


@dataclass(slots=True)
class CubeAnalysisFields:
    level: int = 3
    score: tuple[int, int] = (0, 0)
    cube: int = 1
    cube_pos: int = 0
    eval: tuple[float, ...] = (0.01, 0.1, 0.4, 0.6, 0.2, 0.02, 0.25)
    equ_b: float = 0.5
    equ_double: float = 0.75
    equ_drop: float = 1.0
    eval_double: tuple[float, ...] = (0.0,) * 7


def cube_slot(
    *,
    active_p: int = 1,
    double: int = 1,
    take: int = 1,
    cube_b: int = 1,
    position: Sequence[int] = INITIAL_POSITION,
    analysis: CubeAnalysisFields | None = None,
    dice_rolled: str = "43",
    comment: int = -1,
    time_top: int = 0,
) -> bytearray:
    fields = analysis or CubeAnalysisFields()
    slot = _new_slot(2)
    _put(slot, 12, "6i", active_p, double, take, 0, 0, cube_b)
    _put_position(slot, 36, position)
    _put_position(slot, 64, position)
    _put(slot, 92, "i", fields.level)
    _put(slot, 96, "ii", *fields.score)
    _put(slot, 104, "iii", fields.cube, fields.cube_pos, 0)
    _put(slot, 116, "4h", 0, 0, 1, 0)
    _put(slot, 124, "7f", *fields.eval)
    _put(slot, 152, "fff", fields.equ_b, fields.equ_double, fields.equ_drop)
    _put(slot, 164, "hh", 0, 0)
    _put(slot, 168, "7f", *fields.eval_double)
    _put(slot, 200, "d", 0.125)
    _put_short_string(slot, 208, dice_rolled, 3)
    _put(slot, 216, "d", 0.0625)
    _put(slot, 224, "iii", -1, 0, 4)
    _put(slot, 292, "i", comment)
    slot[296] = 1
    _put(slot, 300, "i", 3)
    _put(slot, 304, "ii", 0, time_top)
    return slot


@dataclass(slots=True)
class Alternative:
    move: tuple[int, ...]
    equity: float
    level: int = 3
    position: tuple[int, ...] = INITIAL_POSITION
    eval: tuple[float, ...] | None = None


def move_slot(
    *,
    active_p: int = 1,
    position: Sequence[int] = INITIAL_POSITION,
    played: tuple[int, ...] = (7, 3, 5, 2, -1, -1, -1, -1),
    dice: tuple[int, int] = (4, 3),
    cube: int = 1,
    cube_pos: int = 0,
    score: tuple[int, int] = (0, 0),
    alternatives: Sequence[Alternative] = (),
    n_moves: int | None = None,
    comment: int = -1,
    auto_doubles: int = 0,
) -> bytearray:
    slot = _new_slot(3)
    _put_position(slot, 9, position)
    _put_position(slot, 35, position)
    _put(slot, 64, "i", active_p)
    _put(slot, 68, "8i", *played)
    _put(slot, 100, "ii", *dice)
    _put(slot, 108, "i", cube)
    _put(slot, 112, "d", 0.0)
    _put(slot, 120, "i", len(alternatives))
    # best-move analysis block starts at 124
    _put_position(slot, 124, position)
    _put(slot, 152, "ii", *dice)
    _put(slot, 160, "i", 2)
    _put(slot, 164, "ii", *score)
    _put(slot, 172, "ii", cube, cube_pos)
    _put(slot, 188, "i", len(alternatives) if n_moves is None else n_moves)
    for idx, alt in enumerate(alternatives):
        _put_position(slot, 192 + 26 * idx, alt.position)
        moves = tuple(alt.move) + (-1,) * (8 - len(alt.move))
        _put(slot, 1024 + 8 * idx, "8b", *moves)
        _put(slot, 1280 + 4 * idx, "hB", alt.level, 0)
        ev = alt.eval or (0.01, 0.1, 0.45, 0.55, 0.15, 0.01, alt.equity)
        _put(slot, 1408 + 28 * idx, "7f", *ev)
    slot[2308] = 1
    _put(slot, 2312, "dd", 0.0, 0.0)
    _put(slot, 2344, "32i", *([-1] * 32))
    _put(slot, 2524, "i", comment)
    slot[2528] = 0
    _put(slot, 2532, "II", 7, 8)
    _put(slot, 2540, "i", auto_doubles)
    return slot


def game_footer_slot(
    *,
    score: tuple[int, int] = (0, 0),
    winner: int = -1,
    points_won: int = 1,
    termination: int = 1,
    eval_level: int = 0,
) -> bytearray:
    slot = _new_slot(4)
    _put(slot, 12, "ii", *score)
    _put(slot, 24, "iii", winner, points_won, termination)
    _put(slot, 40, "dd", 0.0, 0.0)
    _put(slot, 56, "7d", *([0.5] * 7))
    _put(slot, 112, "i", eval_level)
    return slot


def match_footer_slot(
    *, score: tuple[int, int] = (7, 3), winner: int = -1, date: float = 45000.75
) -> bytearray:
    slot = _new_slot(5)
    _put(slot, 12, "iii", score[0], score[1], winner)
    _put(slot, 24, "dd", 1510.0, 1590.0)
    _put(slot, 40, "ii", 101, 201)
    _put(slot, 48, "d", date)
    return slot


def unknown_slot(kind: int = 9) -> bytearray:
    return _new_slot(kind)


def records_segment(*slots: bytes) -> bytes:
    return b"".join(bytes(slot) for slot in slots)


# ── Archive and container ────────────────────────────────────────────────────


@dataclass(slots=True)
class ArchivedFile:
    name: str
    data: bytes
    deflate: bool = True
    path: str = ""


def build_archive(files: Sequence[ArchivedFile], *, compress_index: bool = True) -> bytes:
    """Archived data, then the index, then the 36-byte trailer."""
    data = bytearray()
    index = bytearray()
    for item in files:
        payload = zlib.compress(item.data) if item.deflate else item.data
        entry = bytearray(532)
        _put_short_string(entry, 0, item.name, 256)
        _put_short_string(entry, 256, item.path, 256)
        _put(
            entry,
            512,
            "iiiIBB",
            len(item.data),
            len(payload),
            len(data),
            zlib.crc32(item.data),
            0 if item.deflate else 1,
            6 if item.deflate else 0,
        )
        index += entry
        data += payload
    index_blob = zlib.compress(bytes(index)) if compress_index else bytes(index)
    return bytes(data) + index_blob + archive_trailer(
        bytes(data), index_blob, file_count=len(files), index_compressed=compress_index
    )


def archive_trailer(
    data: bytes,
    index: bytes,
    *,
    file_count: int,
    index_compressed: bool,
    archive_size: int | None = None,
) -> bytes:
    """36-byte trailer whose CRC covers ``data`` followed by ``index``."""
    return struct.pack(
        "<Iiiiii12x",
        zlib.crc32(data + index),
        file_count,
        1,
        len(index),
        len(data) if archive_size is None else archive_size,
        int(index_compressed),
    )


def container_header(
    *,
    game_name: str = "eXtreme Gammon 2.19.211.pre-release",
    save_name: str = "match.xg",
    thumbnail_size: int = 0,
    magic: bytes = b"RGMH",
    version: int = 1,
) -> bytes:
    head = bytearray(HEADER_SIZE)
    head[0:4] = magic
    _put(head, 4, "iiqI", version, HEADER_SIZE, 0, thumbnail_size)
    head[24:40] = bytes(range(16))
    _put_utf16(head, 40, game_name, 1024)
    _put_utf16(head, 40 + 2048, save_name, 1024)
    _put_utf16(head, 40 + 4096, "level", 1024)
    _put_utf16(head, 40 + 6144, "comments", 1024)
    return bytes(head)


def build_match_file(
    records: bytes,
    *,
    thumbnail: bytes = b"",
    extra_files: Sequence[ArchivedFile] = (),
    game_name: str = "eXtreme Gammon 2.19.211.pre-release",
) -> bytes:
    files = [
        ArchivedFile("temp.xgi", b"\x01" * 64),
        ArchivedFile("temp.xgr", b""),
        ArchivedFile("temp.xgc", b"comments", deflate=False),
        ArchivedFile("temp.xg", records),
        *extra_files,
    ]
    return (
        container_header(game_name=game_name, thumbnail_size=len(thumbnail))
        + thumbnail
        + build_archive(files)
    )


def sample_records() -> bytes:
    """One game: a placeholder cube entry, a 4-3 checker play, a double."""
    alternatives = [
        Alternative((7, 3, 5, 2), 0.012, level=3),
        Alternative((12, 8, 7, 4), -0.004, level=3),
        Alternative((23, 19, 12, 9), -0.02, level=2),
        Alternative((12, 8, 12, 9), -0.045, level=2),
        Alternative((23, 20, 23, 19), -0.09, level=0),
    ]
    return records_segment(
        match_header_slot(),
        game_header_slot(),
        cube_slot(double=-2),
        move_slot(alternatives=alternatives),
        cube_slot(
            active_p=-1,
            double=1,
            analysis=CubeAnalysisFields(
                level=4,
                score=(2, 5),
                cube=1,
                cube_pos=0,
                equ_b=0.61,
                equ_double=0.72,
                equ_drop=1.0,
            ),
        ),
        game_footer_slot(winner=-1, points_won=2, termination=2),
        match_footer_slot(),
    )
