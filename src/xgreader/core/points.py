"""Point numbering used in move encodings.

Stored moves number points 0–23 from the mover's side, use 24 for the bar,
-2 for bearing off and -1 for an unused from/to slot. Decoded moves use
1–24 for points and 25 for the bar; the two sentinels are unchanged.
"""

from __future__ import annotations

from typing import TypeAlias

MoveEncoding: TypeAlias = tuple[int, ...]  # 8 slots: 4 × (from, to)

POSITION_SLOTS = 26
MOVE_SLOTS = 8
CHECKERS_PER_SIDE = 15

UNUSED = -1
BEAR_OFF = -2
RAW_BAR = 24
BAR = 25


def to_external_point(raw: int) -> int:
    """Map one stored from/to value to the 1-based encoding."""
    if raw == UNUSED:
        return UNUSED
    if raw == BEAR_OFF:
        return BEAR_OFF
    if raw == RAW_BAR:
        return BAR
    return raw + 1


def convert_move(raw: MoveEncoding, *, stop_at_unused: bool = False) -> MoveEncoding:
    """Convert an 8-slot stored move to the 1-based encoding.

    With ``stop_at_unused`` every slot after the first unused one is also
    reported unused; analysis alternatives can carry stale bytes there.
    """
    out: list[int] = []
    ended = False
    for value in raw:
        if ended or value == UNUSED:
            out.append(UNUSED)
            ended = stop_at_unused
            continue
        out.append(to_external_point(value))
    return tuple(out)


def checker_count(checkers: tuple[int, ...]) -> int:
    """Total number of checkers on the board, both sides."""
    return sum(abs(value) for value in checkers)
