"""Reflecting positions between the two players' points of view.

Both functions are involutions: applying one twice returns its input.
"""

from __future__ import annotations

from xgreader.model.models import Position


def swap_checkers(checkers: tuple[int, ...]) -> tuple[int, ...]:
    """Reverse and negate a 26-slot board; the two bars trade places."""
    return tuple(-value for value in reversed(checkers))


def swap_position(position: Position) -> Position:
    """Swap board, cube owner and score to the opponent's side."""
    return Position(
        checkers=swap_checkers(position.checkers),
        cube=position.cube,
        cube_pos=-position.cube_pos,
        score=(position.score[1], position.score[0]),
    )


def normalize(position: Position, active_player: int) -> Position:
    """Report ``position`` from the side of the player on roll.

    Records with an active player of -1 are stored from the other side of
    the board and get swapped; everything else is returned unchanged.
    """
    if active_player == -1:
        return swap_position(position)
    return position
