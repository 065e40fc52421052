"""Tests for move point numbering."""

import pytest

from xgreader.core.points import (
    BAR,
    BEAR_OFF,
    UNUSED,
    checker_count,
    convert_move,
    to_external_point,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(-1, UNUSED), (-2, BEAR_OFF), (24, BAR), (0, 1), (5, 6), (23, 24)],
)
def test_to_external_point(raw: int, expected: int) -> None:
    assert to_external_point(raw) == expected


class TestConvertMove:
    def test_played_move(self) -> None:
        assert convert_move((24, 20, 5, -2, -1, -1, -1, -1)) == (
            25, 21, 6, -2, -1, -1, -1, -1,
        )

    def test_keeps_slots_after_unused_by_default(self) -> None:
        assert convert_move((7, 3, -1, -1, 9, 4, -1, -1)) == (
            8, 4, -1, -1, 10, 5, -1, -1,
        )

    def test_stop_at_unused(self) -> None:
        assert convert_move((7, 3, -1, -1, 9, 4, 3, 1), stop_at_unused=True) == (
            8, 4, -1, -1, -1, -1, -1, -1,
        )


def test_checker_count() -> None:
    assert checker_count((0, -2, 5, 0, 3, -1)) == 11
