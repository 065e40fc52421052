"""Core enumerations for the match-file domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class RecordKind(IntEnum):
    """Discriminator byte stored at offset 8 of every record slot."""

    HEADER_MATCH = 0
    HEADER_GAME = 1
    CUBE = 2
    MOVE = 3
    FOOTER_GAME = 4
    FOOTER_MATCH = 5


class SegmentKind(IntEnum):
    """Kinds of byte blobs carried by a match file."""

    GDF_HEADER = 0
    GDF_IMAGE = 1
    GAME_HEADER = 2
    GAME_FILE = 3
    ROLLOUTS = 4
    COMMENTS = 5
    ARCHIVE_INDEX = 6
    UNKNOWN = 7

    @property
    def file_suffix(self) -> str:
        """Suffix used when a segment is dumped to disk."""
        return _SEGMENT_SUFFIX[self]


_SEGMENT_SUFFIX: dict[SegmentKind, str] = {
    SegmentKind.GDF_HEADER: "_gdh.bin",
    SegmentKind.GDF_IMAGE: ".jpg",
    SegmentKind.GAME_HEADER: "_gamehdr.bin",
    SegmentKind.GAME_FILE: "_gamefile.bin",
    SegmentKind.ROLLOUTS: "_rollouts.bin",
    SegmentKind.COMMENTS: "_comments.bin",
    SegmentKind.ARCHIVE_INDEX: "_idx.bin",
    SegmentKind.UNKNOWN: "",
}


class MoveType(StrEnum):
    """Tag of a :class:`~xgreader.model.Move`."""

    CHECKER = "checker"
    CUBE = "cube"


class CubeAction(IntEnum):
    """Known values of a cube record's decision code."""

    PLACEHOLDER = -2
    NO_DOUBLE = 0
    DOUBLE = 1


class GameOutcome(IntEnum):
    """Base outcome of a finished game."""

    DROP = 0
    SINGLE = 1
    GAMMON = 2
    BACKGAMMON = 3
