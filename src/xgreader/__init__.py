"""Decoder for eXtreme Gammon match files.

Quick start::

    from xgreader import parse_match_file

    match = parse_match_file("match.xg")
    for game in match.games:
        for move in game.moves:
            print(move.move_type, move.checker_move or move.cube_move)
"""

from xgreader.config import ImportOptions
from xgreader.container import Segment, read_file_segments
from xgreader.core.errors import (
    CorruptArchiveError,
    CorruptFileError,
    FormatError,
    MalformedRecordError,
    TruncationError,
    XGImportError,
)
from xgreader.model import (
    CheckerAnalysis,
    CheckerMove,
    CubeAnalysis,
    CubeMove,
    Game,
    Match,
    MatchMetadata,
    Move,
    Position,
)
from xgreader.reader import parse_match_file, parse_match_stream, parse_segments

__all__ = [
    "ImportOptions",
    # Entry points
    "parse_match_file",
    "parse_match_stream",
    "parse_segments",
    "read_file_segments",
    "Segment",
    # Domain objects
    "CheckerAnalysis",
    "CheckerMove",
    "CubeAnalysis",
    "CubeMove",
    "Game",
    "Match",
    "MatchMetadata",
    "Move",
    "Position",
    # Errors
    "CorruptArchiveError",
    "CorruptFileError",
    "FormatError",
    "MalformedRecordError",
    "TruncationError",
    "XGImportError",
]
