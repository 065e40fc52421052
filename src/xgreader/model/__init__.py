"""Domain model: positions, moves, games and the match assembler."""

from xgreader.model.assembler import (
    MatchAssembler,
    assemble_match,
    convert_cube_entry,
    convert_move_entry,
    wrong_pass_take_percent,
)
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
from xgreader.model.perspective import normalize, swap_checkers, swap_position

__all__ = [
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
    "Termination",
    # Perspective
    "normalize",
    "swap_checkers",
    "swap_position",
    # Assembly
    "MatchAssembler",
    "assemble_match",
    "convert_cube_entry",
    "convert_move_entry",
    "wrong_pass_take_percent",
]
