"""Options controlling how a match file is imported."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ImportOptions:
    """Knobs for a single import; pass a new instance per call."""

    check_game_file_magic: bool = True
    include_unfinished_games: bool = False
    extract_thumbnail: bool = True

    @classmethod
    def strict(cls) -> ImportOptions:
        return cls()

    @classmethod
    def lenient(cls) -> ImportOptions:
        """Skip the game-records tag check and keep games left without a footer."""
        return cls(check_game_file_magic=False, include_unfinished_games=True)
