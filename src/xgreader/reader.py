"""Top-level entry points: file, stream or pre-extracted segments to Match."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

from xgreader.config import ImportOptions
from xgreader.container.header import parse_container_header
from xgreader.container.segments import Segment, read_file_segments
from xgreader.core.enums import SegmentKind
from xgreader.core.errors import FormatError
from xgreader.model.assembler import MatchAssembler
from xgreader.model.models import Match
from xgreader.records.stream import UNKNOWN_VERSION, RecordStream

_LOGGER = logging.getLogger(__name__)


def product_version_of(segments: Iterable[Segment]) -> str:
    """Producing application's version string, from the container header.

    An unreadable header leaves the version empty instead of failing the import.
    """
    for segment in segments:
        if segment.kind != SegmentKind.GDF_HEADER:
            continue
        try:
            return parse_container_header(segment.data).product_version
        except FormatError as exc:
            _LOGGER.debug("Ignoring unreadable container header: %s", exc)
            return ""
    return ""


def parse_segments(
    segments: Iterable[Segment], options: ImportOptions | None = None
) -> Match:
    """Build a Match from segments already extracted by the caller."""
    segments = list(segments)
    assembler = MatchAssembler(
        product_version=product_version_of(segments), options=options
    )
    version = UNKNOWN_VERSION
    for segment in segments:
        if segment.kind != SegmentKind.GAME_FILE:
            continue
        stream = RecordStream(segment.data, version)
        assembler.feed_all(stream)
        version = stream.version
        if stream.skipped:
            _LOGGER.debug("Skipped %d records of unknown kind", stream.skipped)

    match = assembler.finish()
    _LOGGER.info(
        "Decoded match %s vs %s: %d games, %d moves, format version %d",
        match.metadata.player1_name or "?",
        match.metadata.player2_name or "?",
        len(match.games),
        sum(len(game.moves) for game in match.games),
        match.metadata.engine_version,
    )
    return match


def parse_match_stream(stream: BinaryIO, options: ImportOptions | None = None) -> Match:
    """Decode a match file from a seekable binary stream."""
    return parse_segments(read_file_segments(stream, options), options)


def parse_match_file(path: str | Path, options: ImportOptions | None = None) -> Match:
    """Decode the match file at ``path``."""
    with Path(path).open("rb") as fh:
        return parse_match_stream(fh, options)
