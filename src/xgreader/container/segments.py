"""Splitting a match file into typed segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO

from xgreader.config import ImportOptions
from xgreader.container.archive import ZlibArchive
from xgreader.container.header import read_container_header
from xgreader.core.enums import SegmentKind
from xgreader.core.errors import FormatError

_LOGGER = logging.getLogger(__name__)

GAME_FILE_MAGIC = b"DMLI"
GAME_FILE_MAGIC_OFFSET = 556

ARCHIVE_FILE_KINDS: dict[str, SegmentKind] = {
    "temp.xgi": SegmentKind.GAME_HEADER,
    "temp.xgr": SegmentKind.ROLLOUTS,
    "temp.xgc": SegmentKind.COMMENTS,
    "temp.xg": SegmentKind.GAME_FILE,
}


@dataclass(slots=True)
class Segment:
    """A named, typed byte blob taken from a match file."""

    kind: SegmentKind
    data: bytes
    filename: str = ""


def segment_kind_for(name: str) -> SegmentKind:
    """Map an archived file name to its segment kind."""
    return ARCHIVE_FILE_KINDS.get(name, SegmentKind.UNKNOWN)


def check_game_file(data: bytes) -> None:
    """Validate the tag stored inside the game-records segment."""
    end = GAME_FILE_MAGIC_OFFSET + len(GAME_FILE_MAGIC)
    if len(data) > end and data[GAME_FILE_MAGIC_OFFSET:end] != GAME_FILE_MAGIC:
        raise FormatError("not a valid game records file", GAME_FILE_MAGIC_OFFSET)


def read_file_segments(
    stream: BinaryIO, options: ImportOptions | None = None
) -> list[Segment]:
    """Return every segment of the match file open in ``stream``."""
    opts = options or ImportOptions()
    header = read_container_header(stream)

    stream.seek(0)
    header_bytes = stream.read(header.header_size)
    if len(header_bytes) != header.header_size:
        raise FormatError("file ends inside the container header", len(header_bytes))
    segments = [Segment(SegmentKind.GDF_HEADER, header_bytes)]

    if header.has_thumbnail and opts.extract_thumbnail:
        start = header.header_size + header.thumbnail_offset
        stream.seek(start)
        image = stream.read(header.thumbnail_size)
        if len(image) != header.thumbnail_size:
            raise FormatError("file ends inside the thumbnail", start + len(image))
        segments.append(Segment(SegmentKind.GDF_IMAGE, image))

    archive = ZlibArchive.open(stream)
    for entry in archive:
        data = archive.extract(entry)
        kind = segment_kind_for(entry.name)
        if kind == SegmentKind.GAME_FILE and opts.check_game_file_magic:
            check_game_file(data)
        segments.append(Segment(kind, data, entry.name))

    _LOGGER.debug(
        "Read %d segments: %s",
        len(segments),
        ", ".join(seg.kind.name for seg in segments),
    )
    return segments
