"""Container layer: file header, zlib archive and segment extraction."""

from xgreader.container.archive import (
    ArchiveEntry,
    ArchiveTrailer,
    ZlibArchive,
)
from xgreader.container.header import (
    ContainerHeader,
    parse_container_header,
    read_container_header,
)
from xgreader.container.segments import (
    Segment,
    check_game_file,
    read_file_segments,
    segment_kind_for,
)

__all__ = [
    "ArchiveEntry",
    "ArchiveTrailer",
    "ContainerHeader",
    "Segment",
    "ZlibArchive",
    "check_game_file",
    "parse_container_header",
    "read_container_header",
    "read_file_segments",
    "segment_kind_for",
]
