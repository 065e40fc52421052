"""Core layer: enums, errors and byte-level helpers with no external dependencies."""

from xgreader.core.binary import ByteCursor
from xgreader.core.conversions import (
    delphi_datetime,
    delphi_short_string,
    stream_crc32,
    utf16_to_str,
)
from xgreader.core.enums import (
    CubeAction,
    GameOutcome,
    MoveType,
    RecordKind,
    SegmentKind,
)
from xgreader.core.errors import (
    CorruptArchiveError,
    CorruptFileError,
    FormatError,
    MalformedRecordError,
    ShortReadError,
    TruncationError,
    XGImportError,
)
from xgreader.core.points import (
    BAR,
    BEAR_OFF,
    UNUSED,
    checker_count,
    convert_move,
    to_external_point,
)

__all__ = [
    # Enums
    "CubeAction",
    "GameOutcome",
    "MoveType",
    "RecordKind",
    "SegmentKind",
    # Errors
    "CorruptArchiveError",
    "CorruptFileError",
    "FormatError",
    "MalformedRecordError",
    "ShortReadError",
    "TruncationError",
    "XGImportError",
    # Byte helpers
    "ByteCursor",
    "delphi_datetime",
    "delphi_short_string",
    "stream_crc32",
    "utf16_to_str",
    # Points
    "BAR",
    "BEAR_OFF",
    "UNUSED",
    "checker_count",
    "convert_move",
    "to_external_point",
]
