"""Record layer: typed records and the decoders that read them."""

from xgreader.records.decoders import (
    DECODERS,
    decode_cube,
    decode_footer_game,
    decode_footer_match,
    decode_header_game,
    decode_header_match,
    decode_move,
    read_best_move_analysis,
    read_double_analysis,
)
from xgreader.records.models import (
    BestMoveAnalysis,
    CubeEntry,
    DoubleAnalysis,
    EvalLevel,
    FooterGameEntry,
    FooterMatchEntry,
    HeaderGameEntry,
    HeaderMatchEntry,
    MoveEntry,
    Record,
    TimeSetting,
)
from xgreader.records.stream import (
    RECORD_SIZE,
    UNKNOWN_VERSION,
    RecordStream,
    decode_records,
)

__all__ = [
    # Records
    "BestMoveAnalysis",
    "CubeEntry",
    "DoubleAnalysis",
    "EvalLevel",
    "FooterGameEntry",
    "FooterMatchEntry",
    "HeaderGameEntry",
    "HeaderMatchEntry",
    "MoveEntry",
    "Record",
    "TimeSetting",
    # Decoding
    "DECODERS",
    "RECORD_SIZE",
    "UNKNOWN_VERSION",
    "RecordStream",
    "decode_cube",
    "decode_footer_game",
    "decode_footer_match",
    "decode_header_game",
    "decode_header_match",
    "decode_move",
    "decode_records",
    "read_best_move_analysis",
    "read_double_analysis",
]
