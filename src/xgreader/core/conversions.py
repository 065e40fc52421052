"""Checksum, string and date helpers shared by the decoders."""

from __future__ import annotations

import math
import zlib
from datetime import datetime, timedelta
from typing import BinaryIO

from xgreader.core.errors import ShortReadError

_CRC_CHUNK = 32768
_DELPHI_EPOCH = datetime(1899, 12, 30)
_SHORT_STRING_ENCODING = "cp1252"


def stream_crc32(stream: BinaryIO, num_bytes: int, start: int | None = None) -> int:
    """CRC32 of ``num_bytes`` bytes of ``stream`` beginning at ``start``.

    The stream position is restored afterwards. ``start=None`` reads from the
    current position.
    """
    saved = stream.tell()
    if start is not None:
        stream.seek(start)
    begin = stream.tell()
    crc = 0
    left = num_bytes
    try:
        while left > 0:
            chunk = stream.read(min(_CRC_CHUNK, left))
            if not chunk:
                raise ShortReadError(
                    f"stream ended {left} bytes before checksum range end",
                    begin + num_bytes - left,
                )
            crc = zlib.crc32(chunk, crc)
            left -= len(chunk)
    finally:
        stream.seek(saved)
    return crc & 0xFFFFFFFF


def delphi_short_string(data: bytes) -> str:
    """Decode a length-prefixed ("short string") fixed-capacity buffer."""
    if not data:
        return ""
    length = min(data[0], len(data) - 1)
    return data[1 : length + 1].decode(_SHORT_STRING_ENCODING, errors="replace")


def utf16_to_str(data: bytes) -> str:
    """Decode a UTF-16LE buffer up to its first null code unit."""
    end = len(data) - (len(data) % 2)
    for idx in range(0, end, 2):
        if data[idx] == 0 and data[idx + 1] == 0:
            end = idx
            break
    return data[:end].decode("utf-16-le", errors="replace")


def delphi_datetime(value: float) -> datetime | None:
    """Convert a day count since 1899-12-30 (fraction = time of day).

    Returns ``None`` for values that do not map to a representable date.
    """
    if not math.isfinite(value):
        return None
    days = int(value)
    seconds = int((value - days) * 86400)
    try:
        return _DELPHI_EPOCH + timedelta(days=days, seconds=seconds)
    except OverflowError:
        return None
