"""Little-endian byte cursor used by every fixed-layout decoder.

Each read advances the cursor by exactly the width of the field, so a
decoder reads as a flat list of ``read_*`` / ``skip`` calls whose order is
the on-disk layout.
"""

from __future__ import annotations

import struct
from datetime import datetime
from functools import lru_cache

from xgreader.core.conversions import (
    delphi_datetime,
    delphi_short_string,
    utf16_to_str,
)
from xgreader.core.errors import ShortReadError

Buffer = bytes | bytearray | memoryview

_U8 = struct.Struct("<B")
_I8 = struct.Struct("<b")
_I16 = struct.Struct("<h")
_I32 = struct.Struct("<i")
_U32 = struct.Struct("<I")
_I64 = struct.Struct("<q")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")


@lru_cache(maxsize=64)
def _array_struct(code: str, count: int) -> struct.Struct:
    return struct.Struct(f"<{count}{code}")


class ByteCursor:
    """Sequential reader over an in-memory buffer.

    ``base_offset`` is the absolute position of ``data[0]`` inside the
    enclosing segment; it is only used to report error offsets.
    """

    __slots__ = ("_data", "_pos", "_base")

    def __init__(self, data: Buffer, base_offset: int = 0) -> None:
        self._data = memoryview(data)
        self._pos = 0
        self._base = base_offset

    # ── Position ────────────────────────────────────────────────────────

    @property
    def offset(self) -> int:
        """Bytes consumed so far."""
        return self._pos

    @property
    def absolute_offset(self) -> int:
        return self._base + self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def skip(self, count: int) -> None:
        """Skip ``count`` padding or unused bytes."""
        self._require(count)
        self._pos += count

    def peek_u8(self, at: int) -> int:
        """Return the byte ``at`` bytes ahead without consuming anything."""
        if self._pos + at >= len(self._data):
            raise ShortReadError("peek past end of buffer", self._base + self._pos + at)
        return self._data[self._pos + at]

    # ── Scalars ─────────────────────────────────────────────────────────

    def _require(self, count: int) -> None:
        if count < 0 or self._pos + count > len(self._data):
            raise ShortReadError(
                f"need {count} bytes, {self.remaining} left",
                self.absolute_offset,
            )

    def _unpack(self, fmt: struct.Struct) -> tuple:
        self._require(fmt.size)
        values = fmt.unpack_from(self._data, self._pos)
        self._pos += fmt.size
        return values

    def read_u8(self) -> int:
        return self._unpack(_U8)[0]

    def read_i8(self) -> int:
        return self._unpack(_I8)[0]

    def read_bool(self) -> bool:
        return self._unpack(_U8)[0] != 0

    def read_i16(self) -> int:
        return self._unpack(_I16)[0]

    def read_i32(self) -> int:
        return self._unpack(_I32)[0]

    def read_u32(self) -> int:
        return self._unpack(_U32)[0]

    def read_i64(self) -> int:
        return self._unpack(_I64)[0]

    def read_f32(self) -> float:
        return self._unpack(_F32)[0]

    def read_f64(self) -> float:
        return self._unpack(_F64)[0]

    def read_bytes(self, count: int) -> bytes:
        self._require(count)
        chunk = self._data[self._pos : self._pos + count].tobytes()
        self._pos += count
        return chunk

    # ── Arrays ──────────────────────────────────────────────────────────

    def read_i8_array(self, count: int) -> tuple[int, ...]:
        return self._unpack(_array_struct("b", count))

    def read_i32_array(self, count: int) -> tuple[int, ...]:
        return self._unpack(_array_struct("i", count))

    def read_f32_array(self, count: int) -> tuple[float, ...]:
        return self._unpack(_array_struct("f", count))

    def read_f64_array(self, count: int) -> tuple[float, ...]:
        return self._unpack(_array_struct("d", count))

    # ── Strings and dates ───────────────────────────────────────────────

    def read_short_string(self, capacity: int) -> str:
        """Read a length-prefixed byte string occupying ``capacity`` bytes."""
        return delphi_short_string(self.read_bytes(capacity))

    def read_utf16(self, units: int) -> str:
        """Read a null-terminated UTF-16 buffer of ``units`` code units."""
        return utf16_to_str(self.read_bytes(units * 2))

    def read_datetime(self) -> datetime | None:
        return delphi_datetime(self.read_f64())
