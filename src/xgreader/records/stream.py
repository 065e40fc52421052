"""Walking the game-records segment slot by slot."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from xgreader.core.binary import Buffer, ByteCursor
from xgreader.core.enums import RecordKind
from xgreader.core.errors import MalformedRecordError, ShortReadError, TruncationError
from xgreader.records.decoders import DECODERS
from xgreader.records.models import HeaderMatchEntry, Record

_LOGGER = logging.getLogger(__name__)

RECORD_SIZE = 2560
DISCRIMINATOR_OFFSET = 8
UNKNOWN_VERSION = -1


def _record_kind(raw: int) -> RecordKind | None:
    try:
        return RecordKind(raw)
    except ValueError:
        return None


class RecordStream:
    """Iterates the typed records of a game-records segment.

    Every record occupies one fixed-size slot no matter how many bytes its
    decoder reads. The format version starts as ``version`` and is replaced
    by the version of each match header met on the way; it is handed to
    every later decoder.
    """

    __slots__ = ("_data", "_offset", "_version", "skipped")

    def __init__(self, data: Buffer, version: int = UNKNOWN_VERSION) -> None:
        self._data = memoryview(data)
        self._offset = 0
        self._version = version
        self.skipped = 0

    @property
    def offset(self) -> int:
        """Start of the next slot to be read."""
        return self._offset

    @property
    def version(self) -> int:
        return self._version

    def __iter__(self) -> Iterator[Record]:
        total = len(self._data)
        while self._offset < total:
            start = self._offset
            if total - start < RECORD_SIZE:
                raise TruncationError(
                    f"record stream ends {total - start} bytes into a "
                    f"{RECORD_SIZE}-byte slot",
                    start,
                )
            slot = ByteCursor(self._data[start : start + RECORD_SIZE], start)
            record = self._decode_slot(slot)
            self._offset = start + RECORD_SIZE
            if record is not None:
                yield record

    def _decode_slot(self, slot: ByteCursor) -> Record | None:
        raw_kind = slot.peek_u8(DISCRIMINATOR_OFFSET)
        kind = _record_kind(raw_kind)
        if kind is None:
            self.skipped += 1
            _LOGGER.debug(
                "Skipping record of unknown kind %d at %#x",
                raw_kind,
                slot.absolute_offset,
            )
            return None

        try:
            record = DECODERS[kind](slot, self._version)
        except ShortReadError as exc:
            raise MalformedRecordError(
                f"{kind.name} record does not fit its slot", exc.offset
            ) from exc

        _LOGGER.debug(
            "%s record at %#x: %d of %d bytes used (version %d)",
            kind.name,
            slot.absolute_offset - slot.offset,
            slot.offset,
            RECORD_SIZE,
            self._version,
        )
        if isinstance(record, HeaderMatchEntry):
            self._version = record.version
        return record


def decode_records(data: Buffer, version: int = UNKNOWN_VERSION) -> list[Record]:
    """Decode a whole game-records segment."""
    return list(RecordStream(data, version))
