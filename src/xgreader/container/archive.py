"""Zlib archive embedded after the container header.

Layout from the end of the stream backwards: a 36-byte trailer, the
(optionally deflated) file index, then the archived file data. Entry
offsets are relative to the start of the archived data.
"""

from __future__ import annotations

import io
import logging
import zlib
from collections.abc import Iterator
from dataclasses import dataclass
from typing import BinaryIO

from xgreader.core.binary import ByteCursor
from xgreader.core.conversions import stream_crc32
from xgreader.core.errors import CorruptArchiveError, CorruptFileError, ShortReadError

_LOGGER = logging.getLogger(__name__)

TRAILER_SIZE = 36
ENTRY_SIZE = 532
_NAME_CAPACITY = 256


@dataclass(slots=True, frozen=True)
class ArchiveTrailer:
    """Fixed record closing the archive."""

    crc: int
    file_count: int
    version: int
    index_size: int
    archive_size: int
    index_compressed: bool

    @classmethod
    def from_bytes(cls, data: bytes) -> ArchiveTrailer:
        cur = ByteCursor(data)
        trailer = cls(
            crc=cur.read_u32(),
            file_count=cur.read_i32(),
            version=cur.read_i32(),
            index_size=cur.read_i32(),
            archive_size=cur.read_i32(),
            index_compressed=cur.read_i32() != 0,
        )
        cur.skip(12)
        return trailer


@dataclass(slots=True, frozen=True)
class ArchiveEntry:
    """One file registered in the archive index."""

    name: str
    path: str
    original_size: int
    compressed_size: int
    start: int
    crc: int
    compressed: int
    compression_level: int

    @property
    def is_deflated(self) -> bool:
        """Whether the stored bytes are a zlib stream.

        The on-disk flag reads the other way round: 0 marks a deflated file.
        """
        return self.compressed == 0

    @classmethod
    def read(cls, cur: ByteCursor) -> ArchiveEntry:
        entry = cls(
            name=cur.read_short_string(_NAME_CAPACITY),
            path=cur.read_short_string(_NAME_CAPACITY),
            original_size=cur.read_i32(),
            compressed_size=cur.read_i32(),
            start=cur.read_i32(),
            crc=cur.read_u32(),
            compressed=cur.read_u8(),
            compression_level=cur.read_u8(),
        )
        cur.skip(2)
        return entry


def _inflate(raw: bytes) -> bytes:
    inflater = zlib.decompressobj()
    data = inflater.decompress(raw)
    if not inflater.eof:
        raise zlib.error("incomplete zlib stream")
    return data


class ZlibArchive:
    """Read-only view over the archive section of a seekable stream.

    The index is validated and decoded on construction; file bodies are read
    lazily by :meth:`extract`.
    """

    __slots__ = ("_stream", "trailer", "entries", "start_of_data", "end_of_data")

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        saved = stream.tell()
        try:
            self.trailer = self._read_trailer()
            self.entries = self._read_index()
        finally:
            stream.seek(saved)

    @classmethod
    def open(cls, stream: BinaryIO) -> ZlibArchive:
        return cls(stream)

    def __iter__(self) -> Iterator[ArchiveEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def find(self, name: str) -> ArchiveEntry | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    # ── Index ───────────────────────────────────────────────────────────

    def _read_trailer(self) -> ArchiveTrailer:
        end = self._stream.seek(0, io.SEEK_END)
        if end < TRAILER_SIZE:
            raise CorruptArchiveError("stream too short for archive trailer", end)
        self.end_of_data = end - TRAILER_SIZE
        self._stream.seek(self.end_of_data)
        trailer = ArchiveTrailer.from_bytes(self._stream.read(TRAILER_SIZE))

        index_start = self.end_of_data - trailer.index_size
        self.start_of_data = index_start - trailer.archive_size
        if trailer.index_size < 0 or self.start_of_data < 0:
            raise CorruptArchiveError(
                "archive trailer points outside the stream", self.end_of_data
            )

        try:
            crc = stream_crc32(
                self._stream, self.end_of_data - self.start_of_data, self.start_of_data
            )
        except ShortReadError as exc:
            raise CorruptArchiveError("archive data is truncated", exc.offset) from exc
        if crc != trailer.crc:
            raise CorruptArchiveError(
                f"archive CRC check failed - file corrupt "
                f"(stored {trailer.crc:#010x}, computed {crc:#010x})",
                self.end_of_data,
            )
        _LOGGER.debug(
            "Archive: %d files, data %d..%d, index %d bytes",
            trailer.file_count,
            self.start_of_data,
            index_start,
            trailer.index_size,
        )
        return trailer

    def _read_index(self) -> list[ArchiveEntry]:
        index_start = self.end_of_data - self.trailer.index_size
        self._stream.seek(index_start)
        raw = self._stream.read(self.trailer.index_size)
        if self.trailer.index_compressed:
            try:
                raw = _inflate(raw)
            except zlib.error as exc:
                raise CorruptArchiveError(
                    f"error extracting archive index: {exc}", index_start
                ) from exc

        cur = ByteCursor(raw)
        entries: list[ArchiveEntry] = []
        try:
            for _ in range(self.trailer.file_count):
                entries.append(ArchiveEntry.read(cur))
        except ShortReadError as exc:
            raise CorruptArchiveError(
                f"archive index holds fewer than {self.trailer.file_count} entries",
                index_start,
            ) from exc
        for entry in entries:
            _LOGGER.debug(
                "Archive entry %r: start=%d csize=%d osize=%d deflated=%s",
                entry.name,
                entry.start,
                entry.compressed_size,
                entry.original_size,
                entry.is_deflated,
            )
        return entries

    # ── Files ───────────────────────────────────────────────────────────

    def extract(self, entry: ArchiveEntry) -> bytes:
        """Return the verified contents of ``entry``."""
        offset = self.start_of_data + entry.start
        self._stream.seek(offset)
        raw = self._stream.read(entry.compressed_size)
        if len(raw) != entry.compressed_size:
            raise CorruptFileError(f"archived file {entry.name!r} is truncated", offset)
        if entry.is_deflated:
            try:
                data = _inflate(raw)
            except zlib.error as exc:
                raise CorruptFileError(
                    f"error extracting archived file {entry.name!r}: {exc}", offset
                ) from exc
        else:
            data = raw

        crc = zlib.crc32(data) & 0xFFFFFFFF
        if crc != entry.crc:
            raise CorruptFileError(
                f"file CRC check failed - {entry.name!r} corrupt", offset
            )
        return data
