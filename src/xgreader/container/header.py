"""Container header found at the very start of a match file."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import BinaryIO

from xgreader.core.binary import ByteCursor
from xgreader.core.errors import FormatError, ShortReadError

_LOGGER = logging.getLogger(__name__)

HEADER_MAGIC = "HMGR"
HEADER_VERSION = 1
TEXT_FIELD_UNITS = 1024
_PREFIX_SIZE = 40
HEADER_RECORD_SIZE = _PREFIX_SIZE + 4 * TEXT_FIELD_UNITS * 2


@dataclass(slots=True, frozen=True)
class ContainerHeader:
    """Decoded container header; ``header_size`` is where the payload starts."""

    magic: str
    version: int
    header_size: int
    thumbnail_offset: int
    thumbnail_size: int
    game_guid: uuid.UUID
    game_name: str
    save_name: str
    level_name: str
    comments: str

    @property
    def has_thumbnail(self) -> bool:
        return self.thumbnail_size > 0

    @property
    def product_version(self) -> str:
        """Producing application's version string."""
        return self.game_name


def parse_container_header(data: bytes) -> ContainerHeader:
    """Decode a container header from the first bytes of a file."""
    cur = ByteCursor(data)
    try:
        magic_raw = cur.read_bytes(4)
        magic = magic_raw[::-1].decode("ascii", errors="replace")
        version = cur.read_i32()
        if magic != HEADER_MAGIC or version != HEADER_VERSION:
            raise FormatError(
                f"not a game data format file (magic {magic!r}, version {version})", 0
            )
        header_size = cur.read_i32()
        thumbnail_offset = cur.read_i64()
        thumbnail_size = cur.read_u32()
        game_guid = uuid.UUID(bytes_le=cur.read_bytes(16))
        game_name = cur.read_utf16(TEXT_FIELD_UNITS)
        save_name = cur.read_utf16(TEXT_FIELD_UNITS)
        level_name = cur.read_utf16(TEXT_FIELD_UNITS)
        comments = cur.read_utf16(TEXT_FIELD_UNITS)
    except ShortReadError as exc:
        raise FormatError("container header is truncated", exc.offset) from exc

    header = ContainerHeader(
        magic=magic,
        version=version,
        header_size=header_size,
        thumbnail_offset=thumbnail_offset,
        thumbnail_size=thumbnail_size,
        game_guid=game_guid,
        game_name=game_name,
        save_name=save_name,
        level_name=level_name,
        comments=comments,
    )
    _LOGGER.debug(
        "Container header: size=%d thumbnail=%d@%d product=%r",
        header.header_size,
        header.thumbnail_size,
        header.thumbnail_offset,
        header.game_name,
    )
    return header


def read_container_header(stream: BinaryIO) -> ContainerHeader:
    """Read and validate the container header at offset 0 of ``stream``."""
    stream.seek(0)
    return parse_container_header(stream.read(HEADER_RECORD_SIZE))
