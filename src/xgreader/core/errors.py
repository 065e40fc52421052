"""Error taxonomy for the import pipeline."""

from __future__ import annotations


class XGImportError(Exception):
    """Base class for every failure raised while decoding a match file."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (at offset {self.offset:#x})"


class ShortReadError(XGImportError):
    """A read would cross the end of the underlying buffer."""


class FormatError(XGImportError):
    """Bad magic, unsupported header version or wrong segment tag."""


class CorruptArchiveError(XGImportError):
    """Archive trailer checksum mismatch or unreadable archive index."""


class CorruptFileError(XGImportError):
    """An archived file failed decompression or its checksum check."""


class TruncationError(XGImportError):
    """The record stream ended in the middle of a record slot."""


class MalformedRecordError(XGImportError):
    """A record decoder could not read its fixed layout."""
