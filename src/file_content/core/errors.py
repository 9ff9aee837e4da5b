"""
Exception types for file-content.

Malformed payload errors never escape the decoder: it catches them and
degrades the content to Binary. The remaining errors are raised by the
file accessor and the CLI-facing helpers.
"""

from typing import Optional


class FileContentError(Exception):
    """Base class for all file-content errors."""


class MalformedPayloadError(FileContentError):
    """A BOM signature matched but the bytes after it are not valid text."""


class UnevenByteSequenceError(MalformedPayloadError):
    """A UTF-16 payload has an odd number of bytes."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Uneven length byte sequence ({length} bytes)")


class InvalidSurrogateError(MalformedPayloadError):
    """A UTF-16 code unit sequence contains an unpaired or misordered surrogate."""

    def __init__(self, unit: int, index: int):
        self.unit = unit
        self.index = index
        super().__init__(f"Invalid surrogate 0x{unit:04X} at code unit {index}")


class BinaryContentError(FileContentError):
    """Text was requested but the content classified as binary."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        if path:
            super().__init__(f"File content is binary: {path}")
        else:
            super().__init__("File content is binary")


class FileTooLargeError(FileContentError):
    """The file exceeds the configured size limit."""

    def __init__(self, path: str, size: int, limit: int):
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(f"File too large ({size:,} bytes, limit {limit:,}): {path}")


class UnknownEncodingError(FileContentError, ValueError):
    """An encoding label does not name a supported encoding."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown encoding: {label!r}")
