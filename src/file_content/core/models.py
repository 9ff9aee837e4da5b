"""
Core data models for file-content.

This module contains the encoding tag, the two content variants produced
by the decoder, the file wrapper that pairs content with its path, and
the runtime configuration.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

from ..utils.encodings import (
    UTF8_BOM,
    UTF16BE_BOM,
    UTF16LE_BOM,
    to_utf8,
    to_utf8_bom,
    to_utf16_be,
    to_utf16_le,
)
from .errors import UnknownEncodingError

# Load environment variables from .env file
load_dotenv()

BINARY_LABEL = "Binary"


class Encoding(Enum):
    """Supported text encodings. The value is the display label."""

    UTF8 = "UTF-8"
    UTF8_BOM = "UTF-8-BOM"
    UTF16_BE = "UTF-16-BE"
    UTF16_LE = "UTF-16-LE"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value

    @property
    def bom(self) -> bytes:
        """The byte-order mark written ahead of the payload (empty for UTF-8)."""
        return _BOMS[self]

    def encode(self, text: str) -> bytes:
        """Encode text into the on-disk bytes for this encoding, BOM included."""
        return _ENCODERS[self](text)

    @classmethod
    def from_label(cls, label: str) -> 'Encoding':
        """
        Look up an encoding by its display label.

        Matching ignores case, '-' and '_', so 'utf-16-le', 'UTF16LE' and
        'utf_16_le' all name Encoding.UTF16_LE.

        Raises:
            UnknownEncodingError: If the label names no supported encoding.
        """
        normalized = _squash(label)
        for encoding in cls:
            if _squash(encoding.value) == normalized:
                return encoding
        raise UnknownEncodingError(label)


def _squash(label: str) -> str:
    return label.strip().upper().replace('-', '').replace('_', '')


_BOMS = {
    Encoding.UTF8: b'',
    Encoding.UTF8_BOM: UTF8_BOM,
    Encoding.UTF16_BE: UTF16BE_BOM,
    Encoding.UTF16_LE: UTF16LE_BOM,
}

_ENCODERS = {
    Encoding.UTF8: to_utf8,
    Encoding.UTF8_BOM: to_utf8_bom,
    Encoding.UTF16_BE: to_utf16_be,
    Encoding.UTF16_LE: to_utf16_le,
}


@dataclass(frozen=True)
class Encoded:
    """Decoded text together with the encoding it was decoded from."""

    encoding: Encoding
    text: str

    @property
    def is_binary(self) -> bool:
        return False

    @property
    def label(self) -> str:
        return self.encoding.label

    def to_bytes(self) -> bytes:
        """Re-encode the text, BOM included."""
        return self.encoding.encode(self.text)


@dataclass(frozen=True)
class Binary:
    """Raw bytes that did not classify as any supported text encoding."""

    data: bytes

    @property
    def is_binary(self) -> bool:
        return True

    @property
    def label(self) -> str:
        return BINARY_LABEL

    def to_bytes(self) -> bytes:
        return self.data


Content = Union[Encoded, Binary]


@dataclass
class File:
    """Represents a file path paired with its classified content."""

    path: Path
    content: Content

    def __post_init__(self):
        self.path = Path(self.path)

    @property
    def encoding_label(self) -> str:
        return self.content.label

    def __str__(self) -> str:
        from ..utils.formatting import format_file
        return format_file(self)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, '').strip()
    return int(value) if value else default


@dataclass
class Config:
    """Configuration settings for file-content."""

    # Files larger than this are refused by the file accessor
    max_file_size: int = field(
        default_factory=lambda: _env_int('FILE_CONTENT_MAX_FILE_SIZE', 64 * 1024 * 1024)
    )

    # NUL-byte sniffing window for BOM-less input; 0 disables it
    binary_sample_size: int = field(
        default_factory=lambda: _env_int('FILE_CONTENT_BINARY_SAMPLE_SIZE', 0)
    )

    # Leading bytes shown when displaying binary content
    hexdump_bytes: int = field(
        default_factory=lambda: _env_int('FILE_CONTENT_HEXDUMP_BYTES', 256)
    )

    log_level: str = field(
        default_factory=lambda: os.getenv('FILE_CONTENT_LOG_LEVEL', 'WARNING').upper()
    )
