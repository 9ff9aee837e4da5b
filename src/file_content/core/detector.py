"""
Encoding detection for raw byte sequences.

Classification is by signature, not by guessing: a byte sequence is one of
UTF-8-BOM, UTF-16-BE, UTF-16-LE (by their byte-order marks), plain UTF-8
(if the whole sequence is well-formed UTF-8), or binary.
"""

import logging
from typing import Optional

from ..utils.encodings import UTF8_BOM, UTF16BE_BOM, UTF16LE_BOM
from .models import Encoding

logger = logging.getLogger(__name__)

# Longest signature first
BOM_SIGNATURES = [
    (UTF8_BOM, Encoding.UTF8_BOM),
    (UTF16BE_BOM, Encoding.UTF16_BE),
    (UTF16LE_BOM, Encoding.UTF16_LE),
]


class EncodingDetector:
    """Classifies byte sequences into a supported encoding or binary."""

    def __init__(self, binary_sample_size: int = 0):
        """
        Initialize the encoding detector.

        Args:
            binary_sample_size: When greater than zero, BOM-less input with a
                NUL byte in its first N bytes is classified as binary even if
                it is valid UTF-8. Zero disables the check.
        """
        if binary_sample_size < 0:
            raise ValueError(f"binary_sample_size must be >= 0, got {binary_sample_size}")
        self.binary_sample_size = binary_sample_size

    def detect(self, data: bytes) -> Optional[Encoding]:
        """
        Detect the encoding of a byte sequence.

        Empty input is UTF-8: zero bytes satisfy the UTF-8 grammar.

        Args:
            data: Raw bytes to classify (bytes, bytearray or memoryview).

        Returns:
            The detected Encoding, or None if the bytes are binary.
        """
        data = bytes(data)
        bom_encoding = self.detect_bom(data)
        if bom_encoding is not None:
            logger.debug(f"Detected {bom_encoding} by byte-order mark")
            return bom_encoding

        if self.binary_sample_size and b'\x00' in data[:self.binary_sample_size]:
            logger.debug(f"NUL byte within first {self.binary_sample_size} bytes, treating as binary")
            return None

        if self.is_valid_utf8(data):
            logger.debug(f"Detected {Encoding.UTF8} ({len(data)} bytes)")
            return Encoding.UTF8

        logger.debug(f"No encoding signature matched ({len(data)} bytes), treating as binary")
        return None

    @staticmethod
    def detect_bom(data: bytes) -> Optional[Encoding]:
        """
        Match the leading bytes against the known byte-order marks.

        Args:
            data: Raw bytes to check. May be shorter than any BOM.

        Returns:
            The encoding whose BOM prefixes data, or None.
        """
        for bom, encoding in BOM_SIGNATURES:
            if data.startswith(bom):
                return encoding
        return None

    @staticmethod
    def is_valid_utf8(data: bytes) -> bool:
        """
        Check that the whole sequence is well-formed UTF-8.

        Rejects overlong forms, encoded surrogates, code points above
        U+10FFFF and truncated sequences.
        """
        try:
            data.decode('utf-8')
        except UnicodeDecodeError:
            return False
        return True
