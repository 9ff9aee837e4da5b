"""
Content decoding for classified byte sequences.

The decoder strips the byte-order mark and turns the payload into text for
the supported encodings. A payload that does not match the encoding its
BOM declared degrades to Binary holding the original bytes, so decoding
always yields a usable Content value.
"""

import logging
from typing import Optional

from .utf16 import decode_code_units, to_code_units
from .detector import EncodingDetector
from .errors import MalformedPayloadError
from .models import Binary, Content, Encoded, Encoding

logger = logging.getLogger(__name__)


class ContentDecoder:
    """Turns raw bytes into Encoded text or Binary content."""

    def __init__(self, detector: Optional[EncodingDetector] = None):
        self.detector = detector or EncodingDetector()

    def classify_and_decode(self, data: bytes) -> Content:
        """Detect the encoding of data and decode it."""
        return self.decode(data, self.detector.detect(data))

    def decode(self, data: bytes, encoding: Optional[Encoding]) -> Content:
        """
        Decode data as the given encoding.

        Args:
            data: Raw bytes, including the BOM if the encoding has one.
            encoding: The encoding to decode as, or None for binary.

        Returns:
            Encoded content on success. Binary content holding data unchanged
            if encoding is None or the payload is malformed.
        """
        data = bytes(data)

        if encoding is None:
            return Binary(data)

        try:
            text = self.decode_payload(data, encoding)
        except MalformedPayloadError as e:
            logger.debug(f"Malformed {encoding} payload, falling back to binary: {e}")
            return Binary(data)

        return Encoded(encoding, text)

    def decode_payload(self, data: bytes, encoding: Encoding) -> str:
        """
        Strip the BOM for the encoding and decode the rest strictly.

        Raises:
            MalformedPayloadError: If data does not start with the encoding's
                BOM or the payload is not valid in the encoding.
        """
        bom = encoding.bom
        if not data.startswith(bom):
            raise MalformedPayloadError(f"Missing {encoding} byte-order mark")

        payload = data[len(bom):]
        if encoding in (Encoding.UTF8, Encoding.UTF8_BOM):
            return _decode_utf8(payload)
        if encoding is Encoding.UTF16_BE:
            return decode_code_units(to_code_units(payload, 'big'))
        if encoding is Encoding.UTF16_LE:
            return decode_code_units(to_code_units(payload, 'little'))
        raise ValueError(f"Unsupported encoding: {encoding!r}")


def _decode_utf8(payload: bytes) -> str:
    try:
        return payload.decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedPayloadError(f"Invalid UTF-8 at byte {e.start}: {e.reason}") from e


_default_decoder = ContentDecoder()


def detect(data: bytes) -> Optional[Encoding]:
    """Detect the encoding of data with the default detector."""
    return _default_decoder.detector.detect(data)


def decode(data: bytes, encoding: Optional[Encoding]) -> Content:
    """Decode data as encoding with the default decoder."""
    return _default_decoder.decode(data, encoding)


def classify_and_decode(data: bytes) -> Content:
    """Detect and decode data with the default decoder."""
    return _default_decoder.classify_and_decode(data)
