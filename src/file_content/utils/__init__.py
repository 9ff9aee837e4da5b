"""Utility modules for file-content."""

from .encodings import to_utf8, to_utf8_bom, to_utf16_be, to_utf16_le

__all__ = ["to_utf8", "to_utf8_bom", "to_utf16_be", "to_utf16_le"]
