"""
Byte-order marks and text encoders.

Each encoder turns a string into the exact bytes a file in that encoding
holds on disk. The BOM-bearing encoders always write the BOM, even for
empty text.
"""

UTF8_BOM = b'\xef\xbb\xbf'
UTF16BE_BOM = b'\xfe\xff'
UTF16LE_BOM = b'\xff\xfe'

UTF8_BOM_LENGTH = len(UTF8_BOM)
UTF16_BOM_LENGTH = len(UTF16BE_BOM)


def to_utf8(text: str) -> bytes:
    """Encode text as UTF-8 without a BOM."""
    return text.encode('utf-8')


def to_utf8_bom(text: str) -> bytes:
    """Encode text as UTF-8 prefixed with the UTF-8 BOM."""
    return UTF8_BOM + text.encode('utf-8')


def to_utf16_be(text: str) -> bytes:
    """Encode text as big-endian UTF-16 prefixed with FE FF."""
    # The explicit-endian codecs never emit a BOM themselves
    return UTF16BE_BOM + text.encode('utf-16-be')


def to_utf16_le(text: str) -> bytes:
    """Encode text as little-endian UTF-16 prefixed with FF FE."""
    return UTF16LE_BOM + text.encode('utf-16-le')
