"""Display formatting for files and binary content."""

from typing import List

from ..core.models import Encoded, File

BYTES_PER_LINE = 16
DEFAULT_HEXDUMP_BYTES = 256


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else '.'


def hexdump(data: bytes, limit: int = DEFAULT_HEXDUMP_BYTES) -> str:
    """
    Render the leading bytes of data as an offset/hex/ASCII dump.

    Args:
        data: Bytes to dump.
        limit: Maximum number of bytes to include. The rest is summarized.

    Returns:
        Dump lines followed by a byte-count summary line.
    """
    shown = data[:max(limit, 0)]
    lines: List[str] = []

    for offset in range(0, len(shown), BYTES_PER_LINE):
        chunk = shown[offset:offset + BYTES_PER_LINE]
        hex_part = ' '.join(f"{b:02x}" for b in chunk)
        ascii_part = ''.join(_printable(b) for b in chunk)
        lines.append(f"{offset:08x}  {hex_part:<{BYTES_PER_LINE * 3 - 1}}  |{ascii_part}|")

    remaining = len(data) - len(shown)
    if remaining > 0:
        lines.append(f"... {remaining:,} more bytes ({len(data):,} bytes total)")
    else:
        lines.append(f"{len(data):,} bytes total")

    return "\n".join(lines)


def format_content(file: File, hexdump_bytes: int = DEFAULT_HEXDUMP_BYTES) -> str:
    """Render text content as-is and binary content as a hexdump."""
    if isinstance(file.content, Encoded):
        return file.content.text
    return hexdump(file.content.data, hexdump_bytes)


def format_file(file: File, hexdump_bytes: int = DEFAULT_HEXDUMP_BYTES) -> str:
    """Render a file with its path, encoding label and content."""
    return (
        f"File: {file.path}\n"
        f"Encoding: {file.encoding_label}\n"
        f"Content:\n"
        f"{format_content(file, hexdump_bytes)}"
    )
