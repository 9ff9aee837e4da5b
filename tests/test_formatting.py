from file_content.core.models import Binary, Encoded, Encoding, File
from file_content.utils.formatting import format_content, format_file, hexdump


class TestHexdump:
    def test_single_line(self):
        lines = hexdump(b"hi\x00").split("\n")
        assert len(lines) == 2
        assert lines[0].startswith("00000000  68 69 00 ")
        assert lines[0].endswith("|hi.|")
        assert lines[1] == "3 bytes total"

    def test_full_lines_and_offsets(self):
        lines = hexdump(bytes(range(32))).split("\n")
        assert lines[0].startswith("00000000  00 01 02")
        assert lines[1].startswith("00000010  10 11 12")
        assert lines[2] == "32 bytes total"

    def test_columns_align_on_short_last_line(self):
        lines = hexdump(bytes(range(20))).split("\n")
        assert lines[0].index("|") == lines[1].index("|")

    def test_truncated(self):
        lines = hexdump(bytes(range(40)), limit=16).split("\n")
        assert len(lines) == 2
        assert lines[1] == "... 24 more bytes (40 bytes total)"

    def test_empty(self):
        assert hexdump(b"") == "0 bytes total"

    def test_zero_limit(self):
        assert hexdump(b"abc", limit=0) == "... 3 more bytes (3 bytes total)"


class TestFormatFile:
    def test_encoded(self):
        file = File("foo.txt", Encoded(Encoding.UTF8_BOM, "Hello!\nWorld"))
        assert format_file(file) == "File: foo.txt\nEncoding: UTF-8-BOM\nContent:\nHello!\nWorld"

    def test_binary(self):
        file = File("foo.bin", Binary(b"\x01\x02\x03\x00\x04\x05"))
        text = format_file(file)
        assert text.startswith("File: foo.bin\nEncoding: Binary\nContent:\n00000000  01 02 03 00 04 05")
        assert text.endswith("6 bytes total")

    def test_format_content_respects_limit(self):
        file = File("foo.bin", Binary(bytes(100)))
        assert format_content(file, hexdump_bytes=0) == "... 100 more bytes (100 bytes total)"
