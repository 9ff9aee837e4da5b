import pytest
from file_content.utils.encodings import to_utf8, to_utf8_bom, to_utf16_be, to_utf16_le


class TestEncoders:
    @pytest.mark.parametrize("text, expected", [
        ("", b"\xef\xbb\xbf"),
        ("Hello!", b"\xef\xbb\xbf\x48\x65\x6c\x6c\x6f\x21"),
        ("éüñç", b"\xef\xbb\xbf\xc3\xa9\xc3\xbc\xc3\xb1\xc3\xa7"),
        ("你好", b"\xef\xbb\xbf\xe4\xbd\xa0\xe5\xa5\xbd"),
        ("🌍🚀", b"\xef\xbb\xbf\xf0\x9f\x8c\x8d\xf0\x9f\x9a\x80"),
    ])
    def test_to_utf8_bom(self, text, expected):
        assert to_utf8_bom(text) == expected

    @pytest.mark.parametrize("text, expected", [
        ("", b"\xfe\xff"),
        ("Hello!", b"\xfe\xff\x00\x48\x00\x65\x00\x6c\x00\x6c\x00\x6f\x00\x21"),
        ("🌍🚀", b"\xfe\xff\xd8\x3c\xdf\x0d\xd8\x3d\xde\x80"),
        ("Hello! 😊", b"\xfe\xff\x00\x48\x00\x65\x00\x6c\x00\x6c\x00\x6f\x00\x21\x00\x20\xd8\x3d\xde\x0a"),
    ])
    def test_to_utf16_be(self, text, expected):
        assert to_utf16_be(text) == expected

    @pytest.mark.parametrize("text, expected", [
        ("", b"\xff\xfe"),
        ("Hello!", b"\xff\xfe\x48\x00\x65\x00\x6c\x00\x6c\x00\x6f\x00\x21\x00"),
        ("🌍🚀", b"\xff\xfe\x3c\xd8\x0d\xdf\x3d\xd8\x80\xde"),
        ("Hello! 😊", b"\xff\xfe\x48\x00\x65\x00\x6c\x00\x6c\x00\x6f\x00\x21\x00\x20\x00\x3d\xd8\x0a\xde"),
    ])
    def test_to_utf16_le(self, text, expected):
        assert to_utf16_le(text) == expected

    def test_to_utf8_has_no_bom(self):
        assert to_utf8("") == b""
        assert to_utf8("你好") == b"\xe4\xbd\xa0\xe5\xa5\xbd"
