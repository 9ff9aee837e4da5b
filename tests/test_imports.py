"""Test that all modules can be imported successfully."""


def test_core_imports():
    """Test core module imports."""
    from file_content.core import (
        Config, Encoding, Encoded, Binary, File,
        EncodingDetector, ContentDecoder, FileAccessor,
        detect, decode, classify_and_decode,
    )

    config = Config()
    assert config.binary_sample_size == 0

    assert isinstance(EncodingDetector().detect(b""), Encoding)
    assert hasattr(ContentDecoder(), 'classify_and_decode')
    assert hasattr(FileAccessor(config), 'load')


def test_utils_imports():
    """Test utils module imports."""
    from file_content.utils import to_utf8, to_utf8_bom, to_utf16_be, to_utf16_le
    from file_content.utils.formatting import format_file, hexdump
    from file_content.utils.console import ConsoleManager

    assert to_utf8_bom("") == b"\xef\xbb\xbf"
    assert hasattr(ConsoleManager(), 'print_error')


def test_cli_imports():
    """Test CLI entry point import."""
    from file_content.cli import main

    assert main.name == 'main'
