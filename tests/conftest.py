import pytest
import tempfile
import shutil
from pathlib import Path

FILE_CONTENT = "Hello! 你好! 🌍"


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def encoded_files(temp_workspace):
    """Write FILE_CONTENT in every supported encoding, plus a binary file."""
    files = {
        "UTF-8": temp_workspace / "utf8.txt",
        "UTF-8-BOM": temp_workspace / "utf8bom.txt",
        "UTF-16-BE": temp_workspace / "utf16be.txt",
        "UTF-16-LE": temp_workspace / "utf16le.txt",
        "Binary": temp_workspace / "binary.bin",
    }

    files["UTF-8"].write_bytes(FILE_CONTENT.encode("utf-8"))
    files["UTF-8-BOM"].write_bytes(b"\xef\xbb\xbf" + FILE_CONTENT.encode("utf-8"))
    files["UTF-16-BE"].write_bytes(b"\xfe\xff" + FILE_CONTENT.encode("utf-16-be"))
    files["UTF-16-LE"].write_bytes(b"\xff\xfe" + FILE_CONTENT.encode("utf-16-le"))
    files["Binary"].write_bytes(b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff')

    return files
