"""
File access for file-content.

This module handles reading files and binary streams into File objects,
writing them back in their own encoding, and the text-only convenience
readers. I/O errors propagate to the caller unchanged.
"""

import os
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .decoder import ContentDecoder
from .detector import EncodingDetector
from .errors import BinaryContentError, FileTooLargeError
from .models import Binary, Config, File

logger = logging.getLogger(__name__)

PathLike = Union[str, 'os.PathLike[str]']


class FileAccessor:
    """Reads and writes files, classifying their content on load."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.decoder = ContentDecoder(
            EncodingDetector(binary_sample_size=self.config.binary_sample_size)
        )

    def load(self, path: PathLike) -> File:
        """
        Read a file from disk and classify its content.

        Args:
            path: Path of the file to read.

        Returns:
            File pairing the path with its Encoded or Binary content.

        Raises:
            FileTooLargeError: If the file exceeds config.max_file_size.
            OSError: If the file cannot be read.
        """
        path = Path(path)
        try:
            file_size = os.path.getsize(path)
            if file_size > self.config.max_file_size:
                raise FileTooLargeError(str(path), file_size, self.config.max_file_size)

            with open(path, 'rb') as f:
                raw_content = f.read()
        except OSError as e:
            logger.info(f"Failed to read {path}: {type(e).__name__}: {e}")
            raise

        file = File(path, self.decoder.classify_and_decode(raw_content))
        logger.info(f"Loaded {path} as {file.encoding_label} ({len(raw_content):,} bytes)")
        return file

    def load_from_reader(self, path: PathLike, reader: BinaryIO) -> File:
        """
        Read an open binary stream to the end and classify its content.

        The path is only a label; nothing is read from it.
        """
        raw_content = reader.read()
        file = File(Path(path), self.decoder.classify_and_decode(raw_content))
        logger.debug(f"Read {len(raw_content):,} bytes for {path} as {file.encoding_label}")
        return file

    def save(self, file: File) -> None:
        """
        Write a file to its path, re-encoding text in its own encoding.

        Encoded content is written with its BOM; Binary content is written
        verbatim.
        """
        data = file.content.to_bytes()
        with open(file.path, 'wb') as f:
            f.write(data)
        logger.info(f"Saved {file.path} as {file.encoding_label} ({len(data):,} bytes)")

    def read_to_string(self, path: PathLike) -> str:
        """
        Read a file and return its decoded text.

        Raises:
            BinaryContentError: If the content is binary.
        """
        file = self.load(path)
        if isinstance(file.content, Binary):
            raise BinaryContentError(str(file.path))
        return file.content.text

    def read_from_reader(self, reader: BinaryIO) -> str:
        """
        Read a binary stream and return its decoded text.

        Raises:
            BinaryContentError: If the content is binary.
        """
        content = self.decoder.classify_and_decode(reader.read())
        if isinstance(content, Binary):
            raise BinaryContentError()
        return content.text
