"""Core components for file-content."""

from .models import Config, Encoding, Encoded, Binary, Content, File
from .errors import (
    FileContentError,
    MalformedPayloadError,
    UnevenByteSequenceError,
    InvalidSurrogateError,
    BinaryContentError,
    FileTooLargeError,
    UnknownEncodingError,
)
from .detector import EncodingDetector
from .decoder import ContentDecoder, detect, decode, classify_and_decode
from .file_accessor import FileAccessor

__all__ = [
    "Config",
    "Encoding",
    "Encoded",
    "Binary",
    "Content",
    "File",
    "FileContentError",
    "MalformedPayloadError",
    "UnevenByteSequenceError",
    "InvalidSurrogateError",
    "BinaryContentError",
    "FileTooLargeError",
    "UnknownEncodingError",
    "EncodingDetector",
    "ContentDecoder",
    "detect",
    "decode",
    "classify_and_decode",
    "FileAccessor",
]
