import os
from enum import Enum
from typing import Any


class PayloadKind(str, Enum):
    """The shapes of value CodecSupport knows how to convert."""
    BYTES = "bytes"
    CHARS = "chars"
    TEXT = "text"
    FILE = "file"
    STREAM = "stream"
    OTHER = "other"


def is_char_sequence(value: Any) -> bool:
    """True for a list or tuple made only of one-character strings."""
    return isinstance(value, (list, tuple)) and all(
        isinstance(c, str) and len(c) == 1 for c in value
    )


def classify_payload(value: Any) -> PayloadKind:
    """
    Maps a value to its PayloadKind. Order matters: a str is text, never
    a path, and a list of characters is checked before the generic
    stream test.
    """
    if value is None:
        raise ValueError("Cannot classify a None payload.")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return PayloadKind.BYTES
    if isinstance(value, str):
        return PayloadKind.TEXT
    if is_char_sequence(value):
        return PayloadKind.CHARS
    if isinstance(value, os.PathLike):
        return PayloadKind.FILE
    if callable(getattr(value, "read", None)):
        return PayloadKind.STREAM
    return PayloadKind.OTHER
