import codecs
from typing import List, Optional, Sequence, Union

from codec_support import config
from codec_support.errors import CodecError

BytesLike = Union[bytes, bytearray, memoryview]


def _resolve(encoding: Optional[str], errors: Optional[str]) -> tuple:
    """Fills in defaults and checks both names against the codec registry."""
    encoding = encoding or config.PREFERRED_ENCODING
    errors = errors or config.DEFAULT_ERRORS
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise CodecError(f"Unable to convert: unknown encoding '{encoding}'", e) from e
    try:
        codecs.lookup_error(errors)
    except LookupError as e:
        raise CodecError(f"Unable to convert: unknown codec error handler '{errors}'", e) from e
    return encoding, errors


def text_to_bytes(source: str, encoding: Optional[str] = None, errors: Optional[str] = None) -> bytes:
    """
    Encodes a string to bytes with the given encoding
    (UTF-8 when none is given). Unencodable characters become '?'
    unless a stricter error handler is requested.
    """
    if source is None:
        raise ValueError("Source string for byte conversion cannot be None.")
    if not isinstance(source, str):
        raise CodecError(f"Cannot encode value of type [{type(source).__qualname__}]; expected str.")
    encoding, errors = _resolve(encoding, errors)
    try:
        return source.encode(encoding, errors)
    except UnicodeError as e:
        raise CodecError(f"Unable to convert source string to bytes using encoding '{encoding}': {e}", e) from e


def chars_to_bytes(chars: Sequence[str], encoding: Optional[str] = None, errors: Optional[str] = None) -> bytes:
    """Joins a sequence of characters into a string and encodes it."""
    if chars is None:
        raise ValueError("Character sequence for byte conversion cannot be None.")
    try:
        source = "".join(chars)
    except TypeError as e:
        raise CodecError(f"Character sequence contains non-string elements: {e}", e) from e
    return text_to_bytes(source, encoding, errors)


def bytes_to_text(data: BytesLike, encoding: Optional[str] = None, errors: Optional[str] = None) -> str:
    """Decodes bytes to a string (UTF-8 when no encoding is given)."""
    if data is None:
        raise ValueError("Byte sequence for string conversion cannot be None.")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise CodecError(f"Cannot decode value of type [{type(data).__qualname__}]; expected a bytes-like value.")
    encoding, errors = _resolve(encoding, errors)
    try:
        return bytes(data).decode(encoding, errors)
    except UnicodeError as e:
        raise CodecError(f"Unable to convert bytes to string with encoding '{encoding}': {e}", e) from e


def bytes_to_chars(data: BytesLike, encoding: Optional[str] = None, errors: Optional[str] = None) -> List[str]:
    """Decodes bytes and returns the result as a list of characters."""
    return list(bytes_to_text(data, encoding, errors))
