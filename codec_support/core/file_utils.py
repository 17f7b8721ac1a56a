import logging
import os
from typing import BinaryIO, Optional, Union

from codec_support import config
from codec_support.errors import CodecError

logger = logging.getLogger(__name__)


def _close_quietly(resource) -> None:
    """Closes a resource, logging (never raising) any failure."""
    try:
        resource.close()
    except Exception:
        logger.debug("Ignoring error while closing %r", resource, exc_info=True)


def stream_to_bytes(stream: BinaryIO, buffer_size: Optional[int] = None) -> bytes:
    """
    Reads a binary stream to end-of-stream and returns its contents.
    The stream is always closed afterwards, whether reading succeeds or not.
    """
    if stream is None:
        raise ValueError("Stream argument cannot be None.")
    chunk_size = buffer_size or config.DEFAULT_BUFFER_SIZE
    if chunk_size <= 0:
        _close_quietly(stream)
        raise ValueError(f"buffer_size must be positive, got {chunk_size}")

    out = bytearray()
    try:
        while True:
            chunk = stream.read(chunk_size)
            if chunk is None:
                # non-blocking stream with no data ready: not end-of-stream
                raise CodecError("Stream has no data available; non-blocking streams are not supported.")
            if isinstance(chunk, str):
                raise CodecError("Stream returned text instead of bytes; open it in binary mode.")
            if len(chunk) == 0:
                break
            out += chunk
        logger.debug("Drained %d bytes from stream in chunks of %d", len(out), chunk_size)
        return bytes(out)
    except (OSError, ValueError) as e:
        # ValueError: closed or detached stream
        raise CodecError(f"Unable to read stream: {e}", e) from e
    finally:
        _close_quietly(stream)


def file_to_bytes(file_path: Union[str, os.PathLike], buffer_size: Optional[int] = None) -> bytes:
    """Reads a file and returns its raw byte content."""
    if file_path is None:
        raise ValueError("File argument cannot be None.")
    try:
        stream = open(file_path, "rb")
    except OSError as e:
        raise CodecError(f"Unable to acquire stream for file [{os.fspath(file_path)}]: {e}", e) from e
    logger.debug("Opened %s for reading", os.fspath(file_path))
    return stream_to_bytes(stream, buffer_size)
