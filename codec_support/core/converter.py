import logging
import os
from typing import Any, BinaryIO, Callable, List, Optional, Sequence, Union

from codec_support.core import file_utils, text_codec
from codec_support.core.payload import PayloadKind, classify_payload
from codec_support.errors import CodecError
from codec_support.models import CodecSettings

logger = logging.getLogger(__name__)

ObjectToBytes = Callable[[Any], bytes]
ObjectToString = Callable[[Any], str]


def reject_object(value: Any) -> bytes:
    """Default bytes fallback: refuses any type without a built-in rule."""
    type_name = f"{type(value).__module__}.{type(value).__qualname__}"
    msg = (
        "CodecSupport only supports conversion to bytes if the source is bytes, "
        "a sequence of characters, str, a file path or a readable binary stream. "
        f"The value provided is of type [{type_name}]. To convert this type to bytes, "
        "either 1) convert it to one of the supported types yourself and pass that "
        "instead, or 2) construct CodecSupport with an object_to_bytes handler "
        "for this type."
    )
    raise CodecError(msg)


class CodecSupport:
    """
    Converts loosely-typed payloads (a secret given as a string, bytes,
    a file or a stream, for instance) to bytes or text.

    Values with no built-in rule are handed to the fallback strategies
    given at construction: ``object_to_bytes`` (default: raise CodecError)
    and ``object_to_string`` (default: ``str``).
    """

    def __init__(
        self,
        settings: Optional[CodecSettings] = None,
        object_to_bytes: Optional[ObjectToBytes] = None,
        object_to_string: Optional[ObjectToString] = None,
    ) -> None:
        self._settings = settings or CodecSettings()
        self._object_to_bytes = object_to_bytes or reject_object
        self._object_to_string = object_to_string or str

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def text_to_bytes(self, source: str) -> bytes:
        return text_codec.text_to_bytes(source, self._settings.encoding, self._settings.errors)

    def chars_to_bytes(self, chars: Sequence[str]) -> bytes:
        return text_codec.chars_to_bytes(chars, self._settings.encoding, self._settings.errors)

    def bytes_to_text(self, data: text_codec.BytesLike) -> str:
        return text_codec.bytes_to_text(data, self._settings.encoding, self._settings.errors)

    def bytes_to_chars(self, data: text_codec.BytesLike) -> List[str]:
        return text_codec.bytes_to_chars(data, self._settings.encoding, self._settings.errors)

    def file_to_bytes(self, file_path: Union[str, os.PathLike]) -> bytes:
        return file_utils.file_to_bytes(file_path, self._settings.buffer_size)

    def stream_to_bytes(self, stream: BinaryIO) -> bytes:
        return file_utils.stream_to_bytes(stream, self._settings.buffer_size)

    def to_bytes(self, value: Any) -> bytes:
        """
        Converts any supported value to bytes.

        bytes pass through unchanged; other bytes-like values are copied.
        Characters, strings, paths and streams use the matching conversion.
        Anything else goes to the ``object_to_bytes`` fallback.
        """
        if value is None:
            raise ValueError("Argument for byte conversion cannot be None.")
        kind = classify_payload(value)
        logger.debug("Converting %s payload to bytes", kind.value)
        if kind is PayloadKind.BYTES:
            return value if isinstance(value, bytes) else bytes(value)
        if kind is PayloadKind.CHARS:
            return self.chars_to_bytes(value)
        if kind is PayloadKind.TEXT:
            return self.text_to_bytes(value)
        if kind is PayloadKind.FILE:
            return self.file_to_bytes(value)
        if kind is PayloadKind.STREAM:
            return self.stream_to_bytes(value)
        return self._object_to_bytes(value)

    def to_string(self, value: Any) -> str:
        """
        Converts any supported value to a string. Bytes are decoded,
        characters joined and strings returned as-is; everything else,
        paths and streams included, goes to the ``object_to_string`` fallback.
        """
        if value is None:
            raise ValueError("Argument for string conversion cannot be None.")
        kind = classify_payload(value)
        logger.debug("Converting %s payload to string", kind.value)
        if kind is PayloadKind.BYTES:
            return self.bytes_to_text(value)
        if kind is PayloadKind.CHARS:
            return "".join(value)
        if kind is PayloadKind.TEXT:
            return value
        return self._object_to_string(value)
