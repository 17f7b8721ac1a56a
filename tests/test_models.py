import pytest

from codec_support import config
from codec_support.models import CodecSettings, ValidationError


def test_defaults():
    settings = CodecSettings()

    assert settings.encoding == config.PREFERRED_ENCODING == "UTF-8"
    assert settings.errors == config.DEFAULT_ERRORS
    assert settings.buffer_size == config.DEFAULT_BUFFER_SIZE


def test_unknown_encoding_is_rejected():
    with pytest.raises(ValidationError):
        CodecSettings(encoding="NOT-A-REAL-ENCODING")


def test_unknown_error_handler_is_rejected():
    with pytest.raises(ValidationError):
        CodecSettings(errors="shrug")


@pytest.mark.parametrize("size", [0, -512])
def test_buffer_size_must_be_positive(size):
    with pytest.raises(ValidationError):
        CodecSettings(buffer_size=size)


def test_settings_are_frozen():
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.encoding = "latin-1"
