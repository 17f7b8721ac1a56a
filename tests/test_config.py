import importlib

import pytest

from codec_support import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reloads config under patched env vars, then restores the original values."""
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **kw: False)

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_env_overrides(reload_config):
    cfg = reload_config(CODEC_BUFFER_SIZE="1024", CODEC_ERRORS="replace")

    assert cfg.DEFAULT_BUFFER_SIZE == 1024
    assert cfg.DEFAULT_ERRORS == "replace"


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_bad_buffer_size_falls_back(reload_config, raw):
    cfg = reload_config(CODEC_BUFFER_SIZE=raw)

    assert cfg.DEFAULT_BUFFER_SIZE == config.BUFFER_SIZE_DEFAULT


def test_preferred_encoding_is_not_configurable(reload_config):
    cfg = reload_config(PREFERRED_ENCODING="latin-1", CODEC_ENCODING="latin-1")

    assert cfg.PREFERRED_ENCODING == "UTF-8"


def test_unknown_error_handler_falls_back(reload_config):
    cfg = reload_config(CODEC_ERRORS="bogus")

    assert cfg.DEFAULT_ERRORS == config.ERRORS_DEFAULT == "replace"


def test_default_error_handler_replaces(reload_config, monkeypatch):
    monkeypatch.delenv("CODEC_ERRORS", raising=False)
    cfg = reload_config()

    assert cfg.DEFAULT_ERRORS == "replace"
