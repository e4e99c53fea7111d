"""Tests for settings and splitter config validation."""

import pytest

from shared.config import Settings, get_settings
from shared.errors import InvalidConfiguration
from shared.schemas import SplitterConfig, build_splitter_config


def test_settings_defaults(monkeypatch):
    for name in (
        "DOCS_PATH",
        "EMBEDDING_MODEL",
        "SIMILARITY_THRESHOLD",
        "MIN_CHUNK_SIZE_IN_CHARS",
        "MAX_CHUNK_SIZE_IN_CHARS",
        "INCLUDE_FILE_NAME",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.DOCS_PATH == "./docs"
    assert settings.EMBEDDING_MODEL == "all-MiniLM-L6-v2"
    assert settings.INCLUDE_FILE_NAME is True
    assert settings.LOG_LEVEL == "INFO"
    assert settings.get_splitter_config() == SplitterConfig()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SIMILARITY_THRESHOLD", "0.6")
    monkeypatch.setenv("MIN_CHUNK_SIZE_IN_CHARS", "20")
    monkeypatch.setenv("MAX_CHUNK_SIZE_IN_CHARS", "500")
    monkeypatch.setenv("INCLUDE_FILE_NAME", "false")

    settings = Settings()
    config = settings.get_splitter_config()

    assert settings.INCLUDE_FILE_NAME is False
    assert config.similarity_threshold == 0.6
    assert config.min_chunk_size_in_chars == 20
    assert config.max_chunk_size_in_chars == 500


def test_invalid_environment_raises_invalid_configuration(monkeypatch):
    monkeypatch.setenv("MIN_CHUNK_SIZE_IN_CHARS", "400")
    monkeypatch.setenv("MAX_CHUNK_SIZE_IN_CHARS", "300")

    with pytest.raises(InvalidConfiguration):
        Settings().get_splitter_config()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_build_splitter_config_wraps_validation_error():
    with pytest.raises(InvalidConfiguration) as exc_info:
        build_splitter_config(similarity_threshold=2.0)

    assert "similarity_threshold" in str(exc_info.value)
    assert exc_info.value.__cause__ is not None


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        build_splitter_config(min_chunk_size_in_chars=-5)


@pytest.mark.parametrize(
    "values",
    [
        {"min_chunk_size_in_chars": True},
        {"max_chunk_size_in_chars": "7"},
        {"min_chunk_size_in_chars": 1.5},
        {"similarity_threshold": "0.5"},
        {"similarity_threshold": True},
    ],
)
def test_non_numeric_values_are_rejected(values):
    with pytest.raises(InvalidConfiguration):
        build_splitter_config(**values)


def test_int_threshold_is_accepted():
    assert build_splitter_config(similarity_threshold=1).similarity_threshold == 1.0
