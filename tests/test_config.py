# tests/test_config.py
"""Tests for config loading and env overrides."""

import pytest
from pydantic import ValidationError

from thottam.config import Config, ContentConfig, load_config

from .conftest import write_file


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("API_HOST", "API_PORT", "CONTENTS_PATH", "CONTENT_FORMATS", "DEFAULT_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.asyncio
async def test_defaults_when_file_missing(tmp_path):
    config = await load_config(config_path=str(tmp_path / "missing.yaml"))

    assert config.content.path == "./contents"
    assert config.content.formats == ["mdx", "md"]
    assert config.content.default_language == "ta"
    assert config.content.reserved_categories == ["intro", "history"]
    assert config.api.port == 8001


@pytest.mark.asyncio
async def test_loads_yaml(tmp_path):
    settings = write_file(
        tmp_path,
        "settings.yaml",
        "content:\n  path: /srv/contents\n  formats: [mdx]\n  default_language: en\napi:\n  port: 9100\n",
    )

    config = await load_config(config_path=str(settings))

    assert config.content.path == "/srv/contents"
    assert config.content.formats == ["mdx"]
    assert config.content.default_language == "en"
    assert config.api.port == 9100


@pytest.mark.asyncio
async def test_env_overrides_apply(monkeypatch, tmp_path):
    monkeypatch.setenv("API_HOST", "127.0.0.1")
    monkeypatch.setenv("API_PORT", "9000")
    monkeypatch.setenv("CONTENTS_PATH", str(tmp_path / "contents"))
    monkeypatch.setenv("CONTENT_FORMATS", "mdx")
    monkeypatch.setenv("DEFAULT_LANGUAGE", "en")

    config = await load_config(config_path=str(tmp_path / "missing.yaml"))

    assert config.api.host == "127.0.0.1"
    assert config.api.port == 9000
    assert config.content.path == str(tmp_path / "contents")
    assert config.content.formats == ["mdx"]
    assert config.content.default_language == "en"


@pytest.mark.asyncio
async def test_empty_env_values_are_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("CONTENTS_PATH", "  ")

    config = await load_config(config_path=str(tmp_path / "missing.yaml"))

    assert config.content.path == "./contents"


@pytest.mark.asyncio
async def test_env_overrides_invalid_port(monkeypatch, tmp_path):
    monkeypatch.setenv("API_PORT", "not-an-int")

    with pytest.raises(ValueError):
        await load_config(config_path=str(tmp_path / "missing.yaml"))


@pytest.mark.asyncio
async def test_env_overrides_invalid_format(monkeypatch, tmp_path):
    monkeypatch.setenv("CONTENT_FORMATS", "mdx,rst")

    with pytest.raises(ValueError, match="rst"):
        await load_config(config_path=str(tmp_path / "missing.yaml"))


def test_formats_are_normalized():
    assert ContentConfig(formats=[".MD", "mdx", "md"]).formats == ["md", "mdx"]


def test_formats_must_not_be_empty():
    with pytest.raises(ValidationError):
        ContentConfig(formats=[])


def test_default_language_is_validated():
    with pytest.raises(ValidationError):
        Config(content={"default_language": "fr"})
