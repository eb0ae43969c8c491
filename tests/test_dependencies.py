# tests/test_dependencies.py
"""Tests for FastAPI dependencies."""

from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request

from thottam.api import dependencies
from thottam.config import Config, ContentConfig
from thottam.content.resolver import ContentResolver
from thottam.content.tree import ContentTreeBuilder
from thottam.models.content import Language, SourceFormat


@pytest.fixture(autouse=True)
async def reset_singletons():
    await dependencies.cleanup_dependencies()
    yield
    await dependencies.cleanup_dependencies()


@pytest.mark.asyncio
async def test_get_config_does_not_call_sync_loader(monkeypatch):
    """Async get_config should not call the sync loader (blocks event loop)."""

    def boom():
        raise AssertionError("get_config_sync should not be called from async get_config")

    monkeypatch.setattr(dependencies, "get_config_sync", boom)
    monkeypatch.setattr(dependencies, "load_config", AsyncMock(return_value=Config()))

    config = await dependencies.get_config()
    assert isinstance(config, Config)


@pytest.mark.asyncio
async def test_tree_builder_uses_content_config(tmp_path):
    config = Config(content=ContentConfig(path=str(tmp_path), formats=["mdx"], ignore_hidden=False))

    builder = await dependencies.get_tree_builder(config)

    assert isinstance(builder, ContentTreeBuilder)
    assert builder.contents_path == tmp_path
    assert builder.formats == (SourceFormat.MDX,)
    assert builder.ignore_hidden is False
    assert await dependencies.get_tree_builder(config) is builder


@pytest.mark.asyncio
async def test_content_resolver_uses_content_config(tmp_path):
    config = Config(content=ContentConfig(path=str(tmp_path), reserved_categories=["home"]))

    resolver = await dependencies.get_content_resolver(config)

    assert isinstance(resolver, ContentResolver)
    assert resolver.reserved_categories == ("home",)
    assert resolver.segments_for(["home"]) == ["home", "home"]


def _request():
    return Request({"type": "http", "headers": [], "query_string": b""})


@pytest.mark.asyncio
async def test_get_language_precedence():
    config = Config(content=ContentConfig(default_language="en"))

    assert await dependencies.get_language(_request(), config) == Language.EN
    assert await dependencies.get_language(_request(), config, lang=None, language="ta") == Language.TA
    assert await dependencies.get_language(_request(), config, lang="en", language="ta") == Language.EN
    assert await dependencies.get_language(_request(), config, lang="xx", language="zz") == Language.EN


@pytest.mark.asyncio
async def test_get_language_is_kept_on_request_state():
    request = _request()

    await dependencies.get_language(request, Config(), lang="en")

    assert request.state.language == Language.EN
