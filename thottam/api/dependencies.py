# thottam/api/dependencies.py
"""FastAPI dependency injection."""

from functools import lru_cache
from typing import Annotated, Optional
import anyio

from fastapi import Cookie, Depends, Query, Request

from ..config import Config, load_config
from ..content import resolver_from_config, tree_builder_from_config
from ..content.resolver import ContentResolver
from ..content.tree import ContentTreeBuilder
from ..i18n import parse_language
from ..models.content import Language


# =============================================================================
# Configuration
# =============================================================================


@lru_cache()
def get_config_sync() -> Config:
    """Get configuration synchronously (cached).

    Note: uses async AnyIO filesystem operations under the hood.
    """
    return anyio.run(load_config)


_config: Optional[Config] = None
_config_lock: Optional[anyio.Lock] = None


def _get_config_lock() -> anyio.Lock:
    """Get or create the config lock (lazy initialization)."""
    global _config_lock
    if _config_lock is None:
        _config_lock = anyio.Lock()
    return _config_lock


async def get_config() -> Config:
    """Get configuration (async, cached)."""
    global _config

    if _config is None:
        async with _get_config_lock():
            if _config is None:
                _config = await load_config()

    return _config


ConfigDep = Annotated[Config, Depends(get_config)]


# =============================================================================
# Tree Builder
# =============================================================================


_tree_builder: Optional[ContentTreeBuilder] = None
_tree_builder_lock: Optional[anyio.Lock] = None


def _get_tree_builder_lock() -> anyio.Lock:
    """Get or create the tree builder lock (lazy initialization)."""
    global _tree_builder_lock
    if _tree_builder_lock is None:
        _tree_builder_lock = anyio.Lock()
    return _tree_builder_lock


async def get_tree_builder(config: ConfigDep) -> ContentTreeBuilder:
    """Get or create the tree builder singleton.

    The builder only holds settings; every request walks the directory again.
    """
    global _tree_builder

    if _tree_builder is None:
        async with _get_tree_builder_lock():
            if _tree_builder is None:
                _tree_builder = tree_builder_from_config(config)

    return _tree_builder


TreeBuilderDep = Annotated[ContentTreeBuilder, Depends(get_tree_builder)]


# =============================================================================
# Content Resolver
# =============================================================================


_content_resolver: Optional[ContentResolver] = None
_content_resolver_lock: Optional[anyio.Lock] = None


def _get_content_resolver_lock() -> anyio.Lock:
    """Get or create the content resolver lock (lazy initialization)."""
    global _content_resolver_lock
    if _content_resolver_lock is None:
        _content_resolver_lock = anyio.Lock()
    return _content_resolver_lock


async def get_content_resolver(config: ConfigDep) -> ContentResolver:
    """Get or create the content resolver singleton."""
    global _content_resolver

    if _content_resolver is None:
        async with _get_content_resolver_lock():
            if _content_resolver is None:
                _content_resolver = resolver_from_config(config)

    return _content_resolver


ContentResolverDep = Annotated[ContentResolver, Depends(get_content_resolver)]


# =============================================================================
# Language preference
# =============================================================================


async def get_language(
    request: Request,
    config: ConfigDep,
    lang: Annotated[Optional[str], Query(description="ta or en")] = None,
    language: Annotated[Optional[str], Cookie()] = None,
) -> Language:
    """
    Query parameter first, then the `language` cookie, then the configured default.

    The result is kept on `request.state` for the content error handlers.
    """
    default = parse_language(language, config.content.default_language)
    request.state.language = parse_language(lang, default)
    return request.state.language


LanguageDep = Annotated[Language, Depends(get_language)]


# =============================================================================
# Cleanup on shutdown
# =============================================================================


async def cleanup_dependencies():
    """Cleanup singleton instances on shutdown."""
    global _config, _config_lock
    global _tree_builder, _tree_builder_lock
    global _content_resolver, _content_resolver_lock

    _config = None
    _config_lock = None

    _tree_builder = None
    _tree_builder_lock = None

    _content_resolver = None
    _content_resolver_lock = None
