"""REST API for the Thottam content site.

Usage:
    from thottam.api import create_app

    app = create_app()
    # Run with: uvicorn thottam.api:app --reload
"""

from .main import create_app, app
from .dependencies import (
    get_config,
    get_config_sync,
    ConfigDep,
    get_tree_builder,
    TreeBuilderDep,
    get_content_resolver,
    ContentResolverDep,
    get_language,
    LanguageDep,
    cleanup_dependencies,
)
from .errors import APIError
from .schemas import (
    ErrorResponse,
    NavItemResponse,
    CategoryResponse,
    NavigationResponse,
    PageResponse,
    StringsResponse,
)

__all__ = [
    "create_app",
    "app",
    "get_config",
    "get_config_sync",
    "ConfigDep",
    "get_tree_builder",
    "TreeBuilderDep",
    "get_content_resolver",
    "ContentResolverDep",
    "get_language",
    "LanguageDep",
    "cleanup_dependencies",
    "APIError",
    "ErrorResponse",
    "NavItemResponse",
    "CategoryResponse",
    "NavigationResponse",
    "PageResponse",
    "StringsResponse",
]
