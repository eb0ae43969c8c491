# thottam/api/routes/content.py
"""Content browsing routes."""

import logging
from typing import List, Optional

from fastapi import APIRouter

from ...content.navigation import ancestor_folder_paths, collect_folder_paths
from ...content.resolver import ContentResolver
from ...i18n import UI_STRINGS, translate
from ...models.content import Language
from ..dependencies import ContentResolverDep, LanguageDep, TreeBuilderDep
from ..errors import APIError
from ..schemas import (
    ERROR_RESPONSES,
    CategoryResponse,
    NavigationResponse,
    PageResponse,
    StringsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

HOME_PATH = ["intro", "intro"]


# =============================================================================
# Navigation
# =============================================================================


@router.get("/tree", response_model=NavigationResponse, responses={500: ERROR_RESPONSES[500]})
async def get_tree(
    builder: TreeBuilderDep,
    language: LanguageDep,
    pathname: Optional[str] = None,
):
    """Get the sidebar tree with localized labels."""
    try:
        categories = await builder.build()
    except OSError as e:
        logger.exception("Failed to build content tree from %s", builder.contents_path)
        raise APIError.internal_error(translate("failedToLoad", language), language) from e

    return NavigationResponse(
        language=language,
        categories=[CategoryResponse.from_category(cat, language) for cat in categories],
        folder_paths=collect_folder_paths(categories),
        open_folders=ancestor_folder_paths(pathname) if pathname else [],
    )


@router.get("/strings", response_model=StringsResponse)
async def get_strings(language: LanguageDep):
    """Get the UI strings for the active language."""
    return StringsResponse(language=language, strings=UI_STRINGS[language])


# =============================================================================
# Pages
# =============================================================================


async def _render_page(
    resolver: ContentResolver,
    segments: List[str],
    language: Language,
) -> PageResponse:
    # Content errors are mapped to HTTP responses by the app handlers
    content = await resolver.resolve(segments, language)
    return PageResponse.from_content(content, resolver.segments_for(segments), language)


@router.get("/home", response_model=PageResponse, responses=ERROR_RESPONSES)
async def get_home(resolver: ContentResolverDep, language: LanguageDep):
    """Get the introduction page."""
    return await _render_page(resolver, HOME_PATH, language)


@router.get("/pages/{slug:path}", response_model=PageResponse, responses=ERROR_RESPONSES)
async def get_page(
    slug: str,
    resolver: ContentResolverDep,
    language: LanguageDep,
):
    """Get a rendered page by its slug (`category/folder/file`)."""
    segments = [segment for segment in slug.split("/") if segment]
    return await _render_page(resolver, segments, language)
