"""Content tree building and page resolution.

Usage:
    from thottam.content import get_categories_and_files, get_file_content

    categories = await get_categories_and_files()
    page = await get_file_content(["guide", "setup"], "en")
"""

from typing import List, Optional, Sequence, Union

from ..config import Config, load_config
from ..models.content import Category, Language, RenderedContent
from .errors import ContentError, ContentNotFoundError, ContentPathError, ContentRenderError
from .renderer import MarkdownRenderer, split_frontmatter
from .resolver import ContentResolver
from .translations import load_translations
from .tree import ContentTreeBuilder, sort_categories, sort_items


def tree_builder_from_config(config: Config) -> ContentTreeBuilder:
    return ContentTreeBuilder(
        contents_path=config.content.path,
        formats=config.content.formats,
        translations_file=config.content.translations_file,
        reserved_categories=config.content.reserved_categories,
        ignore_hidden=config.content.ignore_hidden,
    )


def resolver_from_config(config: Config) -> ContentResolver:
    return ContentResolver(
        contents_path=config.content.path,
        formats=config.content.formats,
        reserved_categories=config.content.reserved_categories,
    )


async def get_categories_and_files(config: Optional[Config] = None) -> List[Category]:
    """Build the category tree of the configured content directory."""
    config = config or await load_config()
    return await tree_builder_from_config(config).build()


async def get_file_content(
    path_segments: Sequence[str],
    language: Union[Language, str] = Language.TA,
    config: Optional[Config] = None,
) -> RenderedContent:
    """Resolve and render a page of the configured content directory."""
    config = config or await load_config()
    return await resolver_from_config(config).resolve(path_segments, Language(language))


__all__ = [
    "ContentError",
    "ContentNotFoundError",
    "ContentPathError",
    "ContentRenderError",
    "ContentResolver",
    "ContentTreeBuilder",
    "MarkdownRenderer",
    "get_categories_and_files",
    "get_file_content",
    "load_translations",
    "resolver_from_config",
    "sort_categories",
    "sort_items",
    "split_frontmatter",
    "tree_builder_from_config",
]
