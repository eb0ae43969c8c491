# thottam/api/schemas.py
"""API request and response schemas."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from ..content.navigation import category_href, display_label, item_href
from ..models.content import (
    Category,
    ContentItem,
    DisplayName,
    FolderItem,
    Language,
    RenderedContent,
)


# =============================================================================
# Generic Responses
# =============================================================================


class ErrorResponse(BaseModel):
    """Localized error body, `{"detail": "Error: ..."}`."""
    detail: str


ERROR_RESPONSES = {
    403: {"model": ErrorResponse, "description": "Path outside the content root"},
    404: {"model": ErrorResponse, "description": "No source file for the page"},
    500: {"model": ErrorResponse, "description": "Content could not be read or rendered"},
}


# =============================================================================
# Navigation Schemas
# =============================================================================


class NavItemResponse(BaseModel):
    """A file or folder in the sidebar."""
    type: str
    name: str
    path: str
    href: str
    label: str
    display_name: Optional[DisplayName] = None
    extension: Optional[str] = None
    children: List["NavItemResponse"] = Field(default_factory=list)

    @classmethod
    def from_item(cls, item: ContentItem, base_path: str, language: Language) -> "NavItemResponse":
        """Create response from a content item under `base_path`."""
        href = item_href(base_path, item)
        if isinstance(item, FolderItem):
            return cls(
                type=item.type,
                name=item.name,
                path=item.path,
                href=href,
                label=display_label(item, language),
                display_name=item.display_name,
                children=[cls.from_item(child, href, language) for child in item.children],
            )
        return cls(
            type=item.type,
            name=item.name,
            path=item.path,
            href=href,
            label=display_label(item, language),
            display_name=item.display_name,
            extension=item.extension.value,
        )


class CategoryResponse(BaseModel):
    """Response for a top-level category."""
    name: str
    href: str
    label: str
    display_name: Optional[DisplayName] = None
    flat: bool
    items: List[NavItemResponse]

    @classmethod
    def from_category(cls, category: Category, language: Language) -> "CategoryResponse":
        """Create response from category."""
        href = category_href(category)
        return cls(
            name=category.name,
            href=href,
            label=display_label(category, language),
            display_name=category.display_name,
            flat=category.flat,
            items=[NavItemResponse.from_item(item, href, language) for item in category.items],
        )


class NavigationResponse(BaseModel):
    """Response for the sidebar tree."""
    language: Language
    categories: List[CategoryResponse]
    folder_paths: List[str]
    open_folders: List[str] = Field(default_factory=list)


# =============================================================================
# Page Schemas
# =============================================================================


class PageResponse(BaseModel):
    """Response for a rendered page."""
    path: List[str]
    language: Language
    kind: str                       # "mdx" or "html"
    is_mdx: bool
    source_path: str
    frontmatter: Dict[str, Any] = Field(default_factory=dict)
    html: str
    components: List[str] = Field(default_factory=list)

    @classmethod
    def from_content(
        cls,
        content: RenderedContent,
        path: List[str],
        language: Language,
    ) -> "PageResponse":
        """Create response from rendered content."""
        return cls(
            path=path,
            language=language,
            kind=content.kind,
            is_mdx=content.is_mdx,
            source_path=content.source_path,
            frontmatter=content.frontmatter,
            html=content.html,
            components=getattr(content, "components", []),
        )


class StringsResponse(BaseModel):
    """UI strings for one language."""
    language: Language
    strings: Dict[str, str]
