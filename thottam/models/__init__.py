"""Core data models for the content tree and rendered pages."""

from .content import (
    Category,
    ContentItem,
    DisplayName,
    FileItem,
    FolderItem,
    HtmlContent,
    Language,
    MdxContent,
    RenderedContent,
    SourceFormat,
)

__all__ = [
    "Category",
    "ContentItem",
    "DisplayName",
    "FileItem",
    "FolderItem",
    "HtmlContent",
    "Language",
    "MdxContent",
    "RenderedContent",
    "SourceFormat",
]
