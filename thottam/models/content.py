# thottam/models/content.py

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field


class Language(str, Enum):
    """Languages a page can be written in."""
    TA = "ta"
    EN = "en"


class SourceFormat(str, Enum):
    """Recognized source file formats."""
    MDX = "mdx"     # Rich format, always tried first
    MD = "md"       # Plain Markdown

    @property
    def suffix(self) -> str:
        return f".{self.value}"

    @property
    def is_rich(self) -> bool:
        return self == SourceFormat.MDX


class DisplayName(BaseModel):
    """Localized label loaded from a directory's translations sidecar."""

    ta: str
    en: str

    def for_language(self, language: Language) -> str:
        return self.ta if Language(language) == Language.TA else self.en


class FileItem(BaseModel):
    """
    A logical document in a directory.

    Backed by one or more physical files (`name.ta.mdx`, `name.en.mdx`,
    `name.mdx`) which all collapse into the same entry.
    """

    type: Literal["file"] = "file"
    name: str                         # Base name, language-agnostic
    path: str                         # URL segment, unique among siblings
    display_name: Optional[DisplayName] = None
    extension: SourceFormat           # Format of the first variant scanned


class FolderItem(BaseModel):
    """A subdirectory and its sorted children."""

    type: Literal["folder"] = "folder"
    name: str
    path: str
    display_name: Optional[DisplayName] = None
    children: list["ContentItem"] = Field(default_factory=list)


ContentItem = Annotated[Union[FileItem, FolderItem], Field(discriminator="type")]

FolderItem.model_rebuild()


class Category(BaseModel):
    """
    A top-level grouping, one per subdirectory of the content root.

    Reserved categories (`intro`, `history`) are flat: `items` only holds
    their direct files.
    """

    name: str
    display_name: Optional[DisplayName] = None
    flat: bool = False
    items: list[ContentItem] = Field(default_factory=list)


class MdxContent(BaseModel):
    """Rendered rich-format page."""

    kind: Literal["mdx"] = "mdx"
    source_path: str
    frontmatter: dict[str, Any] = Field(default_factory=dict)
    html: str
    components: list[str] = Field(default_factory=list)   # JSX tags left for the client

    @property
    def is_mdx(self) -> bool:
        return True


class HtmlContent(BaseModel):
    """Rendered plain Markdown page."""

    kind: Literal["html"] = "html"
    source_path: str
    frontmatter: dict[str, Any] = Field(default_factory=dict)
    html: str

    @property
    def is_mdx(self) -> bool:
        return False


RenderedContent = Annotated[Union[MdxContent, HtmlContent], Field(discriminator="kind")]
