# thottam/content/errors.py
"""Errors raised while resolving and rendering content."""

from ..models.content import Language


class ContentError(Exception):
    """Base class for content lookup failures."""


class ContentNotFoundError(ContentError, LookupError):
    """No source file matched a path and language."""

    def __init__(self, base_path: str, language: Language, formats: tuple[str, ...] = ("md", "mdx")):
        self.base_path = base_path
        self.language = Language(language)
        exts = "/".join(formats)
        super().__init__(
            f"File not found: {base_path}.{self.language.value}.{exts} or {base_path}.{exts}"
        )


class ContentPathError(ContentError, ValueError):
    """Path segments point outside the content root."""


class ContentRenderError(ContentError):
    """A source file was found but could not be rendered."""
