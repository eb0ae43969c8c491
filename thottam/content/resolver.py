# thottam/content/resolver.py
"""
Content resolution.

Finds the source file for a path and language and renders it. Lookup order,
first existing file wins:

1. `<base>.<lang>.mdx`
2. `<base>.<lang>.md`
3. `<base>.mdx`
4. `<base>.md`

Formats that are not enabled are skipped.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import anyio

from ..models.content import Language, RenderedContent, SourceFormat
from .errors import ContentNotFoundError, ContentPathError
from .paths import ordered_formats, safe_decode
from .renderer import MarkdownRenderer
from .tree import RESERVED_CATEGORIES

logger = logging.getLogger(__name__)


class ContentResolver:
    """Locate and render the best matching source file for a page."""

    def __init__(
        self,
        contents_path: Union[str, Path] = "./contents",
        formats: Iterable[str] = ("mdx", "md"),
        reserved_categories: Iterable[str] = RESERVED_CATEGORIES,
        renderer: Optional[MarkdownRenderer] = None,
    ):
        self.contents_path = Path(contents_path)
        self.formats = ordered_formats(formats)
        self.reserved_categories = tuple(reserved_categories)
        self.renderer = renderer or MarkdownRenderer()

    def segments_for(self, path_segments: Sequence[str]) -> List[str]:
        """
        Decode segments and expand reserved categories.

        Reserved categories keep their document at `<category>/<category>.<ext>`,
        so `["intro"]` becomes `["intro", "intro"]`.
        """
        segments = [safe_decode(segment) for segment in path_segments]
        if len(segments) == 1 and segments[0] in self.reserved_categories:
            segments.append(segments[0])
        return segments

    def base_path(self, path_segments: Sequence[str]) -> Path:
        """
        Filesystem path of a page without extension.

        Raises:
            ContentPathError: If there are no segments or they escape the
                content root.
        """
        segments = self.segments_for(path_segments)
        if not segments or not all(segment.strip() for segment in segments):
            raise ContentPathError(f"Invalid content path: {list(path_segments)!r}")

        root = self.contents_path.resolve()
        base = self.contents_path.joinpath(*segments)
        if not base.resolve().is_relative_to(root) or base.resolve() == root:
            raise ContentPathError(f"Access denied: {'/'.join(segments)} is outside the content root")

        return base

    def candidates(self, base: Path, language: Language) -> List[Tuple[Path, SourceFormat]]:
        """Candidate files in lookup order."""
        language = Language(language)
        tiers = (f".{language.value}", "")
        return [
            (base.with_name(f"{base.name}{tag}{fmt.suffix}"), fmt)
            for tag in tiers
            for fmt in self.formats
        ]

    async def find_source(
        self,
        path_segments: Sequence[str],
        language: Language = Language.TA,
    ) -> Tuple[Path, SourceFormat]:
        """
        Find the source file for a page.

        Raises:
            ContentNotFoundError: If no candidate exists.
            ContentPathError: If the path is invalid.
        """
        base = self.base_path(path_segments)

        for candidate, fmt in self.candidates(base, language):
            if await anyio.Path(candidate).is_file():
                logger.debug("Resolved %s (%s) to %s", base, Language(language).value, candidate)
                return candidate, fmt

        raise ContentNotFoundError(
            str(base),
            language,
            tuple(fmt.value for fmt in reversed(self.formats)),
        )

    async def resolve(
        self,
        path_segments: Sequence[str],
        language: Language = Language.TA,
    ) -> RenderedContent:
        """
        Read and render the page at the given path.

        Args:
            path_segments: Category/folder/file chain, possibly percent-encoded
            language: Preferred language

        Returns:
            MdxContent for `.mdx` sources, HtmlContent for `.md` sources
        """
        source, fmt = await self.find_source(path_segments, language)
        text = await anyio.Path(source).read_text(encoding="utf-8")
        source_path = source.relative_to(self.contents_path).as_posix()

        # Markdown conversion is CPU bound
        return await anyio.to_thread.run_sync(self.renderer.render, text, fmt, source_path)
