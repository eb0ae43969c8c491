# thottam/content/renderer.py
"""
Markdown and MDX rendering.

Both formats go through the same Python-Markdown pipeline with the
GitHub-flavored extensions enabled (tables, strikethrough, autolinks, task
lists). MDX sources additionally have their ESM `import`/`export` lines
removed; JSX component tags are kept in the HTML and reported so the client
can hydrate them.
"""

import re
from typing import Any, Dict, List, Tuple

import markdown
import yaml

from ..models.content import HtmlContent, MdxContent, RenderedContent, SourceFormat
from .errors import ContentRenderError


FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)
FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")
ESM_PATTERN = re.compile(r"^(?:import|export)\s")
COMPONENT_PATTERN = re.compile(r"<([A-Z][A-Za-z0-9]*(?:\.[A-Z][A-Za-z0-9]*)*)[\s/>]")

GFM_EXTENSIONS = [
    "extra",
    "sane_lists",
    "toc",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]
GFM_EXTENSION_CONFIGS = {
    # Only ~~strikethrough~~, GFM has no subscript
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.tasklist": {"custom_checkbox": False},
}


def split_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a leading YAML frontmatter block from the document body.

    Returns:
        Tuple of (frontmatter mapping, body). The mapping is empty when the
        document has no frontmatter.

    Raises:
        ContentRenderError: If the frontmatter is not a YAML mapping.
    """
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise ContentRenderError(f"Invalid frontmatter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentRenderError("Frontmatter must be a mapping")

    return data, text[match.end():]


def _outside_fences(body: str):
    """Yield (line, in_fence) for every line of the body."""
    fence = None
    for line in body.splitlines(keepends=True):
        match = FENCE_PATTERN.match(line)
        if match:
            marker = match.group(1)
            if fence is None:
                fence = marker
                yield line, True
                continue
            if marker == fence:
                fence = None
                yield line, True
                continue
        yield line, fence is not None


def strip_esm(body: str) -> str:
    """Drop top-level MDX `import`/`export` statements."""
    return "".join(
        line for line, in_fence in _outside_fences(body)
        if in_fence or not ESM_PATTERN.match(line)
    )


def find_components(body: str) -> List[str]:
    """JSX component names used in the body (capitalized tags)."""
    names = set()
    for line, in_fence in _outside_fences(body):
        if not in_fence:
            names.update(COMPONENT_PATTERN.findall(line))
    return sorted(names)


class MarkdownRenderer:
    """Render content sources to HTML."""

    def __init__(self, extensions=None, extension_configs=None):
        self.extensions = list(extensions or GFM_EXTENSIONS)
        self.extension_configs = dict(extension_configs or GFM_EXTENSION_CONFIGS)

    def to_html(self, body: str) -> str:
        # Markdown instances keep state between conversions
        md = markdown.Markdown(
            extensions=self.extensions,
            extension_configs=self.extension_configs,
        )
        return md.convert(body)

    def render_markdown(self, text: str, source_path: str) -> HtmlContent:
        frontmatter, body = split_frontmatter(text)
        return HtmlContent(
            source_path=source_path,
            frontmatter=frontmatter,
            html=self.to_html(body),
        )

    def render_mdx(self, text: str, source_path: str) -> MdxContent:
        frontmatter, body = split_frontmatter(text)
        body = strip_esm(body)
        return MdxContent(
            source_path=source_path,
            frontmatter=frontmatter,
            html=self.to_html(body),
            components=find_components(body),
        )

    def render(self, text: str, fmt: SourceFormat, source_path: str) -> RenderedContent:
        if SourceFormat(fmt).is_rich:
            return self.render_mdx(text, source_path)
        return self.render_markdown(text, source_path)
