# thottam/content/paths.py
"""
Filename conventions for content files.

A source file is named `<base>[.<lang>].<ext>` where `<lang>` is one of the
language tags and `<ext>` one of the enabled source formats.
"""

import re
from typing import Iterable, Optional
from urllib.parse import unquote

from ..models.content import Language, SourceFormat


LANGUAGE_TAGS = tuple(f".{language.value}" for language in Language)

# `%` not followed by two hex digits
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def safe_decode(name: str) -> str:
    """
    Percent-decode a path segment.

    Any malformed escape or invalid UTF-8 leaves the whole segment as is,
    so `a%zz%20b` stays `a%zz%20b`.
    """
    if MALFORMED_ESCAPE.search(name):
        return name
    try:
        return unquote(name, errors="strict")
    except UnicodeDecodeError:
        return name


def ordered_formats(formats: Iterable[str]) -> tuple[SourceFormat, ...]:
    """Enabled formats in lookup priority order (rich format first)."""
    enabled = {SourceFormat(fmt) for fmt in formats}
    return tuple(fmt for fmt in SourceFormat if fmt in enabled)


def source_format(filename: str, formats: Iterable[SourceFormat]) -> Optional[SourceFormat]:
    for fmt in formats:
        if filename.endswith(fmt.suffix):
            return fmt
    return None


def strip_language_tag(stem: str) -> str:
    for tag in LANGUAGE_TAGS:
        if stem.endswith(tag):
            return stem[: -len(tag)]
    return stem


def base_name(filename: str, fmt: SourceFormat) -> str:
    """`guide.ta.mdx` -> `guide`, `guide.mdx` -> `guide`."""
    stem = filename[: -len(fmt.suffix)] if filename.endswith(fmt.suffix) else filename
    return strip_language_tag(stem)


def name_sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive, lowercase before uppercase on ties."""
    return (name.casefold(), name.swapcase())
