# thottam/content/tree.py
"""
Content tree building.

Walks the content root and produces the ordered categories shown in the
sidebar. The tree is rebuilt on every call; nothing is cached.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import anyio

from ..models.content import Category, ContentItem, FileItem, FolderItem
from .paths import base_name, name_sort_key, ordered_formats, safe_decode, source_format
from .translations import TRANSLATIONS_FILE, Translations, load_translations

logger = logging.getLogger(__name__)

RESERVED_CATEGORIES = ("intro", "history")


def sort_items(items: Iterable[ContentItem]) -> List[ContentItem]:
    """Files before folders, each group ordered by name."""
    return sorted(
        items,
        key=lambda item: (item.type != "file", *name_sort_key(item.name)),
    )


def sort_categories(
    categories: Iterable[Category],
    pinned: Iterable[str] = RESERVED_CATEGORIES,
) -> List[Category]:
    """Pinned categories first in their given order, the rest by name."""
    rank = {name: index for index, name in enumerate(pinned)}
    return sorted(
        categories,
        key=lambda cat: (rank.get(cat.name, len(rank)), *name_sort_key(cat.name)),
    )


class ContentTreeBuilder:
    """Build the category/folder/file tree from the content directory."""

    def __init__(
        self,
        contents_path: Union[str, Path] = "./contents",
        formats: Iterable[str] = ("mdx", "md"),
        translations_file: str = TRANSLATIONS_FILE,
        reserved_categories: Iterable[str] = RESERVED_CATEGORIES,
        ignore_hidden: bool = True,
    ):
        self.contents_path = Path(contents_path)
        self.formats = ordered_formats(formats)
        self.translations_file = translations_file
        self.reserved_categories = tuple(reserved_categories)
        self.ignore_hidden = ignore_hidden

    async def build(self) -> List[Category]:
        """
        Build the sorted category list.

        Raises:
            OSError: If the content root or a category directory cannot be read.
        """
        root = anyio.Path(self.contents_path)
        translations = await load_translations(root, self.translations_file)

        categories = []
        for entry in await self._list_entries(root):
            if not await entry.is_dir():
                continue

            name = safe_decode(entry.name)
            flat = name in self.reserved_categories
            if flat:
                items = await self._read_flat(entry)
            else:
                items = await self._read_directory(entry)

            categories.append(Category(
                name=name,
                display_name=translations.get(name),
                flat=flat,
                items=items,
            ))

        logger.debug("Built content tree with %d categories", len(categories))
        return sort_categories(categories, self.reserved_categories)

    async def _list_entries(self, directory: anyio.Path) -> List[anyio.Path]:
        """Directory entries in name order, without the sidecar and hidden names."""
        entries = []
        async for entry in directory.iterdir():
            if entry.name == self.translations_file:
                continue
            if self.ignore_hidden and entry.name.startswith("."):
                continue
            entries.append(entry)
        return sorted(entries, key=lambda entry: entry.name)

    async def _read_flat(self, directory: anyio.Path) -> List[ContentItem]:
        """Direct files of a reserved category, no recursion."""
        translations = await load_translations(directory, self.translations_file)
        seen: set[str] = set()
        items: List[ContentItem] = []

        for entry in await self._list_entries(directory):
            if not await entry.is_file():
                continue
            item = self._file_item(entry, translations, seen)
            if item is not None:
                items.append(item)

        return sort_items(items)

    async def _read_directory(self, directory: anyio.Path) -> List[ContentItem]:
        """Recursively read a directory into sorted items."""
        translations = await load_translations(directory, self.translations_file)
        seen: set[str] = set()
        items: List[ContentItem] = []

        for entry in await self._list_entries(directory):
            if await entry.is_dir():
                name = safe_decode(entry.name)
                items.append(FolderItem(
                    name=name,
                    path=name,
                    display_name=translations.get(name),
                    children=await self._read_directory(entry),
                ))
                continue

            item = self._file_item(entry, translations, seen)
            if item is not None:
                items.append(item)

        return sort_items(items)

    def _file_item(
        self,
        entry: anyio.Path,
        translations: Translations,
        seen: set[str],
    ) -> Optional[FileItem]:
        """Collapse a physical file into its logical entry, or None if skipped."""
        filename = safe_decode(entry.name)
        fmt = source_format(filename, self.formats)
        if fmt is None:
            return None

        name = base_name(filename, fmt)
        if name in seen:
            return None
        seen.add(name)

        return FileItem(
            name=name,
            path=name,
            display_name=translations.get(name),
            extension=fmt,
        )
