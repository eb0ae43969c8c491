# thottam/content/navigation.py
"""Sidebar helpers: labels, links and folder paths."""

from typing import Iterable, List, Union

from ..models.content import Category, ContentItem, FolderItem, Language
from .paths import safe_decode


def display_label(entry: Union[Category, ContentItem], language: Language) -> str:
    """Localized label, or the canonical name when no translation exists."""
    if entry.display_name is not None:
        return entry.display_name.for_language(language)
    return entry.name


def category_href(category: Category) -> str:
    return f"/{category.name}"


def item_href(base_path: str, item: ContentItem) -> str:
    return f"{base_path}/{item.path}"


def _gather_folders(items: Iterable[ContentItem], base_path: str, paths: List[str]) -> None:
    for item in items:
        if isinstance(item, FolderItem):
            folder_path = item_href(base_path, item)
            paths.append(folder_path)
            _gather_folders(item.children, folder_path, paths)


def collect_folder_paths(categories: Iterable[Category]) -> List[str]:
    """Every folder href in the tree, depth first."""
    paths: List[str] = []
    for category in categories:
        _gather_folders(category.items, category_href(category), paths)
    return paths


def ancestor_folder_paths(pathname: str) -> List[str]:
    """
    Folders that contain the page at `pathname`.

    `/guide/setup/install` -> `["/guide", "/guide/setup"]`
    """
    parts = [safe_decode(part) for part in pathname.split("/") if part]
    paths = []
    current = ""
    for part in parts[:-1]:
        current += f"/{part}"
        paths.append(current)
    return paths
