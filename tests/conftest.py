# tests/conftest.py
"""Shared pytest fixtures and test helpers."""

import json
from pathlib import Path

import pytest

from thottam.config import Config, ContentConfig


def write_file(root: Path, relative: str, text: str = "") -> Path:
    """Write a file below `root`, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_translations(directory: Path, mapping: dict) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "_translations.json"
    path.write_text(json.dumps(mapping, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def contents_dir(tmp_path):
    """A small bilingual content tree.

    contents/
        _translations.json          intro, guide
        intro/intro.ta.mdx, intro/intro.mdx
        history/history.md
        guide/_translations.json    setup, advanced
        guide/setup.ta.mdx, guide/setup.en.mdx, guide/setup.mdx
        guide/faq.md
        guide/advanced/deploy.mdx
        zeta/notes.mdx
        alpha/readme.md
    """
    root = tmp_path / "contents"
    write_translations(root, {
        "intro": {"ta": "அறிமுகம்", "en": "Introduction"},
        "guide": {"ta": "வழிகாட்டி", "en": "Guide"},
    })
    write_file(root, "intro/intro.ta.mdx", "# வணக்கம்\n")
    write_file(root, "intro/intro.mdx", "# Welcome\n")
    write_file(root, "history/history.md", "# History\n")
    write_translations(root / "guide", {
        "setup": {"ta": "அமைப்பு", "en": "Setup"},
        "advanced": {"ta": "மேம்பட்டது", "en": "Advanced"},
    })
    write_file(root, "guide/setup.ta.mdx", "# அமைப்பு\n")
    write_file(root, "guide/setup.en.mdx", "# Setup (en)\n")
    write_file(root, "guide/setup.mdx", "# Setup\n")
    write_file(root, "guide/faq.md", "# FAQ\n")
    write_file(root, "guide/advanced/deploy.mdx", "# Deploy\n")
    write_file(root, "zeta/notes.mdx", "# Notes\n")
    write_file(root, "alpha/readme.md", "# Readme\n")
    return root


@pytest.fixture
def content_config(contents_dir):
    """Config pointing at the sample content tree."""
    return Config(content=ContentConfig(path=str(contents_dir)))
