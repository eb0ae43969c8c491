# tests/test_renderer.py
"""Tests for Markdown/MDX rendering."""

import pytest

from thottam.content.errors import ContentRenderError
from thottam.content.renderer import (
    MarkdownRenderer,
    find_components,
    split_frontmatter,
    strip_esm,
)
from thottam.models.content import HtmlContent, MdxContent, SourceFormat


MDX_PAGE = """---
title: அமைப்பு
tags:
  - guide
---
import { Callout } from "../components"
export const meta = { draft: false }

# Setup

<Callout type="info">Pages live under `contents/`.</Callout>

```js
import fs from "fs"
const el = <Example />
```
"""


def test_split_frontmatter():
    frontmatter, body = split_frontmatter("---\ntitle: Hello\n---\n# Body\n")

    assert frontmatter == {"title": "Hello"}
    assert body == "# Body\n"


def test_split_frontmatter_without_block():
    text = "# Title\n\n---\n\nAfter a rule\n"

    assert split_frontmatter(text) == ({}, text)


def test_split_frontmatter_empty_block():
    assert split_frontmatter("---\n---\nBody") == ({}, "Body")


def test_split_frontmatter_rejects_non_mapping():
    with pytest.raises(ContentRenderError):
        split_frontmatter("---\n- a\n- b\n---\nBody")


def test_split_frontmatter_rejects_invalid_yaml():
    with pytest.raises(ContentRenderError):
        split_frontmatter("---\ntitle: [oops\n---\nBody")


def test_strip_esm_keeps_code_fences():
    body = strip_esm(MDX_PAGE.split("---\n", 2)[2])

    assert 'import { Callout }' not in body
    assert "export const meta" not in body
    assert 'import fs from "fs"' in body


def test_find_components_ignores_code_fences():
    assert find_components(MDX_PAGE) == ["Callout"]


def test_find_components_dotted_and_self_closing():
    assert find_components("<Tabs.Item label='a'>x</Tabs.Item>\n<Chart/>\n<div>no</div>") == [
        "Chart", "Tabs.Item",
    ]


def test_render_mdx():
    content = MarkdownRenderer().render(MDX_PAGE, SourceFormat.MDX, "guide/setup.mdx")

    assert isinstance(content, MdxContent)
    assert content.is_mdx is True
    assert content.frontmatter == {"title": "அமைப்பு", "tags": ["guide"]}
    assert content.components == ["Callout"]
    assert "Setup</h1>" in content.html
    assert "<Callout" in content.html
    assert "export const meta" not in content.html


def test_render_markdown_strips_frontmatter():
    content = MarkdownRenderer().render(
        "---\ntitle: FAQ\n---\n# FAQ\n", SourceFormat.MD, "guide/faq.md"
    )

    assert isinstance(content, HtmlContent)
    assert content.frontmatter == {"title": "FAQ"}
    assert "title:" not in content.html


def test_gfm_extensions():
    html = MarkdownRenderer().to_html(
        "| a | b |\n| - | - |\n| 1 | 2 |\n\n"
        "~~gone~~ and H~2~O\n\n"
        "See https://example.com\n\n"
        "- [x] done\n- [ ] todo\n"
    )

    assert "<table>" in html
    assert "<del>gone</del>" in html
    assert "<sub>" not in html
    assert 'href="https://example.com"' in html
    assert "task-list-item" in html


def test_renders_are_independent():
    renderer = MarkdownRenderer()

    first = renderer.to_html("[^1]\n\n[^1]: note")
    second = renderer.to_html("plain")

    assert "footnote" in first
    assert "footnote" not in second
