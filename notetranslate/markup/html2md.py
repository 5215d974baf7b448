# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
HTML to canonical markup.

Handles the subset produced by note editors and by mammoth: headings,
emphasis, code and pre, paragraphs, line breaks, links, images, flat lists,
blockquotes and rules. Tables are not reconstructed; each one becomes the
literal placeholder ``[表格]``. Unknown tags contribute their text only.
"""
import re

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag

from notetranslate.markup.inline import INLINE_TAGS, InlineFormatter

TABLE_PLACEHOLDER = "[表格]"

_SKIPPED_TAGS = frozenset({"head", "script", "style", "title", "meta", "link"})
_HEADINGS = {f"h{level}": level for level in range(1, 7)}


class HtmlToMarkdown:
    def __init__(self, inline: InlineFormatter | None = None):
        self.inline = inline or InlineFormatter()

    def convert(self, html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")
        markdown = self.render_children(soup)
        markdown = re.sub(r"[ \t]+\n", "\n", markdown)
        markdown = re.sub(r"\n{3,}", "\n\n", markdown)
        return markdown.strip()

    def render_children(self, node: Tag) -> str:
        return "".join(self.render(child) for child in node.children)

    def render(self, node) -> str:
        if isinstance(node, (Comment, Doctype)):
            return ""
        if isinstance(node, NavigableString):
            text = str(node)
            # Indentation between tags, not content.
            if not text.strip() and "\n" in text:
                return ""
            return text.replace("\xa0", " ")
        if not isinstance(node, Tag):
            return ""

        name = node.name
        if name in _SKIPPED_TAGS:
            return ""
        if name in _HEADINGS:
            return f"\n{'#' * _HEADINGS[name]} {self._inline_text(node)}\n\n"
        if name == "p":
            return f"{self.render_children(node).strip()}\n\n"
        if name == "pre":
            code = node.get_text().strip("\n")
            return f"```\n{code}\n```\n\n"
        if name in ("ul", "ol"):
            return self._list(node, ordered=name == "ol")
        if name == "blockquote":
            inner = self.render_children(node).strip()
            return "\n".join(f"> {line}" if line.strip() else ">" for line in inner.split("\n")) + "\n\n"
        if name == "hr":
            return "\n---\n"
        if name == "table":
            return f"\n{TABLE_PLACEHOLDER}\n"
        if name in INLINE_TAGS:
            return self.inline.node_to_canonical(node)
        return self.render_children(node)

    def _inline_text(self, node: Tag) -> str:
        return " ".join(self.render_children(node).split())

    def _list(self, node: Tag, ordered: bool) -> str:
        lines = []
        index = _start_index(node) if ordered else 1
        for item in node.find_all("li", recursive=False):
            text = re.sub(r"\n+", "\n", self.render_children(item).strip())
            marker = f"{index}." if ordered else "-"
            lines.append(f"{marker} {text}")
            index += 1
        return "\n" + "\n".join(lines) + "\n\n"


def _start_index(node: Tag) -> int:
    try:
        return int(node.get("start", 1))
    except (TypeError, ValueError):
        return 1


def html_to_markdown(html: str) -> str:
    return HtmlToMarkdown().convert(html)
