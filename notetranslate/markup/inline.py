# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Inline spans of the canonical markup.

Recognized spans, by precedence at a given position: code, bold, italic,
strike, link, image. Code span contents are never re-scanned. Emphasis
contents are scanned again for code, links and images but not for further
emphasis, so ``***x***`` or bold-inside-italic come out lossy. Any opening
delimiter without a partner is kept as literal text.
"""
import html
import re
from dataclasses import dataclass, field
from typing import Literal

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

InlineKind = Literal["text", "code", "bold", "italic", "strike", "link", "image"]

ALL_KINDS: frozenset[str] = frozenset({"code", "bold", "italic", "strike", "link", "image"})
WORD_KINDS: frozenset[str] = frozenset({"code", "bold", "italic", "link"})
EMPHASIS_KINDS: frozenset[str] = frozenset({"bold", "italic", "strike"})

_LINK_RE = re.compile(r"\[([^\]\n]+)\]\(([^)\s]+)\)")
_IMAGE_RE = re.compile(r"!\[([^\]\n]*)\]\(([^)\s]+)\)")

INLINE_TAGS = frozenset({
    "strong", "b", "em", "i", "del", "s", "strike", "code", "a", "img", "br", "span", "u", "sup", "sub",
})


@dataclass
class InlineToken:
    kind: InlineKind
    text: str = ""
    url: str = ""
    children: list["InlineToken"] = field(default_factory=list)


@dataclass(frozen=True)
class InlineRun:
    """A flat, styled piece of text as a word processor sees it."""
    text: str
    bold: bool = False
    italic: bool = False
    code: bool = False
    url: str | None = None


class InlineFormatter:
    def tokenize(self, markup: str, kinds: frozenset[str] = ALL_KINDS) -> list[InlineToken]:
        tokens: list[InlineToken] = []
        buffer: list[str] = []

        def flush():
            if buffer:
                tokens.append(InlineToken("text", "".join(buffer)))
                buffer.clear()

        i = 0
        n = len(markup)
        while i < n:
            ch = markup[i]
            if ch == "`" and "code" in kinds:
                end = markup.find("`", i + 1)
                if end > i + 1:
                    flush()
                    tokens.append(InlineToken("code", markup[i + 1:end]))
                    i = end + 1
                    continue
            elif ch == "*":
                if markup.startswith("**", i) and "bold" in kinds:
                    end = markup.find("**", i + 2)
                    if end > i + 2:
                        flush()
                        tokens.append(InlineToken("bold", children=self._inner(markup[i + 2:end], kinds)))
                        i = end + 2
                        continue
                    buffer.append("**")
                    i += 2
                    continue
                if "italic" in kinds:
                    end = markup.find("*", i + 1)
                    if end > i + 1:
                        flush()
                        tokens.append(InlineToken("italic", children=self._inner(markup[i + 1:end], kinds)))
                        i = end + 1
                        continue
            elif ch == "~" and markup.startswith("~~", i) and "strike" in kinds:
                end = markup.find("~~", i + 2)
                if end > i + 2:
                    flush()
                    tokens.append(InlineToken("strike", children=self._inner(markup[i + 2:end], kinds)))
                    i = end + 2
                    continue
            elif ch == "!" and "image" in kinds:
                match = _IMAGE_RE.match(markup, i)
                if match:
                    flush()
                    tokens.append(InlineToken("image", text=match.group(1), url=match.group(2)))
                    i = match.end()
                    continue
            elif ch == "[" and "link" in kinds:
                match = _LINK_RE.match(markup, i)
                if match:
                    flush()
                    label = self.tokenize(match.group(1), kinds - {"link", "image"})
                    tokens.append(InlineToken("link", url=match.group(2), children=label))
                    i = match.end()
                    continue
            buffer.append(ch)
            i += 1
        flush()
        return tokens

    def _inner(self, markup: str, kinds: frozenset[str]) -> list[InlineToken]:
        return self.tokenize(markup, kinds - EMPHASIS_KINDS)

    # canonical -> HTML

    def to_html(self, markup: str) -> str:
        return self._render_html(self.tokenize(markup))

    def _render_html(self, tokens: list[InlineToken]) -> str:
        parts = []
        for token in tokens:
            if token.kind == "text":
                parts.append(html.escape(token.text, quote=False))
            elif token.kind == "code":
                parts.append(f"<code>{html.escape(token.text, quote=False)}</code>")
            elif token.kind == "bold":
                parts.append(f"<strong>{self._render_html(token.children)}</strong>")
            elif token.kind == "italic":
                parts.append(f"<em>{self._render_html(token.children)}</em>")
            elif token.kind == "strike":
                parts.append(f"<del>{self._render_html(token.children)}</del>")
            elif token.kind == "link":
                parts.append(f'<a href="{html.escape(token.url)}">{self._render_html(token.children)}</a>')
            elif token.kind == "image":
                parts.append(f'<img src="{html.escape(token.url)}" alt="{html.escape(token.text)}" />')
        return "".join(parts)

    # HTML -> canonical

    def to_canonical(self, fragment: str) -> str:
        soup = BeautifulSoup(fragment, "html.parser")
        return self.node_to_canonical(soup)

    def node_to_canonical(self, node) -> str:
        if isinstance(node, Comment):
            return ""
        if isinstance(node, NavigableString):
            return str(node).replace("\xa0", " ")
        if not isinstance(node, Tag):
            return ""
        name = node.name
        if name == "br":
            return "\n"
        if name == "img":
            return f"![{node.get('alt', '')}]({node.get('src', '')})"
        if name == "code":
            text = node.get_text()
            return f"`{text}`" if text else ""

        inner = "".join(self.node_to_canonical(child) for child in node.children)
        if name in ("strong", "b"):
            return wrap_span(inner, "**")
        if name in ("em", "i"):
            return wrap_span(inner, "*")
        if name in ("del", "s", "strike"):
            return wrap_span(inner, "~~")
        if name == "a":
            href = node.get("href")
            if href and inner.strip():
                return f"[{inner}]({href})"
            return inner
        return inner

    # reduced form for word processors

    def to_runs(self, markup: str) -> list[InlineRun]:
        runs: list[InlineRun] = []
        self._flatten(self.tokenize(markup, WORD_KINDS), runs, bold=False, italic=False, url=None)
        return runs

    def _flatten(self, tokens: list[InlineToken], runs: list[InlineRun], *, bold: bool, italic: bool,
                 url: str | None):
        for token in tokens:
            if token.kind == "text":
                runs.append(InlineRun(token.text, bold=bold, italic=italic, url=url))
            elif token.kind == "code":
                runs.append(InlineRun(token.text, bold=bold, italic=italic, code=True, url=url))
            elif token.kind == "bold":
                self._flatten(token.children, runs, bold=True, italic=italic, url=url)
            elif token.kind == "italic":
                self._flatten(token.children, runs, bold=bold, italic=True, url=url)
            elif token.kind == "link":
                self._flatten(token.children, runs, bold=bold, italic=italic, url=token.url)

    def strip(self, markup: str) -> str:
        """Plain text with inline markers removed."""
        return self._plain(self.tokenize(markup))

    def _plain(self, tokens: list[InlineToken]) -> str:
        parts = []
        for token in tokens:
            if token.kind in ("text", "code", "image"):
                parts.append(token.text)
            else:
                parts.append(self._plain(token.children))
        return "".join(parts)


def wrap_span(inner: str, delimiter: str) -> str:
    # Empty spans would turn into stray delimiters such as "****".
    if not inner.strip():
        return inner
    return f"{delimiter}{inner}{delimiter}"
