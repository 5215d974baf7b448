# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Line-oriented block conversion of the canonical markup.

Each line is classified on its own, in this order: heading, blockquote,
unordered item, ordered item, code line, horizontal rule, table row,
paragraph. Lists are flat: consecutive items of one family form one list.
"""
import html
import re
from dataclasses import dataclass
from typing import Literal

from notetranslate.markup.inline import InlineFormatter
from notetranslate.markup.table import TableData, is_separator_row, pad_row, parse_markdown_row

BlockKind = Literal["blank", "heading", "quote", "bullet", "ordered", "fence", "code", "rule", "table", "paragraph"]

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_QUOTE_RE = re.compile(r"^>(?:\s(.*))?$")
_BULLET_RE = re.compile(r"^[-*+]\s+(.*)$")
_ORDERED_RE = re.compile(r"^(\d+)[.)]\s+(.*)$")
_FENCE_RE = re.compile(r"^\s*```\s*([\w+#.-]*)\s*$")
_INDENT_RE = re.compile(r"^(?: {4}|\t)(.*)$")
_RULE_RE = re.compile(r"^[-*_]{3,}$")


@dataclass(frozen=True)
class BlockLine:
    kind: BlockKind
    text: str
    level: int = 0
    info: str = ""


class BlockConverter:
    def __init__(self, inline: InlineFormatter | None = None):
        self.inline = inline or InlineFormatter()

    def classify(self, line: str) -> BlockLine:
        if not line.strip():
            return BlockLine("blank", "")
        match = _HEADING_RE.match(line)
        if match:
            return BlockLine("heading", match.group(2).strip(), level=len(match.group(1)))
        match = _QUOTE_RE.match(line)
        if match:
            return BlockLine("quote", match.group(1) or "")
        match = _BULLET_RE.match(line)
        if match:
            return BlockLine("bullet", match.group(1))
        match = _ORDERED_RE.match(line)
        if match:
            return BlockLine("ordered", match.group(2), level=int(match.group(1)))
        match = _FENCE_RE.match(line)
        if match:
            return BlockLine("fence", "", info=match.group(1))
        match = _INDENT_RE.match(line)
        if match:
            return BlockLine("code", match.group(1))
        if _RULE_RE.match(line.strip()):
            return BlockLine("rule", "")
        if "|" in line:
            return BlockLine("table", line.strip())
        return BlockLine("paragraph", line.strip())

    def to_html(self, canonical: str) -> str:
        lines = canonical.replace("\r\n", "\n").split("\n")
        blocks = [self.classify(line) for line in lines]
        out: list[str] = []
        i = 0
        n = len(lines)
        while i < n:
            block = blocks[i]
            kind = block.kind
            if kind == "blank":
                i += 1
            elif kind == "fence":
                # An unclosed fence runs to the end of the document.
                j = i + 1
                body = []
                while j < n and blocks[j].kind != "fence":
                    body.append(lines[j])
                    j += 1
                out.append(self._code_html(body, block.info))
                i = j + 1
            elif kind == "heading":
                out.append(f"<h{block.level}>{self.inline.to_html(block.text)}</h{block.level}>")
                i += 1
            elif kind == "rule":
                out.append("<hr />")
                i += 1
            elif kind == "code":
                j = self._run_end(blocks, i, "code")
                out.append(self._code_html([b.text for b in blocks[i:j]], ""))
                i = j
            elif kind in ("bullet", "ordered"):
                j = self._run_end(blocks, i, kind)
                tag = "ul" if kind == "bullet" else "ol"
                items = "".join(f"<li>{self.inline.to_html(b.text)}</li>" for b in blocks[i:j])
                out.append(f"<{tag}>{items}</{tag}>")
                i = j
            elif kind == "quote":
                j = self._run_end(blocks, i, "quote")
                body = "<br />".join(self.inline.to_html(b.text) for b in blocks[i:j])
                out.append(f"<blockquote><p>{body}</p></blockquote>")
                i = j
            elif kind == "table" and i + 1 < n and blocks[i + 1].kind == "table" and is_separator_row(lines[i + 1]):
                j = self._run_end(blocks, i + 2, "table")
                headers = parse_markdown_row(lines[i])
                rows = [parse_markdown_row(line) for line in lines[i + 2:j]]
                out.append(self._table_html(TableData(headers=headers, rows=rows)))
                i = j
            else:
                # Paragraph lines, and pipe lines that never got a separator row.
                j = i + 1
                while j < n and (blocks[j].kind == "paragraph" or (blocks[j].kind == "table" and not self._starts_table(blocks, lines, j))):
                    j += 1
                body = "<br />".join(self.inline.to_html(b.text) for b in blocks[i:j])
                out.append(f"<p>{body}</p>")
                i = j
        return "\n".join(out)

    @staticmethod
    def _run_end(blocks: list[BlockLine], start: int, kind: BlockKind) -> int:
        j = start
        while j < len(blocks) and blocks[j].kind == kind:
            j += 1
        return j

    @staticmethod
    def _starts_table(blocks: list[BlockLine], lines: list[str], i: int) -> bool:
        return i + 1 < len(lines) and blocks[i + 1].kind == "table" and is_separator_row(lines[i + 1])

    @staticmethod
    def _code_html(lines: list[str], info: str) -> str:
        attr = f' class="language-{html.escape(info)}"' if info else ""
        return f"<pre><code{attr}>{html.escape(chr(10).join(lines), quote=False)}</code></pre>"

    def _table_html(self, table: TableData) -> str:
        head = "".join(f"<th>{self.inline.to_html(cell)}</th>" for cell in table.headers)
        body = "".join(
            "<tr>" + "".join(f"<td>{self.inline.to_html(cell)}</td>" for cell in pad_row(row, table.width)) + "</tr>"
            for row in table.rows
        )
        return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"


def extract_tables(canonical: str) -> list[TableData]:
    """Every pipe table in a canonical document, skipping fenced code."""
    converter = BlockConverter()
    lines = canonical.replace("\r\n", "\n").split("\n")
    blocks = [converter.classify(line) for line in lines]
    tables = []
    in_fence = False
    i = 0
    while i < len(lines):
        kind = blocks[i].kind
        if kind == "fence":
            in_fence = not in_fence
            i += 1
            continue
        if not in_fence and kind == "table" and BlockConverter._starts_table(blocks, lines, i):
            j = BlockConverter._run_end(blocks, i + 2, "table")
            headers = parse_markdown_row(lines[i])
            rows = [pad_row(parse_markdown_row(line), len(headers)) for line in lines[i + 2:j]]
            tables.append(TableData(headers=headers, rows=rows))
            i = j
            continue
        i += 1
    return tables
