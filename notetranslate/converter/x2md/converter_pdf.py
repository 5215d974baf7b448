# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
PDF text to markdown.

Layout is not analysed: text runs are joined into lines by their vertical
position, and each line is classified with a few heuristics. Headings are
synthesized from short capitalized lines, which is a best-effort guess and
not a structural signal from the PDF.
"""
import re
import time
from dataclasses import dataclass

import fitz  # PyMuPDF

from notetranslate.converter.x2md.base import X2MarkdownConverter, X2MarkdownConverterConfig
from notetranslate.exceptions import ParseError
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument

_BULLET_RE = re.compile(r"^[-•*]\s")
_ORDERED_RE = re.compile(r"^\d+[.)]\s")
_HEADING_START_RE = re.compile(r"^[A-Z]")
_TERMINAL_PUNCTUATION_RE = re.compile(r"[.!?]$")


@dataclass(frozen=True)
class TextRun:
    """A piece of text with the vertical coordinate of its baseline."""
    text: str
    y: float


@dataclass(kw_only=True)
class ConverterPdfConfig(X2MarkdownConverterConfig):
    line_tolerance: float = 10.0  # max Y distance between runs of one line
    heading_max_length: int = 50


def group_runs_into_lines(runs: list[TextRun], tolerance: float = 10.0) -> list[str]:
    """
    Join runs into lines. A run starts a new line when its Y differs from the
    previous run's Y by more than ``tolerance``.
    """
    lines: list[str] = []
    current: list[str] = []
    last_y: float | None = None
    for run in runs:
        if last_y is not None and abs(run.y - last_y) > tolerance:
            line = " ".join(current).strip()
            if line:
                lines.append(line)
            current = []
        current.append(run.text)
        last_y = run.y
    line = " ".join(current).strip()
    if line:
        lines.append(line)
    return lines


def classify_pdf_line(line: str, heading_max_length: int = 50) -> str:
    if (len(line) < heading_max_length and _HEADING_START_RE.match(line)
            and not _TERMINAL_PUNCTUATION_RE.search(line)):
        return f"### {line}\n\n"
    if _BULLET_RE.match(line):
        bullet_text = re.sub(r'^[-•*]\s+', '', line)
        return f"- {bullet_text}\n"
    if _ORDERED_RE.match(line):
        return f"{line}\n"
    return f"{line}\n\n"


class ConverterPdf(X2MarkdownConverter):
    def __init__(self, config: ConverterPdfConfig | None = None):
        config = config or ConverterPdfConfig()
        super().__init__(config=config)
        self.line_tolerance = config.line_tolerance
        self.heading_max_length = config.heading_max_length

    def extract_runs(self, page: fitz.Page) -> list[TextRun]:
        runs = []
        page_dict = page.get_text("dict")
        for block in page_dict.get("blocks", []):
            # Skip image blocks
            if block.get("type") != 0:
                continue
            for line in block.get("lines", []):
                spans = line.get("spans", [])
                if not spans:
                    continue
                text = "".join(span.get("text", "") for span in spans)
                runs.append(TextRun(text=text, y=spans[0]["origin"][1]))
        return runs

    def read_pages(self, document: Document) -> list[list[str]]:
        """Lines of every page."""
        try:
            doc = fitz.open(stream=document.content, filetype="pdf")
        except Exception as e:
            raise ParseError(f"Failed to open PDF {document.name}: {e}") from e
        try:
            return [
                group_runs_into_lines(self.extract_runs(page), self.line_tolerance)
                for page in doc
            ]
        finally:
            doc.close()

    def convert(self, document: Document) -> MarkdownDocument:
        self.logger.info(f"Converting {document.name} to markdown")
        time1 = time.time()
        pages = self.read_pages(document)
        parts = ["# PDF 文档内容\n\n", f"> 共 {len(pages)} 页\n\n"]
        for page_number, lines in enumerate(pages, start=1):
            parts.append(f"## 第 {page_number} 页\n\n")
            for line in lines:
                parts.append(classify_pdf_line(line, self.heading_max_length))
            parts.append("\n---\n\n")
        self.logger.info(f"Converted {len(pages)} page(s), time elapsed: {time.time() - time1:.2f} seconds")
        return MarkdownDocument.from_text("".join(parts), stem=document.stem)

    def support_format(self) -> list[str]:
        return [".pdf"]
