# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Canonical markdown to a Word document, one paragraph per non-blank line.

The line classification is the one used for HTML rendering, so a line is a
heading, quote or list item in Word exactly when it is one in HTML. Inline
markup is reduced to bold, italic, code and link runs.
"""
from dataclasses import dataclass
from io import BytesIO

import docx
from docx.document import Document as DocumentObject
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor
from docx.text.paragraph import Paragraph

from notetranslate.exporter.md.base import MDExporter, MDExporterConfig
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup.block import BlockConverter
from notetranslate.markup.inline import InlineFormatter, InlineRun
from notetranslate.markup.table import is_separator_row, pad_row, parse_markdown_row

DIVIDER_TEXT = "__________________________________"
DIVIDER_COLOR = RGBColor(0xCC, 0xCC, 0xCC)
LINK_COLOR = RGBColor(0x05, 0x63, 0xC1)
MONOSPACE_FONT = "Courier New"


@dataclass(kw_only=True)
class MD2DocxExporterConfig(MDExporterConfig):
    default_title: str = "未命名文档"
    author: str = "notetranslate"
    # Pipe tables become native Word tables instead of one paragraph per row.
    native_tables: bool = True


class MD2DocxExporter(MDExporter):
    def __init__(self, config: MD2DocxExporterConfig | None = None):
        config = config or MD2DocxExporterConfig()
        super().__init__(config=config)
        self.default_title = config.default_title
        self.author = config.author
        self.native_tables = config.native_tables
        self.block_converter = BlockConverter()
        self.inline = InlineFormatter()

    def resolve_title(self, document: MarkdownDocument) -> str:
        return self.title or document.stem or self.default_title

    def build(self, canonical: str, title: str) -> DocumentObject:
        doc = docx.Document()
        doc.core_properties.title = title
        doc.core_properties.author = self.author

        heading = doc.add_heading(title, level=0)
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
        divider = doc.add_paragraph()
        divider.alignment = WD_ALIGN_PARAGRAPH.CENTER
        divider.add_run(DIVIDER_TEXT).font.color.rgb = DIVIDER_COLOR

        lines = canonical.replace("\r\n", "\n").split("\n")
        blocks = [self.block_converter.classify(line) for line in lines]
        in_fence = False
        i = 0
        while i < len(lines):
            block = blocks[i]
            if block.kind == "fence":
                # Fence markers are dropped, the lines between them kept as code.
                in_fence = not in_fence
                i += 1
                continue
            if in_fence:
                self._add_code(doc, lines[i])
                i += 1
                continue
            if block.kind == "blank":
                pass
            elif block.kind == "heading":
                doc.add_heading(self.inline.strip(block.text), level=block.level)
            elif block.kind == "quote":
                paragraph = doc.add_paragraph()
                paragraph.paragraph_format.left_indent = Inches(0.5)
                self._add_runs(paragraph, self.inline.to_runs(block.text), italic=True)
            elif block.kind == "bullet":
                self._add_runs(doc.add_paragraph(style="List Bullet"), self.inline.to_runs(block.text))
            elif block.kind == "ordered":
                self._add_runs(doc.add_paragraph(style="List Number"), self.inline.to_runs(block.text))
            elif block.kind == "code":
                self._add_code(doc, block.text)
            elif block.kind == "rule":
                doc.add_paragraph().add_run(DIVIDER_TEXT).font.color.rgb = DIVIDER_COLOR
            elif (block.kind == "table" and self.native_tables and i + 1 < len(lines)
                  and is_separator_row(lines[i + 1])):
                end = i + 2
                while end < len(lines) and blocks[end].kind == "table":
                    end += 1
                self._add_table(doc, lines[i], lines[i + 2:end])
                i = end
                continue
            else:
                self._add_runs(doc.add_paragraph(), self.inline.to_runs(block.text))
            i += 1
        return doc

    def _add_runs(self, paragraph: Paragraph, runs: list[InlineRun], italic: bool = False):
        for inline_run in runs:
            run = paragraph.add_run(inline_run.text)
            run.bold = inline_run.bold or None
            run.italic = (inline_run.italic or italic) or None
            if inline_run.code:
                run.font.name = MONOSPACE_FONT
                run.font.size = Pt(10)
            if inline_run.url:
                run.font.color.rgb = LINK_COLOR
                run.underline = True

    @staticmethod
    def _add_code(doc: DocumentObject, text: str):
        paragraph = doc.add_paragraph()
        paragraph.paragraph_format.left_indent = Inches(0.5)
        run = paragraph.add_run(text)
        run.font.name = MONOSPACE_FONT
        run.font.size = Pt(10)

    def _add_table(self, doc: DocumentObject, header_line: str, body_lines: list[str]):
        headers = parse_markdown_row(header_line)
        rows = [pad_row(parse_markdown_row(line), len(headers)) for line in body_lines]
        table = doc.add_table(rows=len(rows) + 1, cols=len(headers))
        table.style = "Table Grid"
        for row_index, cells in enumerate([headers] + rows):
            for col_index, cell_text in enumerate(cells):
                paragraph = table.cell(row_index, col_index).paragraphs[0]
                self._add_runs(paragraph, self.inline.to_runs(cell_text))
                if row_index == 0:
                    for run in paragraph.runs:
                        run.bold = True

    def export(self, document: MarkdownDocument) -> Document:
        title = self.resolve_title(document)
        self.logger.info(f"Exporting {document.name} to docx")
        doc = self.build(document.text, title)
        doc_output_stream = BytesIO()
        doc.save(doc_output_stream)
        return Document.from_bytes(content=doc_output_stream.getvalue(), suffix=".docx", stem=document.stem)
