"""
Unit tests for markdown and table exporters.
"""

import asyncio
from io import BytesIO

import docx
import openpyxl
import pytest

from notetranslate.exceptions import FileIOError
from notetranslate.exporter.html.html2docx_exporter import HTML2DocxExporter, HTML2DocxExporterConfig
from notetranslate.exporter.md.md2docx_exporter import (
    DIVIDER_TEXT,
    MONOSPACE_FONT,
    MD2DocxExporter,
    MD2DocxExporterConfig,
)
from notetranslate.exporter.md.md2html_exporter import MD2HTMLExporter, MD2HTMLExporterConfig, MD2PrintHTMLExporter
from notetranslate.exporter.md.md2md_exporter import MD2MDExporter
from notetranslate.exporter.table.table2csv_exporter import Table2CsvExporter, Table2CsvExporterConfig
from notetranslate.exporter.table.table2xlsx_exporter import Table2XlsxExporter, Table2XlsxExporterConfig
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup.table import TableData

NOTE = """# Heading

Some **bold** and `code` and [link](http://example.com).

> quoted

- one
1. two

```
x = 1
```

---

| A | B |
| --- | --- |
| 1 |
"""


@pytest.fixture
def note() -> MarkdownDocument:
    return MarkdownDocument.from_text(NOTE, stem="note")


class TestMarkdown:
    def test_identity(self, note):
        exported = MD2MDExporter().export(note)
        assert exported.content == NOTE.encode("utf-8")
        assert exported.suffix == ".md"
        assert exported.name == "note.md"

    def test_async(self, note):
        exported = asyncio.run(MD2MDExporter().export_async(note))
        assert exported.content == note.content


class TestHtml:
    """Standalone and print HTML."""

    def test_standalone_document(self, note):
        exported = MD2HTMLExporter().export(note)
        html = exported.content.decode("utf-8")
        assert exported.suffix == ".html"
        assert html.startswith("<!DOCTYPE html>")
        assert '<meta charset="UTF-8">' in html
        assert "<title>note</title>" in html
        assert "<strong>bold</strong>" in html
        assert "<th>A</th>" in html
        assert "@page" not in html

    def test_title_is_escaped(self, note):
        html = MD2HTMLExporter(MD2HTMLExporterConfig(title="a <b> & c")).export(note).content.decode("utf-8")
        assert "<title>a &lt;b&gt; &amp; c</title>" in html

    def test_lang_attribute(self, note):
        html = MD2HTMLExporter(MD2HTMLExporterConfig(lang="en")).export(note).content.decode("utf-8")
        assert '<html lang="en">' in html

    def test_print_rules(self, note):
        html = MD2PrintHTMLExporter(MD2HTMLExporterConfig(page_margin="1in")).export(note).content.decode("utf-8")
        assert "@page { margin: 1in; }" in html

    def test_print_does_not_change_caller_config(self):
        config = MD2HTMLExporterConfig()
        MD2PrintHTMLExporter(config)
        assert config.print_mode is False


class TestDocx:
    """Word export, read back with python-docx."""

    @pytest.fixture
    def word(self, note):
        exported = MD2DocxExporter().export(note)
        assert exported.suffix == ".docx"
        return docx.Document(BytesIO(exported.content))

    def test_title_and_divider(self, word):
        assert word.paragraphs[0].style.name == "Title"
        assert word.paragraphs[0].text == "note"
        assert word.paragraphs[1].text == DIVIDER_TEXT
        assert word.core_properties.title == "note"

    def test_default_title(self):
        document = MarkdownDocument.from_text("text")
        document.stem = ""
        exported = MD2DocxExporter().export(document)
        word = docx.Document(BytesIO(exported.content))
        assert word.paragraphs[0].text == "未命名文档"

    def test_configured_title(self, note):
        exported = MD2DocxExporter(MD2DocxExporterConfig(title="Report")).export(note)
        assert docx.Document(BytesIO(exported.content)).paragraphs[0].text == "Report"

    def test_heading(self, word):
        headings = [p for p in word.paragraphs if p.style.name == "Heading 1"]
        assert [p.text for p in headings] == ["Heading"]

    def test_inline_runs(self, word):
        paragraph = next(p for p in word.paragraphs if p.text.startswith("Some "))
        assert paragraph.text == "Some bold and code and link."
        runs = {run.text: run for run in paragraph.runs}
        assert runs["bold"].bold is True
        assert runs["code"].font.name == MONOSPACE_FONT
        assert runs["link"].underline is True

    def test_quote_is_italic(self, word):
        paragraph = next(p for p in word.paragraphs if p.text == "quoted")
        assert all(run.italic for run in paragraph.runs)
        assert paragraph.paragraph_format.left_indent is not None

    def test_list_styles(self, word):
        styles = {p.text: p.style.name for p in word.paragraphs}
        assert styles["one"] == "List Bullet"
        assert styles["two"] == "List Number"

    def test_fenced_code(self, word):
        texts = [p.text for p in word.paragraphs]
        assert "x = 1" in texts
        assert "```" not in texts

    def test_rule_becomes_divider(self, word):
        texts = [p.text for p in word.paragraphs]
        assert texts.count(DIVIDER_TEXT) == 2

    def test_native_table(self, word):
        assert len(word.tables) == 1
        table = word.tables[0]
        assert [cell.text for cell in table.rows[0].cells] == ["A", "B"]
        assert [cell.text for cell in table.rows[1].cells] == ["1", ""]
        assert table.rows[0].cells[0].paragraphs[0].runs[0].bold is True

    def test_tables_as_paragraphs(self, note):
        config = MD2DocxExporterConfig(native_tables=False)
        word = docx.Document(BytesIO(MD2DocxExporter(config).export(note).content))
        assert word.tables == []


class TestHtmlDocx:
    """Word export from editor HTML."""

    HTML = (
        "<h2>Agenda</h2><p>Plain <strong>bold</strong></p>"
        "<ul><li>one</li></ul><blockquote><p>note</p></blockquote>"
    )

    @pytest.fixture
    def word(self):
        source = Document.from_bytes(self.HTML.encode("utf-8"), suffix=".html", stem="meeting")
        exported = HTML2DocxExporter().export(source)
        assert exported.suffix == ".docx"
        assert exported.stem == "meeting"
        return docx.Document(BytesIO(exported.content))

    def test_title_and_divider(self, word):
        assert word.paragraphs[0].style.name == "Title"
        assert word.paragraphs[0].text == "meeting"
        assert word.paragraphs[1].text == DIVIDER_TEXT

    def test_blocks(self, word):
        styles = {p.text: p.style.name for p in word.paragraphs}
        assert styles["Agenda"] == "Heading 2"
        assert styles["one"] == "List Bullet"
        assert styles["Plain bold"] == "Normal"
        quote = next(p for p in word.paragraphs if p.text == "note")
        assert all(run.italic for run in quote.runs)

    def test_configured_title(self):
        config = HTML2DocxExporterConfig(title="Minutes")
        exported = HTML2DocxExporter(config).export(Document.from_bytes(b"<p>x</p>", suffix=".html"))
        assert docx.Document(BytesIO(exported.content)).paragraphs[0].text == "Minutes"

    def test_undecodable(self):
        with pytest.raises(FileIOError):
            HTML2DocxExporter().export(Document.from_bytes(b"\xff\xfe\xfa", suffix=".html"))


class TestCsv:
    def test_quoting_and_padding(self):
        table = TableData(headers=["A", "B"], rows=[["1"], ['say "hi"', "x"]])
        exported = Table2CsvExporter().export(table)
        assert exported.suffix == ".csv"
        assert exported.content.decode("utf-8") == '"A","B"\n"1",""\n"say ""hi""","x"\n'

    def test_tables_are_separated(self):
        tables = [TableData(headers=["A"], rows=[["1"]]), TableData(headers=["B"])]
        assert Table2CsvExporter().to_csv(tables) == '"A"\n"1"\n\n"B"\n'

    def test_from_markdown(self, note):
        exported = Table2CsvExporter().export(note)
        assert exported.content.decode("utf-8") == '"A","B"\n"1",""\n'
        assert exported.stem == "note"

    def test_merge_tables(self):
        tables = [
            TableData(headers=["A", "B"], rows=[["1", "2"]]),
            TableData(headers=["Other"], rows=[["x"]]),
            TableData(headers=["A", "B"], rows=[["3", "4"]]),
        ]
        exporter = Table2CsvExporter(Table2CsvExporterConfig(merge_tables=True))
        assert exporter.export(tables).content.decode("utf-8") == '"A","B"\n"1","2"\n"3","4"\n'

    def test_no_tables(self):
        exported = Table2CsvExporter().export(MarkdownDocument.from_text("no tables here"))
        assert exported.content == b""


class TestXlsx:
    """Workbook export, read back with openpyxl."""

    @staticmethod
    def load(content: bytes) -> openpyxl.Workbook:
        return openpyxl.load_workbook(BytesIO(content))

    def test_one_sheet_per_table(self):
        tables = [
            TableData(headers=["Name", "Age"], rows=[["Ann", "30"], ["Bob"]], sheet_name="People"),
            TableData(headers=["K"], rows=[["v"]]),
        ]
        workbook = self.load(Table2XlsxExporter().export(tables).content)
        assert workbook.sheetnames == ["People", "Sheet2"]
        people = workbook["People"]
        assert [cell.value for cell in people[1]] == ["Name", "Age"]
        assert [cell.value for cell in people[2]] == ["Ann", "30"]
        assert people["A3"].value == "Bob"
        assert people["B3"].value in (None, "")

    def test_duplicate_sheet_names(self):
        tables = [TableData(headers=["A"], sheet_name="S"), TableData(headers=["B"], sheet_name="S")]
        workbook = self.load(Table2XlsxExporter().export(tables).content)
        assert workbook.sheetnames == ["S", "Sheet2"]

    def test_column_width(self):
        table = TableData(headers=["id", "text"], rows=[["1", "x" * 100]])
        config = Table2XlsxExporterConfig(max_column_width=30)
        sheet = self.load(Table2XlsxExporter(config).export(table).content).active
        assert sheet.column_dimensions["A"].width == 4
        assert sheet.column_dimensions["B"].width == 30

    def test_empty_workbook(self):
        exported = Table2XlsxExporter().export([])
        assert exported.suffix == ".xlsx"
        assert self.load(exported.content).sheetnames == ["Sheet1"]
