"""
Unit tests for format importers and the extension dispatcher.
"""

import asyncio

import pytest

from notetranslate.converter.importer import FormatImporter, ImportResult
from notetranslate.converter.x2md.converter_pdf import TextRun, classify_pdf_line, group_runs_into_lines
from notetranslate.converter.x2md.converter_xlsx import ConverterXlsx, cell_to_text
from notetranslate.exceptions import FileIOError, ParseError, UnsupportedFormatError
from notetranslate.ir.document import Document


@pytest.fixture
def importer() -> FormatImporter:
    return FormatImporter()


class TestDispatch:
    """Extension handling."""

    def test_supported_formats(self):
        assert set(FormatImporter.supported_formats()) == {
            ".md", ".markdown", ".txt", ".html", ".htm", ".docx", ".xlsx", ".csv", ".pdf", ".json",
        }

    def test_unknown_extension(self, importer):
        with pytest.raises(UnsupportedFormatError):
            importer.import_bytes(b"x", "pptx")

    def test_missing_extension(self, importer):
        with pytest.raises(UnsupportedFormatError):
            importer.import_bytes(b"x", "")

    def test_extension_is_case_insensitive(self, importer):
        assert importer.import_bytes(b"# Hi", "MD") == ImportResult(text="# Hi", extension="md")

    def test_import_path(self, importer, tmp_path):
        path = tmp_path / "note.txt"
        path.write_text("hello", encoding="utf-8")
        assert importer.import_path(path) == ImportResult(text="hello", extension="txt")

    def test_unreadable_path(self, importer, tmp_path):
        with pytest.raises(FileIOError):
            importer.import_path(tmp_path / "missing.md")

    def test_async_import(self, importer):
        result = asyncio.run(importer.import_bytes_async(b"<p>hi</p>", "html"))
        assert result.text == "hi"


class TestText:
    """Plain text and markdown."""

    def test_identity(self, importer):
        text = "# Title\n\n- a\n- b\n"
        assert importer.import_bytes(text.encode("utf-8"), "md").text == text

    def test_bom_is_stripped(self, importer):
        assert importer.import_bytes(b"\xef\xbb\xbf# Hi", "markdown").text == "# Hi"

    def test_undecodable_bytes(self, importer):
        with pytest.raises(FileIOError):
            importer.import_bytes(b"\xff\xfe\xfa", "txt")


class TestHtml:
    def test_html_goes_through_reader(self, importer):
        result = importer.import_bytes("<h2>标题</h2><p><em>x</em></p>".encode("utf-8"), "htm")
        assert result.text == "## 标题\n\n*x*"


class TestDocx:
    """Word import through mammoth and the HTML reader."""

    def test_structure(self, importer, docx_bytes):
        text = importer.import_bytes(docx_bytes, "docx").text
        assert "# Title" in text
        assert "**bold**" in text

    def test_table_is_placeholder(self, importer, docx_bytes):
        assert "[表格]" in importer.import_bytes(docx_bytes, "docx").text

    def test_corrupt_container(self, importer):
        with pytest.raises(ParseError):
            importer.import_bytes(b"not a zip", "docx")


class TestSpreadsheet:
    """xlsx and csv import."""

    def test_default_sheet_has_no_heading(self, importer, two_sheet_xlsx_bytes):
        text = importer.import_bytes(two_sheet_xlsx_bytes, "xlsx").text
        assert "## Data" in text
        assert "## Sheet1" not in text

    def test_rows(self, importer, two_sheet_xlsx_bytes):
        text = importer.import_bytes(two_sheet_xlsx_bytes, "xlsx").text
        assert "| Name | Age |\n| --- | --- |\n| Ann | 30 |\n| Bob | 41 |\n" in text
        assert "| Key | Value |\n| --- | --- |\n| a | b |\n" in text
        assert text.index("| Name |") < text.index("## Data")

    def test_read_tables(self, two_sheet_xlsx_bytes):
        tables = ConverterXlsx().read_tables(Document.from_bytes(two_sheet_xlsx_bytes, suffix=".xlsx"))
        assert [table.sheet_name for table in tables] == ["Sheet1", "Data"]
        assert tables[0].headers == ["Name", "Age"]
        assert tables[0].rows == [["Ann", "30"], ["Bob", "41"]]

    def test_csv(self, importer):
        text = importer.import_bytes(b'a,b\n1,"x, y"\n', "csv").text
        assert text == "| a | b |\n| --- | --- |\n| 1 | x, y |\n"

    def test_corrupt_workbook(self, importer):
        with pytest.raises(ParseError):
            importer.import_bytes(b"not a workbook", "xlsx")

    @pytest.mark.parametrize("value, text", [(None, ""), (3.0, "3"), (2.5, "2.5"), ("a\nb", "a b"), (7, "7")])
    def test_cell_to_text(self, value, text):
        assert cell_to_text(value) == text


class TestPdf:
    """PDF text extraction and line heuristics."""

    def test_runs_within_tolerance_share_a_line(self):
        assert group_runs_into_lines([TextRun("Hello", 100.0), TextRun("world", 105.0)]) == ["Hello world"]

    def test_runs_beyond_tolerance_start_a_line(self):
        assert group_runs_into_lines([TextRun("a", 100.0), TextRun("b", 115.0)]) == ["a", "b"]

    def test_tolerance_is_inclusive(self):
        assert group_runs_into_lines([TextRun("a", 100.0), TextRun("b", 110.0)]) == ["a b"]

    @pytest.mark.parametrize(
        "line, markdown",
        [
            ("Introduction", "### Introduction\n\n"),
            ("Ends with period.", "Ends with period.\n\n"),
            ("lower case start", "lower case start\n\n"),
            ("A" + "b" * 60, "A" + "b" * 60 + "\n\n"),
            ("• dot item", "- dot item\n"),
            ("- dash item", "- dash item\n"),
            ("1) first", "1) first\n"),
            ("2. second", "2. second\n"),
        ],
    )
    def test_classify_line(self, line, markdown):
        assert classify_pdf_line(line) == markdown

    def test_document_layout(self, importer, pdf_bytes):
        text = importer.import_bytes(pdf_bytes, "pdf").text
        assert text.startswith("# PDF 文档内容\n\n> 共 2 页\n\n## 第 1 页\n\n")
        assert "### Introduction\n\n" in text
        assert "This is a sentence.\n\n" in text
        assert "- first item\n" in text
        assert "## 第 2 页\n\nthe second page starts lower case\n\n" in text
        assert text.count("\n---\n") == 2

    def test_corrupt_pdf(self, importer):
        with pytest.raises(ParseError):
            importer.import_bytes(b"not a pdf", "pdf")


class TestJson:
    def test_pretty_printed_in_fence(self, importer):
        result = importer.import_bytes('{"b": [1, 2], "a": "é"}'.encode("utf-8"), "json")
        assert result.text == '```json\n{\n  "b": [\n    1,\n    2\n  ],\n  "a": "é"\n}\n```'

    def test_invalid_json(self, importer):
        with pytest.raises(ParseError):
            importer.import_bytes(b"{oops", "json")
