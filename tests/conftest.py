"""
Pytest configuration and fixtures for notetranslate tests.

Binary fixtures are generated in memory with the same libraries the
package reads them with, and HTTP is served by httpx.MockTransport.
"""

from io import BytesIO

import httpx
import pytest


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, json_body=None, status_code: int = 200, exc: Exception | None = None):
        self.json_body = json_body
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))

    def async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def recording_handler():
    """Factory for RecordingHandler instances."""
    return RecordingHandler


@pytest.fixture(scope="session")
def docx_bytes() -> bytes:
    """Word document with a heading, a bold run and a table."""
    import docx

    doc = docx.Document()
    doc.add_heading("Title", level=1)
    paragraph = doc.add_paragraph("Plain ")
    paragraph.add_run("bold").bold = True
    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "A"
    table.cell(0, 1).text = "B"
    table.cell(1, 0).text = "1"
    table.cell(1, 1).text = "2"
    stream = BytesIO()
    doc.save(stream)
    return stream.getvalue()


@pytest.fixture(scope="session")
def two_sheet_xlsx_bytes() -> bytes:
    """Workbook with sheets ``Sheet1`` and ``Data``."""
    import openpyxl

    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = "Sheet1"
    sheet.append(["Name", "Age"])
    sheet.append(["Ann", 30])
    sheet.append([None, None])
    sheet.append(["Bob", 41])
    data = workbook.create_sheet("Data")
    data.append(["Key", "Value"])
    data.append(["a", "b"])
    stream = BytesIO()
    workbook.save(stream)
    return stream.getvalue()


@pytest.fixture(scope="session")
def pdf_bytes() -> bytes:
    """Two-page PDF with a heading-like line, a sentence and a bullet."""
    import fitz

    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 100), "Introduction", fontsize=12)
    page.insert_text((72, 200), "This is a sentence.", fontsize=12)
    page.insert_text((72, 300), "- first item", fontsize=12)
    second = doc.new_page()
    second.insert_text((72, 100), "the second page starts lower case", fontsize=12)
    content = doc.tobytes()
    doc.close()
    return content
