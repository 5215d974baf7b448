# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import json

from notetranslate.converter.x2md.base import X2MarkdownConverter
from notetranslate.exceptions import ParseError
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument


class ConverterJson(X2MarkdownConverter):
    """JSON is shown as a pretty printed code block, not read as prose."""

    def convert(self, document: Document) -> MarkdownDocument:
        text = self.decode(document)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON in {document.name}: {e}") from e
        pretty = json.dumps(data, indent=2, ensure_ascii=False)
        return MarkdownDocument.from_text(f"```json\n{pretty}\n```", stem=document.stem)

    def support_format(self) -> list[str]:
        return [".json"]
