# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from typing import Self

from notetranslate.ir.document import Document


class MarkdownDocument(Document):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.suffix = ".md"

    @classmethod
    def from_text(cls, text: str, stem: str | None = None) -> Self:
        return cls(content=text.encode("utf-8"), suffix=".md", stem=stem)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")
