# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0

from abc import abstractmethod
from dataclasses import dataclass

from notetranslate.converter.base import Converter, ConverterConfig
from notetranslate.exceptions import FileIOError
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument


@dataclass(kw_only=True)
class X2MarkdownConverterConfig(ConverterConfig):
    encoding: str = "utf-8"


class X2MarkdownConverter(Converter):
    """
    Responsible for converting files of other formats to markdown
    """

    def __init__(self, config: X2MarkdownConverterConfig | None = None):
        super().__init__(config=config or X2MarkdownConverterConfig())
        self.encoding = self.config.encoding

    @abstractmethod
    def convert(self, document: Document) -> MarkdownDocument:
        ...

    @abstractmethod
    def support_format(self) -> list[str]:
        ...

    def decode(self, document: Document) -> str:
        try:
            text = document.content.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise FileIOError(f"Unable to decode {document.name} as {self.encoding}: {e}") from e
        return text.lstrip("\ufeff")
