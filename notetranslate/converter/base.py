# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from logging import Logger

from notetranslate.ir.document import Document
from notetranslate.logger import global_logger


@dataclass(kw_only=True)
class ConverterConfig:
    logger: Logger = global_logger


class Converter(ABC):
    def __init__(self, config: ConverterConfig | None = None):
        self.config = config or ConverterConfig()
        self.logger = self.config.logger

    @abstractmethod
    def convert(self, document: Document) -> Document:
        ...

    async def convert_async(self, document: Document) -> Document:
        return await asyncio.to_thread(self.convert, document)
