# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from logging import Logger
from typing import Generic, TypeVar

from notetranslate.ir.document import Document
from notetranslate.logger import global_logger

T = TypeVar("T")


@dataclass(kw_only=True)
class ExporterConfig:
    logger: Logger = global_logger


class Exporter(ABC, Generic[T]):
    """
    Turns an in-memory value into a Document whose suffix is the suggested
    file extension. Persisting the bytes is up to the caller.
    """

    def __init__(self, config: ExporterConfig | None = None):
        self.config = config or ExporterConfig()
        self.logger = self.config.logger

    @abstractmethod
    def export(self, document: T) -> Document:
        ...

    async def export_async(self, document: T) -> Document:
        return await asyncio.to_thread(self.export, document)
