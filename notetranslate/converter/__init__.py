# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from notetranslate.converter.importer import FormatImporter, FormatImporterConfig, ImportResult

__all__ = ["FormatImporter", "FormatImporterConfig", "ImportResult"]
