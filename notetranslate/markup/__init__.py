# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""Canonical markdown subset: inline spans, block lines, tables and the HTML reader."""

from notetranslate.markup.block import BlockConverter, BlockLine, extract_tables
from notetranslate.markup.html2md import html_to_markdown
from notetranslate.markup.inline import InlineFormatter, InlineRun, InlineToken
from notetranslate.markup.table import (
    TableData,
    generate_markdown,
    is_separator_row,
    merge_tables,
    parse_markdown_row,
    parse_markdown_table,
)

__all__ = [
    "BlockConverter",
    "BlockLine",
    "InlineFormatter",
    "InlineRun",
    "InlineToken",
    "TableData",
    "extract_tables",
    "generate_markdown",
    "html_to_markdown",
    "is_separator_row",
    "merge_tables",
    "parse_markdown_row",
    "parse_markdown_table",
]
