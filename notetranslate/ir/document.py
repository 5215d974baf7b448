# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from copy import copy
from pathlib import Path
from typing import Self

from notetranslate.exceptions import FileIOError


class Document:
    """
    In-memory file: raw bytes plus the name parts needed to save it again.
    """

    def __init__(self, content: bytes, suffix: str = "", stem: str | None = None):
        self.content = content
        self.suffix = normalize_suffix(suffix)
        self.stem = stem or "document"

    @classmethod
    def from_bytes(cls, content: bytes, suffix: str, stem: str | None = None) -> Self:
        return cls(content=content, suffix=suffix, stem=stem)

    @classmethod
    def from_path(cls, path: Path | str) -> Self:
        path = Path(path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise FileIOError(f"Unable to read {path}: {e}") from e
        return cls(content=content, suffix=path.suffix, stem=path.stem)

    @property
    def name(self) -> str:
        return f"{self.stem}{self.suffix}"

    @property
    def extension(self) -> str:
        """Suffix without the leading dot, lower case."""
        return self.suffix.lstrip(".")

    def copy(self) -> Self:
        return copy(self)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, size={len(self.content)})"


def normalize_suffix(suffix: str) -> str:
    suffix = suffix.strip().lower()
    if suffix and not suffix.startswith("."):
        suffix = "." + suffix
    return suffix
