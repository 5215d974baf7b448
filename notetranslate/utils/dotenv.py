# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

ENV_FILE_VARIABLE = "NOTETRANSLATE_ENV_FILE"


def _strip_quotes(val: str) -> tuple[str, bool]:
    val = val.strip()
    if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
        return val[1:-1], True
    return val, False


def parse_env_lines(lines: Iterable[str]) -> dict[str, str]:
    """
    KEY=VALUE pairs from dotenv lines. Supports comments, ``export`` prefixes,
    quoted values and trailing `` #`` comments on unquoted values.
    """
    pairs: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        if line.lower().startswith('export '):
            line = line[7:].lstrip()
        if '=' not in line:
            continue
        key, value = line.split('=', 1)
        key = key.strip()
        if not key:
            continue
        value, quoted = _strip_quotes(value)
        if not quoted and ' #' in value:
            value = value.split(' #', 1)[0].rstrip()
        pairs[key] = value
    return pairs


def load_env_file(path: str | Path | None = None, *, override: bool = False) -> tuple[str | None, list[str]]:
    """
    Load translation credentials and settings from a .env file.

    Resolution order when path is None:
    1) $NOTETRANSLATE_ENV_FILE if set
    2) ./.env in the current working directory

    Variables already present in the environment are kept unless ``override``.
    Returns (path_used, loaded_keys); path_used is None when no file was read.
    """
    if path is not None:
        candidate = Path(path)
    else:
        env_hint = os.getenv(ENV_FILE_VARIABLE)
        candidate = Path(env_hint) if env_hint else Path.cwd() / '.env'

    if not candidate.is_file():
        return None, []
    try:
        content = candidate.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError):
        return None, []

    keys: list[str] = []
    for key, value in parse_env_lines(content.splitlines()).items():
        if override or key not in os.environ:
            os.environ[key] = value
            keys.append(key)
    return str(candidate), keys
