# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import sys
from pathlib import Path


def resource_path(relative_path) -> Path:
    """ Get the absolute path of a packaged resource, in development and in a PyInstaller bundle """
    try:
        base_path = Path(sys._MEIPASS) / "notetranslate"
    except AttributeError:
        base_path = Path(__file__).resolve().parent.parent
    return base_path / relative_path
