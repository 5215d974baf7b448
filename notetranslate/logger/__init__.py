# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from notetranslate.logger.logger import global_logger

__all__ = ["global_logger"]
