# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import logging



# Create logger object
global_logger = logging.getLogger("NoteTranslateLogger")
global_logger.setLevel(logging.DEBUG)
# Output to console
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
global_logger.addHandler(console_handler)
