#!/usr/bin/env python3
"""
RearrangePdf - Configuration Module

This module contains all configuration constants used by the application.
"""

import logging
from typing import Final

# ============================================================================
# Editor Constants
# ============================================================================

# Number of delete operations that can be undone
MAX_DELETION_HISTORY: Final[int] = 10

# Output naming: {base}_edited_{YYYYMMDD}.{ext}
EDITED_SUFFIX: Final[str] = "_edited_"
DEFAULT_OUTPUT_EXTENSION: Final[str] = "pdf"
OUTPUT_DATE_FORMAT: Final[str] = "%Y%m%d"


# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL: int = logging.INFO
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME: Final[str] = "RearrangePdf"
