"""
RearrangePdf - Numeric Constants

Simple numeric constants with ZERO internal imports to avoid circular dependencies.
For application-level constants (strings, names), use config.py.
"""

from typing import Final

# ============================================================================
# Size Constants
# ============================================================================

BYTES_PER_KB: Final[int] = 1024
