"""
Configuration for the projector package.
"""

from typing import Final

# --- Wire Shape ---
OK_KEY: Final[str] = "ok"
VALUE_KEY: Final[str] = "value"
ERROR_KEY: Final[str] = "error"

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "PROJECTOR_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "PROJECTOR_BEARTYPE_ALL"

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "ERROR_KEY",
    "OK_KEY",
    "VALUE_KEY",
]
