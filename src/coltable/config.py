# src/coltable/config.py

from __future__ import annotations

from typing import Optional

# Colour toggle: None = detect from the output stream, True/False forces it
USE_COLOR: Optional[bool] = None

# Setting this environment variable (to anything) disables colour detection
NO_COLOR_ENV = "NO_COLOR"

# Rendering
COLUMN_SEPARATOR = "  "
EMPTY_PLACEHOLDER = "<empty>"
DOUBLE_DECIMALS = 6  # same as printf("%lf")

# Integer column ranges
INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1
NUMERIC_COLOR_MAX = 2**64 - 1
