"""Runtime configuration defaults for pricing and logging."""

from __future__ import annotations

import os

TAX_RATE = 0.08
CURRENCY_SYMBOL = "$"

# The TUI owns the terminal, so log records go to a file.
DEBUG_LOG_PATH = os.environ.get("LUNCH_TRAY_DEBUG_LOG", "/tmp/lunch-tray-debug.log")
LOG_LEVEL = os.environ.get("LUNCH_TRAY_LOG_LEVEL", "INFO").upper()

# Tolerance used when checking derived totals.
TOTALS_EPSILON = 1e-9
