"""Runtime configuration defaults for the menu app."""

from __future__ import annotations

import os

_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in _FALSE_VALUES


# Prefix shown before every displayed price.
CURRENCY_SYMBOL = os.environ.get("CHEFS_MENU_CURRENCY", "R")

# Start the session with the three demonstration dishes.
SEED_DEMO_MENU = _env_flag("CHEFS_MENU_SEED_DEMO", True)

DEBUG_LOG_PATH = os.environ.get("CHEFS_MENU_DEBUG_LOG", "/tmp/chefs-menu-debug.log")
