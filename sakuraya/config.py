"""Configuration for the SakuRaya planner core.

This module centralizes the fixed note series, display constants and the
environment variable overrides used by the command-line scripts.
"""

from __future__ import annotations

import logging
import os
from decimal import ROUND_HALF_UP
from typing import Optional, Tuple, Union

# Note series of the issuing currency, largest first. The smallest note
# must stay 1 so every whole amount is representable.
DENOMINATIONS: Tuple[int, ...] = (100, 50, 20, 10, 5, 1)

CURRENCY_PREFIX = "RM"

# Half away from zero, same as Math.round for non-negative amounts.
ROUNDING = ROUND_HALF_UP

RECIPIENT_CATEGORIES: Tuple[str, ...] = ("Family", "Relatives", "Friends", "Others")
DEFAULT_RECIPIENT_CATEGORY = "Family"
FALLBACK_RECIPIENT_CATEGORY = "Others"

MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

LOG_LEVEL_ENV = "SAKURAYA_LOG_LEVEL"
LOG_LEVEL = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Configure root logging for scripts (library modules never call this).

    ``level`` falls back to ``SAKURAYA_LOG_LEVEL`` as set when called, then
    to ``WARNING``.  Unknown level names raise ``ValueError``.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, LOG_LEVEL)
    if isinstance(level, str):
        name = level.strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
