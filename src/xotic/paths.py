"""Environment-driven settings for the console game and matches.

Unset or unparsable values fall back to defaults; a bad value is logged
and ignored rather than aborting the program.
"""

from __future__ import annotations

import logging
import os

DEFAULT_THINK_DELAY = 1.0


def think_delay() -> float:
    """Seconds a computer player pauses before moving (XOTIC_THINK_DELAY)."""
    raw = os.getenv("XOTIC_THINK_DELAY")
    if not raw:
        return DEFAULT_THINK_DELAY
    try:
        return max(0.0, float(raw))
    except ValueError:
        logging.warning("Ignoring invalid XOTIC_THINK_DELAY=%r", raw)
        return DEFAULT_THINK_DELAY


def env_seed() -> int | None:
    raw = os.getenv("XOTIC_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logging.warning("Ignoring invalid XOTIC_SEED=%r", raw)
        return None
