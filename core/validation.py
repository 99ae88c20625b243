"""Numeric coercion helpers for engine inputs.

Every helper returns a finite value and never raises; callers pass the
documented default from config/constants.py.
"""

from __future__ import annotations

import logging
import math
from typing import Any

logger = logging.getLogger(__name__)


def safe_number(value: Any, default: float = 0.0) -> float:
    """Coerce a potentially-missing or malformed value to a finite float.

    Returns ``default`` for ``None``, booleans, non-numeric strings, NaN and
    infinities.  Never raises.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Non-numeric input %r replaced by default %r", value, default)
        return default
    if not math.isfinite(number):
        logger.debug("Non-finite input %r replaced by default %r", value, default)
        return default
    return number


def non_negative(value: Any, default: float = 0.0) -> float:
    """Finite float >= 0; negative inputs fall back to ``default``."""
    number = safe_number(value, default)
    return number if number >= 0 else default


def positive(value: Any, default: float) -> float:
    number = safe_number(value, default)
    return number if number > 0 else default


def count(value: Any, default: int, minimum: int = 0) -> int:
    """Whole count >= ``minimum``; fractional inputs are truncated."""
    number = safe_number(value, float(default))
    whole = int(number)
    return whole if whole >= minimum else default


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def normalise_fraction(value: Any) -> float | None:
    """Read a rate given either as a fraction (0.85) or a percent (85).

    Values above 1 are treated as percentages.  The result is clamped to
    [0, 1].  ``None`` and unusable inputs return ``None`` so the caller can
    fall back to its own default.
    """
    if value is None:
        return None
    number = safe_number(value, float("nan"))
    if math.isnan(number):
        return None
    if number > 1.0:
        number = number / 100.0
    return clamp(number, 0.0, 1.0)
