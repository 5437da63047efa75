# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Numeric guards with documented fallbacks.

Every calculator routes its divisions, compounding and size-band parsing
through these helpers so that zero, extreme or malformed inputs degrade to a
stated value instead of raising or producing NaN.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

# Persian (U+06F0..) and Arabic-Indic (U+0660..) digits to ASCII
_DIGIT_TRANSLATION = str.maketrans(
    "۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩",
    "01234567890123456789",
)

_SIZE_BAND_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*[-–—~]\s*(\d+(?:\.\d+)?)")


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Divide, returning ``default`` when the denominator is zero or not finite.

    Args:
        numerator: Dividend
        denominator: Divisor
        default: Value returned instead of raising (0.0)

    Returns:
        ``numerator / denominator`` or ``default``
    """
    if denominator == 0 or not math.isfinite(denominator):
        return default
    return numerator / denominator


def safe_percentage(part: float, whole: float, default: float = 0.0) -> float:
    """``part / whole * 100``, or ``default`` when ``whole`` is zero."""
    if whole == 0 or not math.isfinite(whole):
        return default
    return part / whole * 100


def safe_power(base: float, exponent: float) -> float:
    """
    ``base ** exponent`` for growth compounding.

    A non-positive base (a loss of 100% or more) yields 0.0 instead of a
    complex number; a result too large for a float saturates at ``math.inf``.
    """
    if base <= 0:
        return 0.0
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def normalize_digits(text: str) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits."""
    return text.translate(_DIGIT_TRANSLATION)


def parse_size_band(label: str) -> Optional[Tuple[float, float]]:
    """
    Extract ``(low, high)`` from a free-text size band such as ``"80-100"``.

    Persian digits and en/em dashes are accepted. Returns ``None`` when no
    ``low-high`` pair can be found; callers skip such bands.

    Example:
        ```python
        parse_size_band("۸۰-۱۰۰ متر")  # (80.0, 100.0)
        parse_size_band("large")  # None
        ```
    """
    if not isinstance(label, str):
        return None
    match = _SIZE_BAND_PATTERN.search(normalize_digits(label))
    if match is None:
        return None
    return float(match.group(1)), float(match.group(2))


def size_band_midpoint(label: str) -> Optional[float]:
    """Midpoint of a size band, or ``None`` when it cannot be parsed."""
    band = parse_size_band(label)
    if band is None:
        return None
    low, high = band
    return (low + high) / 2
