# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .formatting import (
    format_compact,
    format_currency,
    format_percentage,
    format_shamsi_date,
    to_persian_digits,
)
from .safe_math import (
    normalize_digits,
    parse_size_band,
    safe_divide,
    safe_percentage,
    safe_power,
    size_band_midpoint,
)

__all__ = [
    "format_compact",
    "format_currency",
    "format_percentage",
    "format_shamsi_date",
    "to_persian_digits",
    "normalize_digits",
    "parse_size_band",
    "safe_divide",
    "safe_percentage",
    "safe_power",
    "size_band_midpoint",
]
