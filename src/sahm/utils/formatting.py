# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Display formatting: Persian digits, Toman amounts and Shamsi dates.

Pure presentation helpers. Nothing in the calculators depends on them.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

import jdatetime

_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


def to_persian_digits(value: Union[int, float, str]) -> str:
    """Render ``value`` as text with every ASCII digit replaced by its Persian form."""
    return str(value).translate(_PERSIAN_DIGITS)


def format_currency(amount: float, persian: bool = True) -> str:
    """
    Format a Toman amount with thousands separators.

    Amounts are rounded to the nearest Toman.

    Example:
        ```python
        format_currency(1530000000)  # "۱,۵۳۰,۰۰۰,۰۰۰"
        format_currency(-2500, persian=False)  # "-2,500"
        ```
    """
    text = f"{round(amount):,}"
    return to_persian_digits(text) if persian else text


def format_percentage(value: float, decimals: int = 1, persian: bool = True) -> str:
    """Format a percentage figure (already in percent units) with a trailing ٪ or %."""
    text = f"{value:.{decimals}f}"
    return f"{to_persian_digits(text)}٪" if persian else f"{text}%"


def format_compact(amount: float, persian: bool = True) -> str:
    """
    Short form used on dashboard cards: billions or millions of Toman.

    Example:
        ```python
        format_compact(12_400_000_000)  # "۱۲ میلیارد"
        format_compact(340_000_000, persian=False)  # "340 million"
        ```
    """
    if abs(amount) >= 1_000_000_000:
        number, unit, unit_en = amount / 1_000_000_000, "میلیارد", "billion"
    elif abs(amount) >= 1_000_000:
        number, unit, unit_en = amount / 1_000_000, "میلیون", "million"
    else:
        return format_currency(amount, persian=persian)
    text = f"{round(number):,}"
    if persian:
        return f"{to_persian_digits(text)} {unit}"
    return f"{text} {unit_en}"


def format_shamsi_date(value: Optional[date] = None, persian: bool = True) -> str:
    """
    Format a Gregorian date as a Shamsi (Jalali) date, e.g. ``"۲۷ مهر ۱۴۰۵"``.

    Args:
        value: Date to convert; today when omitted
        persian: Persian digits and month name, otherwise ``YYYY/MM/DD``
    """
    gregorian = value or date.today()
    shamsi = jdatetime.date.fromgregorian(date=gregorian)
    if not persian:
        return f"{shamsi.year:04d}/{shamsi.month:02d}/{shamsi.day:02d}"
    month_name = jdatetime.date.j_months_fa[shamsi.month - 1]
    return to_persian_digits(f"{shamsi.day} {month_name} {shamsi.year}")
