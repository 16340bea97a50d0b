#!/usr/bin/env python3
"""
Utility functions for the Energy Usage Tracker
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Union

from config import CURRENCY_SYMBOL, METER_TYPES

DATE_FORMATS = ('%Y-%m-%d', '%d/%m/%Y', '%m/%d/%Y', '%d-%m-%Y')


def parse_reading_date(raw: Union[str, date, datetime]) -> date:
    """
    Parse a reading date from user or file input.

    Accepts date/datetime objects and the common string formats
    (ISO first, then day-first and month-first variants).

    Args:
        raw: Date value to parse

    Returns:
        date: Calendar date of the reading

    Raises:
        ValueError: If the value cannot be interpreted as a date
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not raw or not isinstance(raw, str):
        raise ValueError(f"Missing or invalid reading date: {raw!r}")

    s = raw.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue

    # Timestamps such as "2024-06-01T08:30:00"
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        raise ValueError(f"Unrecognised reading date: {raw!r}")


def normalize_meter_type(raw: str) -> str:
    """
    Lower-case and validate a meter type.

    Raises:
        ValueError: If the meter type is not electricity, gas or water
    """
    meter_type = (raw or "").strip().lower()
    if meter_type not in METER_TYPES:
        raise ValueError(f"Unknown meter type {raw!r} (expected one of: {', '.join(METER_TYPES)})")
    return meter_type


def format_currency(amount: float, decimals: int = 0) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.{decimals}f}"


def format_usage(value: float, unit: str = "kWh", decimals: int = 0) -> str:
    return f"{value:,.{decimals}f} {unit}"


def format_change(percent_change: float) -> str:
    """Signed percentage for display, e.g. "+26.8%" / "-18.8%" / "0.0%"."""
    if percent_change > 0:
        return f"+{percent_change:.1f}%"
    return f"{percent_change:.1f}%"


def validate_dashboard_metrics(metrics: Dict[str, Any]) -> None:
    """
    Validate dashboard results to catch impossible values.
    Raises ValueError if any critical validation fails.

    Args:
        metrics: Dashboard dictionary produced by the builder

    Raises:
        ValueError: If any usage, cost or total is negative
    """
    for row in metrics.get('monthly_series', []):
        if row['usage'] < 0:
            raise ValueError(f"Invalid usage for {row['month']}: {row['usage']:.2f} (must be non-negative)")
        if row['cost'] < 0:
            raise ValueError(f"Invalid cost for {row['month']}: {row['cost']:.2f} (must be non-negative)")

    summary = metrics.get('summary', {})
    for key in ('total_usage', 'total_cost', 'average_usage', 'average_cost'):
        if summary.get(key, 0) < 0:
            raise ValueError(f"Invalid {key}: {summary[key]:.2f} (must be non-negative)")

    logging.info("✅ Dashboard validation passed")
