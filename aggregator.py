#!/usr/bin/env python3
"""
Monthly usage aggregation
Groups raw meter readings into the per-month series used for charting
"""

from typing import Iterable, List, Optional

import pandas as pd

from config import MONTH_LABEL_FORMAT
from models import MonthlyBucket, Reading

READING_COLUMNS = ['id', 'user_id', 'date', 'meter_type', 'value', 'cost']


def month_label(reading_date) -> str:
    """Calendar month label for a date, e.g. "Jun 2024"."""
    return reading_date.strftime(MONTH_LABEL_FORMAT)


def readings_to_frame(readings: Iterable[Reading]) -> pd.DataFrame:
    """
    Convert readings to a DataFrame, one row per reading, input order kept.

    Args:
        readings: Iterable of Reading records

    Returns:
        DataFrame with columns id, user_id, date, meter_type, value, cost
    """
    rows = [
        {
            'id': r.id,
            'user_id': r.user_id,
            'date': r.date,
            'meter_type': r.meter_type,
            'value': float(r.value),
            'cost': float(r.cost),
        }
        for r in readings
    ]
    return pd.DataFrame(rows, columns=READING_COLUMNS)


def aggregate(readings: Iterable[Reading], meter_type: Optional[str] = None,
              sort: bool = False) -> List[MonthlyBucket]:
    """
    Aggregate readings into monthly usage/cost buckets.

    Buckets come out in first-occurrence order of their month label, so the
    caller must pass readings sorted ascending by date for a chronological
    series. Pass sort=True to have the readings stably sorted by date first.

    Args:
        readings: Readings, expected ascending by date
        meter_type: Only aggregate readings of this meter type (optional)
        sort: Sort by date before grouping

    Returns:
        List[MonthlyBucket]: one bucket per month label, empty for empty input
    """
    df = readings_to_frame(readings)
    if meter_type is not None:
        df = df[df['meter_type'] == meter_type]
    if df.empty:
        return []

    if sort:
        df = df.sort_values('date', kind='stable')

    df = df.assign(month=[month_label(d) for d in df['date']])
    # Plain left-to-right float addition, matching trends.summarize
    grouped = df.groupby('month', sort=False)[['value', 'cost']].agg(lambda s: sum(s.tolist()))

    return [
        MonthlyBucket(month=month, usage=float(row['value']), cost=float(row['cost']))
        for month, row in grouped.iterrows()
    ]


def series_for_chart(buckets: List[MonthlyBucket]) -> List[dict]:
    """Plain dict rows ({month, usage, cost}) for chart rendering and JSON export."""
    return [{'month': b.month, 'usage': b.usage, 'cost': b.cost} for b in buckets]
