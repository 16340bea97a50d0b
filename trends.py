#!/usr/bin/env python3
"""
Usage trend calculations
Period-over-period change, per-reading change annotation and summary statistics
"""

from typing import List, Optional, Sequence, Union

from config import DAYS_PER_MONTH, RATE_PER_UNIT
from models import MonthlyBucket, Reading, ReadingChange, TrendResult, TrendSummary, usage_of


def compute_trend(current: float, previous: float) -> TrendResult:
    """
    Percentage change from previous to current.

    A zero baseline yields a 0% change and no increase rather than an error.

    Args:
        current: Current period usage
        previous: Baseline (previous period) usage

    Returns:
        TrendResult: percent change rounded to one decimal, strict increase flag
    """
    if previous == 0:
        return TrendResult(percent_change=0.0, is_increase=False)

    percent_change = round((current - previous) / previous * 100, 1)
    return TrendResult(percent_change=percent_change, is_increase=current > previous)


def annotate_changes(readings_desc: Sequence[Reading]) -> List[ReadingChange]:
    """
    Attach a change percentage to each reading, newest first.

    Each reading is compared with the next older raw reading, not with a
    monthly aggregate. The oldest reading has no baseline and gets 0.

    Args:
        readings_desc: Readings sorted descending by date

    Returns:
        List[ReadingChange] in the same order as the input
    """
    annotated = []
    for i, reading in enumerate(readings_desc):
        if i == len(readings_desc) - 1:
            change = 0.0
        else:
            older = readings_desc[i + 1]
            change = compute_trend(reading.value, older.value).percent_change
        annotated.append(ReadingChange(reading=reading, change=change))
    return annotated


def annotate_changes_by_meter_type(readings_desc: Sequence[Reading]) -> List[ReadingChange]:
    """
    Like annotate_changes, but each reading is only compared with the next
    older reading of the same meter type. Input order is kept.
    """
    positions = {}
    for i, reading in enumerate(readings_desc):
        positions.setdefault(reading.meter_type, []).append(i)

    annotated = [None] * len(readings_desc)
    for indexes in positions.values():
        for i, item in zip(indexes, annotate_changes([readings_desc[i] for i in indexes])):
            annotated[i] = item
    return annotated


def month_over_month(buckets: Sequence[MonthlyBucket]) -> TrendResult:
    """Trend of the latest monthly bucket against the one before it."""
    if len(buckets) < 2:
        return TrendResult(percent_change=0.0, is_increase=False)
    return compute_trend(buckets[-1].usage, buckets[-2].usage)


def summarize(items: Sequence[Union[Reading, MonthlyBucket]]) -> TrendSummary:
    """
    Totals, averages and best (lowest usage) period.

    Works over raw readings or monthly buckets. Averages are 0 for an empty
    input; the first minimum wins on ties.
    """
    count = len(items)
    total_usage = sum(usage_of(item) for item in items)
    total_cost = sum(item.cost for item in items)

    best_period = None
    for item in items:
        if best_period is None or usage_of(item) < usage_of(best_period):
            best_period = item

    return TrendSummary(
        count=count,
        total_usage=total_usage,
        total_cost=total_cost,
        average_usage=total_usage / count if count else 0.0,
        average_cost=total_cost / count if count else 0.0,
        best_period=best_period,
    )


def estimated_cost(current_usage: float, rate: float = RATE_PER_UNIT) -> float:
    return current_usage * rate


def avg_daily_usage(current_month_usage: float, days: int = DAYS_PER_MONTH) -> float:
    # Fixed divisor, not the calendar length of the month
    return current_month_usage / days


def format_average(value: float, count: int, decimals: int = 0) -> str:
    """Display string for an average; "N/A" when there was nothing to average."""
    if not count:
        return "N/A"
    return f"{value:,.{decimals}f}"


def latest_bucket(buckets: Sequence[MonthlyBucket]) -> Optional[MonthlyBucket]:
    return buckets[-1] if buckets else None
