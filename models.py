#!/usr/bin/env python3
"""
Record types shared by the aggregation, trend and storage modules
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union


@dataclass(frozen=True)
class Reading:
    date: date
    meter_type: str
    value: float
    cost: float
    user_id: str = ""
    id: Optional[int] = None


@dataclass(frozen=True)
class MonthlyBucket:
    month: str
    usage: float
    cost: float


@dataclass(frozen=True)
class TrendResult:
    percent_change: float
    is_increase: bool


@dataclass(frozen=True)
class ReadingChange:
    reading: Reading
    change: float


@dataclass(frozen=True)
class TrendSummary:
    count: int
    total_usage: float
    total_cost: float
    average_usage: float
    average_cost: float
    best_period: Optional[Union[Reading, MonthlyBucket]] = None


@dataclass(frozen=True)
class Question:
    id: str
    question: str
    unit: str = ""
    placeholder: str = ""


@dataclass
class ApplianceUsage:
    reading_id: int
    question_id: str
    question: str
    answer: str
    unit: str
    id: Optional[int] = None


@dataclass(frozen=True)
class EnergyTip:
    title: str
    description: str
    impact: str
    savings: str
    category: str


def usage_of(item: Union[Reading, MonthlyBucket]) -> float:
    """Usage amount of a reading or a monthly bucket."""
    if isinstance(item, MonthlyBucket):
        return item.usage
    return item.value
