#!/usr/bin/env python3
"""
Tests for display helpers, input parsing, validation and tips
"""

import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
from tips import SAVINGS_FOOTER, TIPS, format_tips, tips_by_impact
from utils import (format_change, format_currency, format_usage, normalize_meter_type,
                   parse_reading_date, validate_dashboard_metrics)


class TestParseReadingDate:

    def test_formats(self):
        assert parse_reading_date('2024-06-01') == date(2024, 6, 1)
        assert parse_reading_date('15/06/2024') == date(2024, 6, 15)
        assert parse_reading_date('2024-06-01T08:30:00') == date(2024, 6, 1)
        assert parse_reading_date(datetime(2024, 6, 1, 8, 30)) == date(2024, 6, 1)
        assert parse_reading_date(date(2024, 6, 1)) == date(2024, 6, 1)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_reading_date('not a date')
        with pytest.raises(ValueError):
            parse_reading_date('')


def test_normalize_meter_type():
    assert normalize_meter_type(' Gas ') == 'gas'
    with pytest.raises(ValueError):
        normalize_meter_type('solar')


def test_display_formatting():
    assert format_change(26.8) == '+26.8%'
    assert format_change(-18.8) == '-18.8%'
    assert format_change(0.0) == '0.0%'
    assert format_usage(2670) == '2,670 kWh'
    assert format_currency(32040).endswith('32,040')


def test_validate_dashboard_metrics():
    validate_dashboard_metrics({'monthly_series': [{'month': 'Jun 2024', 'usage': 520, 'cost': 6240}]})

    with pytest.raises(ValueError, match='Jun 2024'):
        validate_dashboard_metrics({'monthly_series': [{'month': 'Jun 2024', 'usage': -1, 'cost': 0}]})

    with pytest.raises(ValueError, match='total_cost'):
        validate_dashboard_metrics({'summary': {'total_cost': -5}})


class TestTips:

    def test_static_tip_list(self):
        assert len(TIPS) == 6
        assert {tip.impact for tip in TIPS} == {'High', 'Medium', 'Low'}

    def test_tips_by_impact(self):
        assert [tip.title for tip in tips_by_impact('low')] == ['Wash Clothes in Cold Water']
        with pytest.raises(ValueError):
            tips_by_impact('extreme')

    def test_format_tips(self):
        text = format_tips()

        assert text.startswith('# ENERGY SAVING TIPS')
        assert '1. Switch to LED Bulbs [High Impact] - Lighting' in text
        assert text.endswith(SAVINGS_FOOTER)
