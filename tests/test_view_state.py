#!/usr/bin/env python3
"""
Tests for dashboard view state
Stale refresh results are discarded and failures keep prior data visible
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
from models import Reading
from view_state import (DashboardState, apply_refresh, apply_refresh_error, begin_refresh,
                        dismiss_notification, refresh, switch_tab)

OLD = (Reading(date=date(2024, 5, 1), meter_type='electricity', value=410, cost=4920),)
NEW = (Reading(date=date(2024, 6, 1), meter_type='electricity', value=520, cost=6240),)


def test_refresh_applies_result():
    state = refresh(DashboardState(), lambda: list(NEW))

    assert state.readings == NEW
    assert state.generation == 1
    assert state.loading is False
    assert state.notification is None


def test_stale_result_does_not_overwrite_newer():
    state = DashboardState()
    state, first = begin_refresh(state)
    state, second = begin_refresh(state)

    state = apply_refresh(state, second, NEW)
    state = apply_refresh(state, first, OLD)

    assert state.readings == NEW


def test_failure_keeps_previous_readings():
    state = DashboardState(readings=OLD)

    def failing_fetch():
        raise ConnectionError('network down')

    state = refresh(state, failing_fetch)

    assert state.readings == OLD
    assert 'network down' in state.notification
    assert state.loading is False

    assert dismiss_notification(state).notification is None


def test_stale_error_ignored():
    state = DashboardState(readings=OLD)
    state, first = begin_refresh(state)
    state, second = begin_refresh(state)
    state = apply_refresh(state, second, NEW)

    state = apply_refresh_error(state, first, RuntimeError('late failure'))

    assert state.readings == NEW
    assert state.notification is None


def test_switch_tab():
    state = switch_tab(DashboardState(), 'history')
    assert state.active_tab == 'history'

    with pytest.raises(ValueError):
        switch_tab(state, 'settings')


def test_state_is_immutable():
    state = DashboardState()

    refresh(state, lambda: list(NEW))

    assert state.readings == ()
    assert state.generation == 0
