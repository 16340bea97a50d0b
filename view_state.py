#!/usr/bin/env python3
"""
Dashboard view state
Immutable view-state value owned by the caller (GUI loop, CLI) and passed
through each refresh. Refresh results are tagged with a generation number so
a late response from an older fetch never overwrites newer data.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Tuple

from models import Reading

TABS = ('dashboard', 'entry', 'scan', 'history', 'tips')


@dataclass(frozen=True)
class DashboardState:
    active_tab: str = 'dashboard'
    readings: Tuple[Reading, ...] = ()
    generation: int = 0
    loading: bool = False
    notification: Optional[str] = None


def switch_tab(state: DashboardState, tab: str) -> DashboardState:
    if tab not in TABS:
        raise ValueError(f"Unknown tab {tab!r} (expected one of: {', '.join(TABS)})")
    return replace(state, active_tab=tab)


def begin_refresh(state: DashboardState) -> Tuple[DashboardState, int]:
    """Start a refresh; the returned generation must accompany its result."""
    generation = state.generation + 1
    return replace(state, generation=generation, loading=True), generation


def apply_refresh(state: DashboardState, generation: int, readings: Sequence[Reading]) -> DashboardState:
    if generation != state.generation:
        logging.debug(f"Discarding stale refresh result (generation {generation}, current {state.generation})")
        return state
    return replace(state, readings=tuple(readings), loading=False, notification=None)


def apply_refresh_error(state: DashboardState, generation: int, error: Exception) -> DashboardState:
    """Record a failed refresh; previously loaded readings stay visible."""
    if generation != state.generation:
        logging.debug(f"Discarding stale refresh error (generation {generation}): {error}")
        return state
    logging.error(f"Failed to load readings: {error}")
    return replace(state, loading=False, notification=f"Failed to load readings: {error}")


def refresh(state: DashboardState, fetch: Callable[[], Sequence[Reading]]) -> DashboardState:
    """Run a fetch to completion and apply its result or error."""
    state, generation = begin_refresh(state)
    try:
        readings = fetch()
    except Exception as e:
        return apply_refresh_error(state, generation, e)
    return apply_refresh(state, generation, readings)


def dismiss_notification(state: DashboardState) -> DashboardState:
    return replace(state, notification=None)
