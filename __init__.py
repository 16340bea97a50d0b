"""
Energy Usage Tracker

Meter reading log with monthly usage aggregation, trend statistics and dashboard reports.
"""

from .dashboard_builder import EnergyDashboardBuilder

__all__ = ["EnergyDashboardBuilder"]
