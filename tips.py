#!/usr/bin/env python3
"""
Static energy-saving tips
"""

from typing import List

from models import EnergyTip

IMPACT_LEVELS = ('High', 'Medium', 'Low')

TIPS = [
    EnergyTip(
        title="Switch to LED Bulbs",
        description="LED bulbs use 75% less energy and last 25 times longer than incandescent lighting.",
        impact="High",
        savings="Up to ₹6,000/year",
        category="Lighting",
    ),
    EnergyTip(
        title="Optimize AC Temperature",
        description="Set your thermostat to 78°F (26°C) when you're home and higher when away.",
        impact="High",
        savings="Up to ₹9,600/year",
        category="Cooling",
    ),
    EnergyTip(
        title="Unplug Idle Devices",
        description="Electronics use power even when turned off. Unplug chargers and appliances when not in use.",
        impact="Medium",
        savings="Up to ₹4,000/year",
        category="Electronics",
    ),
    EnergyTip(
        title="Fix Water Leaks",
        description="A dripping faucet can waste up to 3,000 gallons per year, increasing water heating costs.",
        impact="Medium",
        savings="Up to ₹2,800/year",
        category="Water",
    ),
    EnergyTip(
        title="Use Ceiling Fans",
        description="Ceiling fans help circulate air, allowing you to raise the AC temperature by 4°F.",
        impact="Medium",
        savings="Up to ₹3,600/year",
        category="Cooling",
    ),
    EnergyTip(
        title="Wash Clothes in Cold Water",
        description="90% of the energy used by washing machines goes to heating water.",
        impact="Low",
        savings="Up to ₹2,000/year",
        category="Appliances",
    ),
]

SAVINGS_FOOTER = ("By implementing these tips, you could save up to ₹28,000 per year and "
                  "reduce your carbon footprint by approximately 2.5 tons of CO₂ annually.")


def tips_by_impact(impact: str) -> List[EnergyTip]:
    """Tips with the given impact level (case-insensitive)."""
    wanted = impact.strip().capitalize()
    if wanted not in IMPACT_LEVELS:
        raise ValueError(f"Unknown impact level {impact!r} (expected one of: {', '.join(IMPACT_LEVELS)})")
    return [tip for tip in TIPS if tip.impact == wanted]


def format_tips(tips: List[EnergyTip] = None) -> str:
    tips = TIPS if tips is None else tips
    lines = ["# ENERGY SAVING TIPS", "=" * 40, ""]
    for i, tip in enumerate(tips, 1):
        lines.append(f"{i}. {tip.title} [{tip.impact} Impact] - {tip.category}")
        lines.append(f"   {tip.description}")
        lines.append(f"   {tip.savings}")
        lines.append("")
    lines.append(SAVINGS_FOOTER)
    return "\n".join(lines)
