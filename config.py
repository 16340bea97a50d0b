#!/usr/bin/env python3
"""
Configuration constants for the Energy Usage Tracker
"""

import os

# Business simplifications (flat tariff, 30-day month)
RATE_PER_UNIT = float(os.getenv("ET_RATE_PER_UNIT", 12.0))  # currency units per kWh
DAYS_PER_MONTH = int(os.getenv("ET_DAYS_PER_MONTH", 30))
CURRENCY_SYMBOL = os.getenv("ET_CURRENCY", "₹")

METER_TYPES = ("electricity", "gas", "water")
# Charted when no meter type is chosen; also assumed for imports without one
DEFAULT_METER_TYPE = "electricity"
MONTH_LABEL_FORMAT = "%b %Y"  # e.g. "Jun 2024"

# Storage
DB_PATH = os.getenv("ET_DB_PATH", "energy_tracker.db")

# Question generation gateway (OpenAI-compatible chat completions)
AI_GATEWAY_URL = os.getenv("ET_AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions")
AI_API_KEY = os.getenv("ET_AI_API_KEY")
AI_MODEL = os.getenv("ET_AI_MODEL", "google/gemini-2.5-flash")
AI_TIMEOUT_SECONDS = float(os.getenv("ET_AI_TIMEOUT", 30))

# Photo capture placeholder
OCR_DELAY_SECONDS = float(os.getenv("ET_OCR_DELAY", 2.0))
OCR_PLACEHOLDER_READING = 12345.67

# Month-over-month increase that gets flagged in reports
SPIKE_THRESHOLD_PCT = float(os.getenv("ET_SPIKE_PCT", 20.0))

# Stands in for the signed-in user
DEFAULT_USER = os.getenv("ET_USER", "local")
