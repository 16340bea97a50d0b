#!/usr/bin/env python3
"""
Reading entry
Manual reading submission and the photo-capture placeholder.
"""

import logging
import time
from pathlib import Path
from typing import Dict, Optional, Sequence

from config import OCR_DELAY_SECONDS, OCR_PLACEHOLDER_READING, RATE_PER_UNIT
from models import Question, Reading
from store import ReadingStore
from utils import normalize_meter_type, parse_reading_date

IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.heic', '.webp', '.bmp'}


def blank_answers(questions: Sequence[Question]) -> Dict[str, str]:
    """Initial empty answer for every question."""
    return {q.id: "" for q in questions}


def parse_value(raw) -> float:
    """
    Parse a meter reading value.

    Raises:
        ValueError: If the value is missing, not numeric or negative
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValueError("Meter reading is required")
    try:
        value = float(str(raw).replace(',', '')) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Meter reading must be a number: {raw!r}")
    if value < 0:
        raise ValueError(f"Meter reading must be non-negative: {value}")
    return value


def submit_reading(store: ReadingStore, user_id: str, reading_date, meter_type: str, value,
                   answers: Optional[Dict[str, str]] = None,
                   questions: Sequence[Question] = ()) -> Reading:
    """
    Validate and store a reading with its appliance usage answers.

    The cost is fixed at entry time from the flat rate.

    Args:
        store: Reading store
        user_id: Signed-in user
        reading_date: Date of the reading (date or parseable string)
        meter_type: electricity, gas or water
        value: Meter reading value
        answers: Appliance question answers keyed by question id (optional)
        questions: Questions the answers refer to

    Returns:
        Reading: the stored reading with its id

    Raises:
        ValueError: If a required field is missing or invalid
    """
    if not user_id:
        raise ValueError("You must be logged in to submit readings")
    if not reading_date or not meter_type or value in (None, ""):
        raise ValueError("Please fill in all required fields")

    parsed_value = parse_value(value)
    reading = Reading(
        user_id=user_id,
        date=parse_reading_date(reading_date),
        meter_type=normalize_meter_type(meter_type),
        value=parsed_value,
        cost=parsed_value * RATE_PER_UNIT,
    )

    stored = store.insert_reading(reading)
    if answers:
        store.insert_appliance_usage(stored.id, answers, questions)

    logging.info(f"Reading submitted: {stored.meter_type} {stored.value} on {stored.date} (id {stored.id})")
    return stored


def scan_meter_image(image_path, delay: float = OCR_DELAY_SECONDS) -> float:
    """
    Simulated meter photo processing.

    No recognition happens: after a fixed delay the placeholder reading is
    returned for any readable image file.

    Raises:
        FileNotFoundError: If the image does not exist
        ValueError: If the file is not an image
    """
    path = Path(image_path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {image_path}")
    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        raise ValueError(f"Not an image file: {image_path}")

    logging.info(f"Processing meter image {path.name}...")
    if delay > 0:
        time.sleep(delay)

    logging.info(f"Meter Reading Detected! Reading: {OCR_PLACEHOLDER_READING:,.2f} kWh")
    return OCR_PLACEHOLDER_READING
