#!/usr/bin/env python3
"""
Tests for the SQLite reading store
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
from models import Question, Reading
from store import ReadingStore


@pytest.fixture
def store(tmp_path):
    return ReadingStore(str(tmp_path / 'readings.db'))


def _reading(d, value, user_id='u1', meter_type='electricity'):
    return Reading(date=d, meter_type=meter_type, value=value, cost=value * 12, user_id=user_id)


def test_insert_assigns_id(store):
    stored = store.insert_reading(_reading(date(2024, 6, 1), 520))

    assert stored.id is not None
    assert stored.value == 520
    assert stored.cost == 6240
    assert stored.date == date(2024, 6, 1)


def test_list_readings_ordered_and_scoped_to_user(store):
    store.insert_reading(_reading(date(2024, 6, 1), 520))
    store.insert_reading(_reading(date(2024, 4, 1), 390))
    store.insert_reading(_reading(date(2024, 5, 1), 410))
    store.insert_reading(_reading(date(2024, 5, 1), 999, user_id='someone-else'))

    ascending = store.list_readings('u1')
    assert [r.value for r in ascending] == [390, 410, 520]
    assert all(isinstance(r.date, date) for r in ascending)

    descending = store.list_readings('u1', descending=True)
    assert [r.value for r in descending] == [520, 410, 390]


def test_list_readings_date_range_and_meter_type(store):
    store.insert_reading(_reading(date(2024, 4, 1), 390))
    store.insert_reading(_reading(date(2024, 5, 1), 410))
    store.insert_reading(_reading(date(2024, 5, 15), 30, meter_type='gas'))
    store.insert_reading(_reading(date(2024, 6, 1), 520))

    in_range = store.list_readings('u1', start=date(2024, 5, 1), end=date(2024, 5, 31))
    assert [r.value for r in in_range] == [410, 30]

    gas = store.list_readings('u1', meter_type='gas')
    assert [r.value for r in gas] == [30]


def test_same_date_readings_keep_insertion_order(store):
    store.insert_reading(_reading(date(2024, 5, 1), 1))
    store.insert_reading(_reading(date(2024, 5, 1), 2))

    assert [r.value for r in store.list_readings('u1')] == [1, 2]


def test_appliance_usage_rows(store):
    stored = store.insert_reading(_reading(date(2024, 6, 1), 520))
    questions = [Question(id='question_1', question='Hours of AC per day?', unit='hours/day', placeholder='e.g., 8')]

    written = store.insert_appliance_usage(stored.id, {'question_1': '8', 'question_9': '2'}, questions)

    assert written == 2
    rows = store.list_appliance_usage(stored.id)
    assert [(r.question_id, r.question, r.answer, r.unit) for r in rows] == [
        ('question_1', 'Hours of AC per day?', '8', 'hours/day'),
        ('question_9', '', '2', ''),
    ]


def test_no_answers_writes_nothing(store):
    stored = store.insert_reading(_reading(date(2024, 6, 1), 520))

    assert store.insert_appliance_usage(stored.id, {}) == 0
    assert store.list_appliance_usage(stored.id) == []


def test_store_reopens_existing_database(tmp_path):
    db_path = str(tmp_path / 'readings.db')
    ReadingStore(db_path).insert_reading(_reading(date(2024, 6, 1), 520))

    assert len(ReadingStore(db_path).list_readings('u1')) == 1
