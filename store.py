#!/usr/bin/env python3
"""
Reading Store
SQLite persistence for meter readings and appliance usage answers.
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from config import DB_PATH
from models import ApplianceUsage, Question, Reading
from utils import parse_reading_date


class StoreError(Exception):
    """Raised when the reading store cannot complete an operation."""


class ReadingStore:
    """Manages SQLite storage of meter readings for all users."""

    def __init__(self, db_path: str = DB_PATH):
        self.db_path = Path(db_path)
        self._init_database()

    @contextmanager
    def get_connection(self):
        """Context manager for database connections."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StoreError(f"Could not open database {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"Database error: {e}") from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_database(self):
        """Initialize database with schema."""
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute('''
                CREATE TABLE IF NOT EXISTS meter_readings (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id TEXT NOT NULL,
                    reading_date DATE NOT NULL,
                    meter_type TEXT NOT NULL,
                    reading REAL NOT NULL,
                    cost REAL NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            ''')

            cursor.execute('''
                CREATE TABLE IF NOT EXISTS appliance_usage (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    reading_id INTEGER NOT NULL REFERENCES meter_readings(id),
                    question_id TEXT NOT NULL,
                    question TEXT,
                    answer TEXT,
                    unit TEXT
                )
            ''')

            cursor.execute('''
                CREATE INDEX IF NOT EXISTS idx_readings_user_date
                ON meter_readings (user_id, reading_date)
            ''')

    @staticmethod
    def _row_to_reading(row: sqlite3.Row) -> Reading:
        return Reading(
            id=row['id'],
            user_id=row['user_id'],
            date=parse_reading_date(row['reading_date']),
            meter_type=row['meter_type'],
            value=row['reading'],
            cost=row['cost'],
        )

    def insert_reading(self, reading: Reading) -> Reading:
        """
        Insert a reading.

        Args:
            reading: Reading to store (its id is ignored)

        Returns:
            Reading: the stored reading with its assigned id
        """
        with self.get_connection() as conn:
            cursor = conn.execute(
                '''
                INSERT INTO meter_readings (user_id, reading_date, meter_type, reading, cost)
                VALUES (?, ?, ?, ?, ?)
                ''',
                (reading.user_id, reading.date.isoformat(), reading.meter_type,
                 reading.value, reading.cost)
            )
            reading_id = cursor.lastrowid

        logging.debug(f"Stored reading {reading_id} for {reading.user_id} on {reading.date}")
        return Reading(
            id=reading_id,
            user_id=reading.user_id,
            date=reading.date,
            meter_type=reading.meter_type,
            value=reading.value,
            cost=reading.cost,
        )

    def list_readings(self, user_id: str, start: Optional[date] = None, end: Optional[date] = None,
                      meter_type: Optional[str] = None, descending: bool = False) -> List[Reading]:
        """
        List a user's readings ordered by date (then insertion order).

        Args:
            user_id: Owner of the readings
            start: Earliest reading date, inclusive (optional)
            end: Latest reading date, inclusive (optional)
            meter_type: Restrict to one meter type (optional)
            descending: Newest first instead of oldest first

        Returns:
            List[Reading]
        """
        query = 'SELECT * FROM meter_readings WHERE user_id = ?'
        params: list = [user_id]

        if start is not None:
            query += ' AND reading_date >= ?'
            params.append(start.isoformat())
        if end is not None:
            query += ' AND reading_date <= ?'
            params.append(end.isoformat())
        if meter_type is not None:
            query += ' AND meter_type = ?'
            params.append(meter_type)

        direction = 'DESC' if descending else 'ASC'
        query += f' ORDER BY reading_date {direction}, id {direction}'

        with self.get_connection() as conn:
            rows = conn.execute(query, params).fetchall()

        return [self._row_to_reading(row) for row in rows]

    def insert_appliance_usage(self, reading_id: int, answers: Dict[str, str],
                               questions: Sequence[Question] = ()) -> int:
        """
        Store appliance usage answers for a reading.

        Question text and unit are copied from the matching question; unknown
        question ids are stored with empty text.

        Args:
            reading_id: Reading the answers belong to
            answers: Mapping of question id to answer
            questions: Questions the answers refer to

        Returns:
            int: number of rows written
        """
        if not answers:
            return 0

        by_id = {q.id: q for q in questions}
        rows = []
        for question_id, answer in answers.items():
            question = by_id.get(question_id)
            rows.append((
                reading_id,
                question_id,
                question.question if question else '',
                str(answer),
                question.unit if question else '',
            ))

        with self.get_connection() as conn:
            conn.executemany(
                '''
                INSERT INTO appliance_usage (reading_id, question_id, question, answer, unit)
                VALUES (?, ?, ?, ?, ?)
                ''',
                rows
            )

        logging.debug(f"Stored {len(rows)} appliance answers for reading {reading_id}")
        return len(rows)

    def list_appliance_usage(self, reading_id: int) -> List[ApplianceUsage]:
        with self.get_connection() as conn:
            rows = conn.execute(
                'SELECT * FROM appliance_usage WHERE reading_id = ? ORDER BY id',
                (reading_id,)
            ).fetchall()

        return [
            ApplianceUsage(
                id=row['id'],
                reading_id=row['reading_id'],
                question_id=row['question_id'],
                question=row['question'],
                answer=row['answer'],
                unit=row['unit'],
            )
            for row in rows
        ]
