#!/usr/bin/env python3
"""
Appliance usage question generation
Asks a chat-completions gateway for enrichment questions about a meter type
and extracts the JSON question array from the free-text answer.
"""

import json
import logging
import re
from typing import Any, List, Optional, Tuple

import requests

from config import AI_API_KEY, AI_GATEWAY_URL, AI_MODEL, AI_TIMEOUT_SECONDS
from models import Question

QUESTION_KEYS = ('id', 'question', 'unit', 'placeholder')

SYSTEM_PROMPT = """You are an energy usage expert. Generate 4-5 simple, clear questions to help calculate {meter_type} usage based on appliance usage patterns.

Focus on common household appliances and their usage duration. Questions should be easy to answer with hours per day or similar metrics.

Return ONLY a JSON array of question objects with this exact structure:
[
  {{
    "id": "question_1",
    "question": "How many hours per day is your air conditioner running?",
    "unit": "hours/day",
    "placeholder": "e.g., 8"
  }}
]"""

_JSON_ARRAY = re.compile(r'\[[\s\S]*\]')


class QuestionGenerationError(Exception):
    """Raised when the gateway cannot be reached or rejects the request."""


def extract_questions(text: Optional[str]) -> List[Question]:
    """
    Pull the question array out of a model response.

    The response may carry prose or markdown fences around the array; the
    outermost [...] span is parsed. Entries missing any of the four keys
    are dropped.

    Args:
        text: Raw model response text

    Returns:
        List[Question]: parsed questions, empty if no valid array was found
    """
    if not text:
        return []

    match = _JSON_ARRAY.search(text)
    if not match:
        logging.warning("No JSON array found in question response")
        return []

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logging.warning(f"Could not parse question array: {e}")
        return []

    if not isinstance(payload, list):
        return []

    questions = []
    for item in payload:
        if not isinstance(item, dict) or not all(key in item for key in QUESTION_KEYS):
            logging.debug(f"Skipping malformed question entry: {item!r}")
            continue
        questions.append(Question(**{key: str(item[key]) for key in QUESTION_KEYS}))

    return questions


class QuestionGenerator:
    """Client for the chat-completions gateway."""

    def __init__(self, api_key: Optional[str] = AI_API_KEY, url: str = AI_GATEWAY_URL,
                 model: str = AI_MODEL, timeout: float = AI_TIMEOUT_SECONDS):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self.session = requests.Session()

    def _build_payload(self, meter_type: Optional[str]) -> dict:
        return {
            'model': self.model,
            'messages': [
                {'role': 'system', 'content': SYSTEM_PROMPT.format(meter_type=meter_type or 'energy')},
                {'role': 'user', 'content': f"Generate questions for {meter_type or 'general'} energy usage"},
            ],
        }

    def _make_request(self, payload: dict) -> Any:
        """POST to the gateway and return the decoded JSON body."""
        if not self.api_key:
            raise QuestionGenerationError("AI gateway API key is not configured (set ET_AI_API_KEY)")

        headers = {
            'Authorization': f"Bearer {self.api_key}",
            'Content-Type': 'application/json',
        }

        try:
            response = self.session.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise QuestionGenerationError("AI gateway request timed out") from e
        except requests.exceptions.RequestException as e:
            raise QuestionGenerationError(f"AI gateway request failed: {e}") from e

        if not response.ok:
            logging.error(f"AI gateway error: {response.status_code} {response.text[:200]}")
            raise QuestionGenerationError(f"AI gateway error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise QuestionGenerationError(f"AI gateway returned invalid JSON: {e}") from e

    def generate(self, meter_type: Optional[str]) -> List[Question]:
        """
        Generate enrichment questions for a meter type.

        Raises:
            QuestionGenerationError: on configuration, network or HTTP failures
        """
        logging.info(f"Generating questions for meter type: {meter_type}")
        data = self._make_request(self._build_payload(meter_type))

        try:
            content = data['choices'][0]['message']['content']
        except (KeyError, IndexError, TypeError):
            logging.warning("Unexpected response shape from AI gateway")
            return []

        logging.debug(f"Generated response: {content}")
        return extract_questions(content)


def fetch_questions(generator: QuestionGenerator, meter_type: Optional[str]) -> Tuple[List[Question], Optional[str]]:
    """
    Fetch questions for a form without ever raising.

    Returns:
        (questions, error_message) - error_message is None on success
    """
    if not meter_type:
        return [], None

    try:
        return generator.generate(meter_type), None
    except QuestionGenerationError as e:
        logging.error(f"Error fetching questions: {e}")
        return [], "Failed to load questions. Please try again."
