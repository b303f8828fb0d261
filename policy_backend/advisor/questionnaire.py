"""Static questionnaire used to gather a :class:`UserProfile`.

Question ids are the snake_case argument names accepted by the
``recommend_policy`` tool.
"""

from __future__ import annotations

import copy
from typing import Any

QUESTIONNAIRE: dict[str, Any] = {
    "title": "RGF Car Insurance Policy Questionnaire",
    "description": (
        "Please answer the following questions to help us find the best "
        "RGF car insurance policy for you"
    ),
    "questions": [
        {
            "id": "age",
            "question": "What is your age?",
            "type": "number",
            "required": True,
            "hint": "Enter your age in years",
        },
        {
            "id": "driving_experience",
            "question": "How many years of driving experience do you have?",
            "type": "number",
            "required": True,
            "hint": "Enter years of experience",
        },
        {
            "id": "vehicle_type",
            "question": "What type of vehicle do you own?",
            "type": "select",
            "required": True,
            "options": ["Sedan", "SUV", "Van", "Sports Car", "Other"],
        },
        {
            "id": "annual_mileage",
            "question": "What is your estimated annual mileage (in km)?",
            "type": "number",
            "required": True,
            "hint": "Enter approximate annual kilometers",
        },
        {
            "id": "driving_habits",
            "question": "What are your typical driving habits?",
            "type": "select",
            "required": True,
            # The engine only recognises the lowercase value "highway".
            "options": ["Urban (city driving)", "Highway (long distances)", "Mixed"],
        },
        {
            "id": "has_accidents",
            "question": "Have you had any accidents in the past 5 years?",
            "type": "boolean",
            "required": True,
        },
        {
            "id": "accident_count",
            "question": "If yes, how many accidents?",
            "type": "number",
            "required": False,
            "hint": "Leave blank if no accidents",
        },
        {
            "id": "vehicle_value",
            "question": "What is the approximate value of your vehicle (in euros)?",
            "type": "number",
            "required": True,
            "hint": "Approximate current market value",
        },
        {
            "id": "budget_range",
            "question": "What is your preferred monthly budget for insurance?",
            "type": "select",
            "required": True,
            "options": ["€50-100", "€100-150", "€150-200", "€200+"],
        },
    ],
}


def get_questionnaire() -> dict[str, Any]:
    """Return a copy of the questionnaire that callers may mutate freely."""
    return copy.deepcopy(QUESTIONNAIRE)
