"""Questions synced from the Google Sheet (questions.json)."""

from pathlib import Path
from typing import Any

from .core import data_dir, read_json, write_json


def _questions_path() -> Path:
    return data_dir() / "questions.json"


def get_questions() -> list[dict[str, Any]]:
    """Load stored questions. Returns [] if none exist."""
    return read_json(_questions_path(), default=[])


def save_questions(questions: list[dict[str, Any]]) -> None:
    write_json(_questions_path(), questions)
