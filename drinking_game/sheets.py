"""Google Sheets client: reads question rows through the Sheets v4 REST API.

The sheet is expected to hold one question per row with the columns

    ID | Text | Category | Weight | BaseDrink | Order

starting at row 2 (row 1 is headers). Blank or unparseable cells fall back
to defaults; rows without text are dropped.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import httpx

from drinking_game.models import Category, SheetQuestion

logger = logging.getLogger(__name__)

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"
DEFAULT_RANGE = "Questions!A2:F"


class SheetsError(RuntimeError):
    """Raised when the Sheets API cannot be reached or answers with an error."""


def _cell(row: list[Any], index: int) -> str:
    if index < len(row) and row[index] is not None:
        return str(row[index]).strip()
    return ""


def _to_float(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _to_int(raw: str) -> int | None:
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        return None


def _category(raw: str) -> Category:
    try:
        return Category(raw.lower() or Category.GENERAL.value)
    except ValueError:
        logger.warning(f"Unknown sheet category {raw!r}, using general")
        return Category.GENERAL


def parse_rows(rows: list[list[Any]]) -> list[SheetQuestion]:
    """Map raw sheet rows to questions. Row numbers in ids are 1-based sheet rows."""
    questions = []
    for index, row in enumerate(rows):
        text = _cell(row, 1)
        if not text:
            continue
        questions.append(SheetQuestion(
            id=_cell(row, 0) or f"row-{index + 2}",
            text=text,
            category=_category(_cell(row, 2)),
            weight=_to_float(_cell(row, 3)) or 1.0,
            base_drink=_to_int(_cell(row, 4)) or 0,
            order=_to_int(_cell(row, 5)) or index,
        ))
    return questions


class SheetsClient:
    """Read-only client for one spreadsheet.

    Args:
        sheet_id: Spreadsheet id from the sheet URL.
        api_key:  Google API key with Sheets read access.
        range_:   A1 range holding the question rows.
        timeout:  HTTP timeout in seconds.
    """

    def __init__(
        self,
        sheet_id: str,
        api_key: str,
        range_: str = DEFAULT_RANGE,
        timeout: float = 30.0,
    ) -> None:
        self._sheet_id = sheet_id
        self._api_key = api_key
        self._range = range_
        self._timeout = timeout

    def _url(self) -> str:
        return f"{SHEETS_API_URL}/{self._sheet_id}/values/{self._range}"

    async def fetch_questions(self) -> list[SheetQuestion]:
        if not self._sheet_id or not self._api_key:
            raise SheetsError("Google Sheets is not configured (sheet id and API key required)")

        url = self._url()
        logger.debug("sheets fetch url=%s", url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(url, params={"key": self._api_key})
                resp.raise_for_status()
        except httpx.ConnectError as e:
            raise SheetsError("Cannot connect to the Google Sheets API") from e
        except httpx.HTTPStatusError as e:
            raise SheetsError(
                f"Google Sheets API returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise SheetsError(f"Google Sheets API timed out after {self._timeout}s") from e

        try:
            body = resp.json()
        except ValueError as e:
            raise SheetsError("Google Sheets API returned a body that is not JSON") from e

        rows = body.get("values") or []
        if not rows:
            logger.info("No data found in the Google Sheet")
            return []
        return parse_rows(rows)
