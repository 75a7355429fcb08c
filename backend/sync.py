"""Google Sheets → questions.json sync, on demand and on a schedule.

sync_questions() adds rows whose sheet id is new, updates rows whose
content changed and leaves everything else alone. Rows removed from the
sheet are kept. The result counts {"added", "updated", "total"}, where
total is the number of rows read from the sheet.

scheduled_sync() is the background loop started from the app lifespan
when SCHEDULED_SYNC is set; one failed run is logged and the loop waits
for the next interval.
"""

import asyncio
import logging
import os
from typing import Any

from drinking_game.models import SheetQuestion
from drinking_game.sheets import SheetsClient

from backend import storage

logger = logging.getLogger(__name__)

_COMPARED_FIELDS = ("text", "category", "weight", "base_drink", "order")


def sheets_client() -> SheetsClient:
    """Build a client from config, falling back to env vars for blank credentials."""
    sheets = storage.get_config()["sheets"]
    return SheetsClient(
        sheet_id=sheets["sheet_id"] or os.getenv("GOOGLE_SHEET_ID", ""),
        api_key=sheets["api_key"] or os.getenv("GOOGLE_SHEETS_API_KEY", ""),
        range_=sheets["range"],
    )


def _has_changed(question: SheetQuestion, stored: dict[str, Any]) -> bool:
    fresh = question.model_dump(mode="json")
    return any(fresh[key] != stored.get(key) for key in _COMPARED_FIELDS)


async def sync_questions(client: SheetsClient | None = None) -> dict[str, int]:
    client = client or sheets_client()
    sheet_questions = await client.fetch_questions()

    stored = storage.get_questions()
    by_sheet_id = {q["sheet_id"]: q for q in stored}
    results = {"added": 0, "updated": 0, "total": len(sheet_questions)}
    now = storage.utcnow().isoformat()

    for question in sheet_questions:
        fields = question.model_dump(mode="json", exclude={"id"})
        existing = by_sheet_id.get(question.id)
        if existing is None:
            record = {"id": storage.new_id(), "sheet_id": question.id, **fields}
            record.update(last_synced=now, created_at=now, updated_at=now)
            stored.append(record)
            by_sheet_id[question.id] = record
            results["added"] += 1
        elif _has_changed(question, existing):
            existing.update(fields)
            existing.update(last_synced=now, updated_at=now)
            results["updated"] += 1

    storage.save_questions(stored)
    logger.info(
        "Sheets sync: added=%d updated=%d total=%d",
        results["added"], results["updated"], results["total"],
    )
    return results


async def scheduled_sync(interval_minutes: float) -> None:
    """Run sync_questions() every interval_minutes until cancelled."""
    while True:
        await asyncio.sleep(interval_minutes * 60)
        logger.info("Running scheduled Google Sheets sync...")
        try:
            await sync_questions()
        except Exception as e:
            logger.warning(f"Scheduled sync failed: {e}")
