"""Manual Google Sheets sync trigger."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from backend.sync import sync_questions
from drinking_game.sheets import SheetsError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sheets/sync")
async def sync_sheet():
    """Pull questions from the configured sheet into local storage."""
    try:
        results = await sync_questions()
    except SheetsError as e:
        logger.warning(f"Sheets sync failed: {e}")
        return JSONResponse(
            {"success": False, "message": f"Sync failed: {e}"},
            status_code=500,
        )
    return {
        "success": True,
        "message": (
            f"Sync completed successfully. Added: {results['added']}, "
            f"Updated: {results['updated']}, Total: {results['total']}"
        ),
        "results": results,
    }
