"""FastAPI API endpoints under /api.

Endpoint groups: settings/health, games (create, fetch, preview, re-roll
all), rules (custom add/delete, single re-roll), videos (channel feed
cache) and sheets (manual question sync). Rules are nested under
/api/games/{game_id}/rules.
"""

from fastapi import APIRouter

from .games import router as games_router
from .rules import router as rules_router
from .settings import router as settings_router
from .sheets import router as sheets_router
from .videos import router as videos_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(games_router)
router.include_router(rules_router)
router.include_router(videos_router)
router.include_router(sheets_router)
