import asyncio
import contextlib
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.routes import router
from backend.sync import scheduled_sync
from backend import storage

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


@asynccontextmanager
async def lifespan(app: FastAPI):
    task = None
    if os.getenv("SCHEDULED_SYNC", ""):
        interval = storage.get_config()["sheets"]["sync_interval_minutes"]
        task = asyncio.create_task(scheduled_sync(interval))
    yield
    if task is not None:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task


async def validation_error(request: Request, exc: RequestValidationError):
    # Missing or invalid fields are a client error, reported as 400
    return JSONResponse({"detail": jsonable_encoder(exc.errors())}, status_code=400)


def create_app(data_dir: Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage.init_storage(resolved)

    app = FastAPI(title="Drinking Game", lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, validation_error)
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()
