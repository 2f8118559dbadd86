"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from loteria.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
logger.add(settings.LOG_DIR / "app.log", rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    from loteria.db.engine import engine, ensure_sqlite_dir, init_db

    logger.info("Starting {} ...", settings.APP_NAME)

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    ensure_sqlite_dir(settings.DATABASE_URL)
    await init_db()

    yield

    await engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Conferência de jogos da Mega-Sena",
    lifespan=lifespan,
)

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

# Include API routers
from loteria.api.deps import get_db, read_upload_text  # noqa: E402
from loteria.api.v1.router import api_router  # noqa: E402
from loteria.engine import summarize  # noqa: E402
from loteria.exceptions import MalformedGamesError  # noqa: E402
from loteria.services import games_service  # noqa: E402
from loteria.services.presenter import summary_rows, tally_rows  # noqa: E402

app.include_router(api_router, prefix="/api/v1")


# --- Page routes (Jinja2) ---

def _render(
    request: Request,
    games: list[list[int]],
    *,
    drawn: str = "",
    result: dict[int, int] | None = None,
    error_message: str | None = None,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.APP_NAME,
            "total_games": len(games),
            "summary": summary_rows(summarize(games)),
            "drawn": drawn,
            # None means "not compared yet", an empty list means "no winners"
            "result": tally_rows(result) if result is not None else None,
            "error_message": error_message,
        },
        status_code=status_code,
    )


async def _cached_games(db: AsyncSession) -> tuple[list[list[int]], str | None]:
    try:
        return await games_service.get_games(db), None
    except MalformedGamesError as e:
        logger.warning("Discarding unreadable games cache: {}", e)
        await games_service.clear_games(db)
        return [], "Os jogos salvos estavam corrompidos e foram descartados."


@app.get("/", include_in_schema=False)
async def index(request: Request, db: AsyncSession = Depends(get_db)):
    games, error_message = await _cached_games(db)
    return _render(request, games, error_message=error_message)


@app.post("/upload", include_in_schema=False)
async def upload_page(
    request: Request,
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
):
    try:
        text = await read_upload_text(file)
        await games_service.load_games(db, text)
    except (MalformedGamesError, HTTPException) as e:
        message = e.detail if isinstance(e, HTTPException) else str(e)
        logger.warning("Rejected games file {!r}: {}", file.filename, message)
        games, _ = await _cached_games(db)
        return _render(
            request,
            games,
            error_message=f"Arquivo inválido: {message}",
            status_code=400,
        )
    return RedirectResponse("/", status_code=303)


@app.post("/compare", include_in_schema=False)
async def compare_page(
    request: Request,
    drawn: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    games, error_message = await _cached_games(db)
    _, tally = await games_service.compare_draw(db, drawn)
    return _render(request, games, drawn=drawn, result=tally, error_message=error_message)
