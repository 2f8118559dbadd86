"""Games API endpoints."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from loteria.api.deps import get_db, read_upload_text
from loteria.engine import parse_drawn, summarize
from loteria.exceptions import MalformedGamesError
from loteria.schemas.games import (
    ClearResponse,
    CompareRequest,
    CompareResponse,
    GamesResponse,
    SizeSummaryRow,
)
from loteria.services import games_service
from loteria.services.presenter import summary_rows, tally_rows

router = APIRouter()


def _games_response(games: list[list[int]]) -> GamesResponse:
    return GamesResponse(
        total_games=len(games),
        games=games,
        summary=summary_rows(summarize(games)),
    )


@router.post("/upload", response_model=GamesResponse)
async def upload_games(
    file: UploadFile = File(..., description="YAML list of games"),
    db: AsyncSession = Depends(get_db),
):
    """Load a games file, replacing the cached games."""
    text = await read_upload_text(file)
    try:
        games = await games_service.load_games(db, text)
    except MalformedGamesError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _games_response(games)


@router.get("", response_model=GamesResponse)
async def get_games(db: AsyncSession = Depends(get_db)):
    """Return the cached games with their size summary."""
    try:
        games = await games_service.get_games(db)
    except MalformedGamesError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return _games_response(games)


@router.delete("", response_model=ClearResponse)
async def clear_games(db: AsyncSession = Depends(get_db)):
    """Forget the cached games."""
    return ClearResponse(cleared=await games_service.clear_games(db))


@router.get("/summary", response_model=list[SizeSummaryRow])
async def get_summary(db: AsyncSession = Depends(get_db)):
    """Amount of games per amount of numbers, largest first."""
    try:
        summary = await games_service.get_summary(db)
    except MalformedGamesError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return summary_rows(summary)


@router.post("/compare", response_model=CompareResponse)
async def compare_draw(
    request: CompareRequest,
    db: AsyncSession = Depends(get_db),
):
    """Check the cached games against the drawn numbers."""
    try:
        games, tally = await games_service.compare_draw(db, request.drawn)
    except MalformedGamesError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return CompareResponse(
        drawn_numbers=sorted(parse_drawn(request.drawn)),
        total_games=len(games),
        has_winners=bool(tally),
        results=tally_rows(tally),
    )
