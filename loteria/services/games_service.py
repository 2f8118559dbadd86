"""Games service — loads, caches and checks the user's games."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from loteria.db.crud import cache
from loteria.engine import compare, summarize
from loteria.engine.constants import GAMES_KEY
from loteria.loader import dump_games, parse_games_yaml, restore_games


async def load_games(session: AsyncSession, yaml_text: str) -> list[list[int]]:
    """Parse a games file and make it the cached collection."""
    games = parse_games_yaml(yaml_text)
    await cache.set_value(session, GAMES_KEY, dump_games(games))
    logger.info("Loaded {} games", len(games))
    return games


async def get_games(session: AsyncSession) -> list[list[int]]:
    """Return the last loaded games, or none if nothing was loaded yet."""
    raw = await cache.get_value(session, GAMES_KEY)
    return restore_games(raw)


async def clear_games(session: AsyncSession) -> bool:
    cleared = await cache.delete_value(session, GAMES_KEY)
    if cleared:
        logger.info("Cleared cached games")
    return cleared


async def get_summary(session: AsyncSession) -> dict[int, int]:
    games = await get_games(session)
    return summarize(games)


async def compare_draw(
    session: AsyncSession, drawn_text: str
) -> tuple[list[list[int]], dict[int, int]]:
    """Check the cached games against a draw. Returns (games, tally)."""
    games = await get_games(session)
    tally = compare(games, drawn_text)
    logger.info(
        "Draw {!r} checked against {} games: {} winning tiers",
        drawn_text, len(games), len(tally),
    )
    return games, tally
