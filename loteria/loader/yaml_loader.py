"""Loader for games files.

A games file is a YAML list of lists, one list of numbers per game:

    - [1, 2, 3, 4, 5, 6]
    - [7, 8, 9, 10, 11, 12, 13]

The last loaded games are cached as JSON.
"""

import json

import yaml
from loguru import logger
from pydantic import StrictInt, TypeAdapter, ValidationError

from loteria.exceptions import MalformedGamesError

_GAMES_ADAPTER = TypeAdapter(list[list[StrictInt]])


def _validate(data) -> list[list[int]]:
    if data is None:
        return []
    try:
        return _GAMES_ADAPTER.validate_python(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "root"
        raise MalformedGamesError(
            f"Games must be a list of lists of integers (at {location}: {first['msg']})"
        ) from e


def parse_games_yaml(text: str) -> list[list[int]]:
    """Parse a YAML games file. An empty document yields no games."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedGamesError(f"Invalid YAML: {e}") from e
    except (ValueError, RecursionError) as e:
        raise MalformedGamesError(f"Unreadable games file: {e}") from e

    games = _validate(data)
    logger.debug("Parsed {} games from YAML", len(games))
    return games


def dump_games(entries: list[list[int]]) -> str:
    """Encode games for the cache."""
    return json.dumps(entries)


def restore_games(raw: str | None) -> list[list[int]]:
    """Decode a cached value back into games."""
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedGamesError(f"Corrupt games cache: {e}") from e
    return _validate(data)
