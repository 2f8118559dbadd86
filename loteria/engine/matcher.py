"""Match tally engine — compares loaded games against the drawn numbers."""

import re
from collections.abc import Iterable, Sequence

from loguru import logger

from loteria.engine.constants import MATCH_THRESHOLD

_WHITESPACE = re.compile(r"\s+")
_LEADING_INT = re.compile(r"[+-]?\d+")


def _parse_token(token: str) -> int | None:
    """Parse the leading integer of a token ("12abc" -> 12, "x" -> None)."""
    match = _LEADING_INT.match(token)
    if not match:
        return None
    try:
        return int(match.group())
    except ValueError:
        # longer than the int string conversion limit
        return None


def parse_drawn(text: str) -> frozenset[int]:
    """Parse free-form drawn numbers ("1, 2,3 ,4") into a set.

    Unparsable tokens are dropped: they could never match a game number.
    """
    numbers = set()
    for token in _WHITESPACE.sub("", text or "").split(","):
        number = _parse_token(token)
        if number is None:
            if token:
                logger.debug("Ignoring unparsable drawn token: {!r}", token)
            continue
        numbers.add(number)
    return frozenset(numbers)


def count_matches(drawn: frozenset[int], entry: Iterable[int]) -> int:
    """Numbers shared by a game and the draw. Duplicates in the game collapse."""
    return len(drawn.intersection(entry))


def compare(entries: Sequence[Sequence[int]], drawn_text: str) -> dict[int, int]:
    """Tally how many games reached each prize tier.

    Returns {matches: games} for matches above MATCH_THRESHOLD, keyed in order
    of first occurrence. An empty dict means nobody won.
    """
    drawn = parse_drawn(drawn_text)
    tally: dict[int, int] = {}
    if not drawn:
        return tally

    for entry in entries:
        matches = count_matches(drawn, entry)
        if matches > MATCH_THRESHOLD:
            tally[matches] = tally.get(matches, 0) + 1

    logger.debug(
        "Compared {} games against {} drawn numbers: {}",
        len(entries), len(drawn), tally,
    )
    return tally
