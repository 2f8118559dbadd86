"""Game size summary — how many games were played with each amount of numbers."""

from collections.abc import Sequence


def summarize(entries: Sequence[Sequence[int]]) -> dict[int, int]:
    """Count games by their length.

    Length is structural: duplicated numbers inside a game are counted.
    Keys keep the order in which each length first appears.
    """
    summary: dict[int, int] = {}
    for entry in entries:
        size = len(entry)
        summary[size] = summary.get(size, 0) + 1
    return summary
