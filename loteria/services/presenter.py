"""Presentation helpers — ordering, padding and prize labels."""

from loteria.engine.constants import TIER_LABELS
from loteria.schemas.games import SizeSummaryRow, TallyRow


def tier_label(tier: int) -> str | None:
    """Prize name for a match tier (6 -> "Sena"), None if it has no name."""
    return TIER_LABELS.get(tier)


def summary_rows(summary: dict[int, int]) -> list[SizeSummaryRow]:
    """Summary rows, largest games first, with the length zero-padded."""
    return [
        SizeSummaryRow(length=length, label=str(length).zfill(2), amount=amount)
        for length, amount in sorted(summary.items(), key=lambda item: item[0], reverse=True)
    ]


def tally_rows(tally: dict[int, int]) -> list[TallyRow]:
    """Tally rows in the order the engine produced them."""
    return [
        TallyRow(tier=tier, label=tier_label(tier), amount=amount)
        for tier, amount in tally.items()
    ]
