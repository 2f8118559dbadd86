"""Pydantic schemas for games and results."""

from pydantic import BaseModel


class SizeSummaryRow(BaseModel):
    length: int
    label: str  # zero-padded length, e.g. "06"
    amount: int


class TallyRow(BaseModel):
    tier: int
    label: str | None  # Sena / Quina / Quadra
    amount: int


class GamesResponse(BaseModel):
    total_games: int
    games: list[list[int]]
    summary: list[SizeSummaryRow]


class CompareRequest(BaseModel):
    drawn: str  # e.g. "1, 2, 3, 4, 5, 6"


class CompareResponse(BaseModel):
    drawn_numbers: list[int]
    total_games: int
    has_winners: bool
    results: list[TallyRow]


class ClearResponse(BaseModel):
    cleared: bool
