"""Mega-Sena domain constants."""

# Entries need more than this many matches to be tallied (4, 5 or 6 acertos).
MATCH_THRESHOLD = 3

TIER_LABELS: dict[int, str] = {
    6: "Sena",
    5: "Quina",
    4: "Quadra",
}

# Cache key of the last loaded games.
GAMES_KEY = "games"
