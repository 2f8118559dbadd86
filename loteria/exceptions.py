"""Application exceptions."""


class LoteriaError(Exception):
    """Base for all application errors."""


class MalformedGamesError(LoteriaError, ValueError):
    """Games file (or cached games) is not a list of lists of integers."""
